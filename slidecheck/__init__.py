"""SlideCheck: deterministic validation for LLM-authored slides, sections and timings."""

from .registry import DuplicateTemplateError, TemplateCatalogError, TemplateRegistry, load_templates
from .validate import (
    parse_sections,
    parse_slide_specs,
    parse_slide_units,
    parse_templates,
    parse_text_map,
    parse_timings,
    validate_section,
    validate_slide_spec,
    validate_slide_specs,
    validate_slide_unit,
    validate_speech_density,
    validate_timing_sync,
)

__all__ = [
    "DuplicateTemplateError",
    "TemplateCatalogError",
    "TemplateRegistry",
    "load_templates",
    "parse_sections",
    "parse_slide_specs",
    "parse_slide_units",
    "parse_templates",
    "parse_text_map",
    "parse_timings",
    "validate_section",
    "validate_slide_spec",
    "validate_slide_specs",
    "validate_slide_unit",
    "validate_speech_density",
    "validate_timing_sync",
]
