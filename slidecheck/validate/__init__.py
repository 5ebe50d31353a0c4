"""Deterministic validators for slides, sections and timings."""

from .boundary import (
    parse_sections,
    parse_slide_specs,
    parse_slide_units,
    parse_templates,
    parse_text_map,
    parse_timings,
)
from .sections import validate_section
from .slides import validate_slide_spec, validate_slide_specs, validate_slide_unit
from .timing import validate_speech_density, validate_timing_sync

__all__ = [
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
