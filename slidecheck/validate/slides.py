"""Slide constraint validation against the template catalog."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..models.slide import SlideSpec, SlideUnit
from ..models.template import TemplateDef
from ..models.validation import ValidationError, ValidationResult
from ..registry import TemplateRegistry

# Code blocks keep their own line lengths.
CODE_VAR = "code"
BULLETS_VAR = "bullets"
SEQUENCE_TYPES = (list, tuple)

TemplateCatalog = Union[TemplateRegistry, Iterable[TemplateDef]]


def _split_lines(value: str) -> List[str]:
    return value.split("\n")


def _count_lines(name: str, value: Any) -> int:
    """Count the lines a variable occupies on the slide."""
    if isinstance(value, str):
        return 0 if name == CODE_VAR else len(_split_lines(value))
    elif isinstance(value, SEQUENCE_TYPES):
        return len(value)
    return 0


def _check_required_vars(unit: SlideUnit, template: TemplateDef) -> List[str]:
    return [f"missing var: {name}" for name in template.vars if name not in unit.vars]


def _check_bullets(bullets: Sequence[Any], bullets_max: int, chars_per_line_max: Optional[int]) -> List[str]:
    errors: List[str] = []
    if len(bullets) > bullets_max:
        errors.append(f"too many bullets: {len(bullets)} > {bullets_max}")

    if chars_per_line_max:
        for idx, bullet in enumerate(bullets):
            if isinstance(bullet, str) and len(bullet) > chars_per_line_max:
                errors.append(f"bullet[{idx}] too long: {len(bullet)} > {chars_per_line_max}")
    return errors


def _check_line_lengths(fields: Dict[str, Any], chars_per_line_max: int) -> List[str]:
    errors: List[str] = []
    for name, value in fields.items():
        if not isinstance(value, str) or name == CODE_VAR:
            continue
        for idx, line in enumerate(_split_lines(value)):
            if len(line) > chars_per_line_max:
                errors.append(f"{name}[line {idx}] too long: {len(line)} > {chars_per_line_max}")
    return errors


def _check_assets(unit: SlideUnit) -> List[str]:
    return [
        f"asset[{idx}] has missing path"
        for idx, asset in enumerate(unit.assets)
        if asset.is_unresolved
    ]


def validate_slide_unit(unit: SlideUnit, template: TemplateDef) -> List[str]:
    """Validate a single slide against its template; empty list means pass."""
    errors = _check_required_vars(unit, template)

    constraints = template.constraints
    if constraints is not None:
        bullets = unit.vars.get(BULLETS_VAR)
        if constraints.bullets_max and isinstance(bullets, SEQUENCE_TYPES):
            errors.extend(
                _check_bullets(bullets, constraints.bullets_max, constraints.chars_per_line_max)
            )

        if constraints.chars_per_line_max:
            errors.extend(_check_line_lengths(unit.vars, constraints.chars_per_line_max))

        if constraints.lines_max:
            total_lines = sum(_count_lines(name, value) for name, value in unit.vars.items())
            if total_lines > constraints.lines_max:
                errors.append(f"too many lines: {total_lines} > {constraints.lines_max}")

    errors.extend(_check_assets(unit))
    return errors


def validate_slide_spec(slides: Sequence[SlideUnit], templates: TemplateCatalog) -> ValidationResult:
    """Validate every slide, resolving templates by id from the catalog.

    An unknown template is reported once and skips that slide's remaining
    checks; other slides are validated independently. Never emits warnings.
    """
    registry = templates if isinstance(templates, TemplateRegistry) else TemplateRegistry(templates)
    errors: List[ValidationError] = []

    for idx, slide in enumerate(slides):
        context = {"slide_index": idx, "template_id": slide.template}
        template = registry.get(slide.template)
        if template is None:
            errors.append(ValidationError(
                code="UNKNOWN_TEMPLATE",
                message=f"Unknown template: {slide.template}",
                field=f"slides[{idx}].template",
                context=context,
            ))
            continue

        for message in validate_slide_unit(slide, template):
            errors.append(ValidationError(
                code="SLIDE_VALIDATION_ERROR",
                message=message,
                field=f"slides[{idx}]",
                context=dict(context),
            ))

    return ValidationResult.build(errors=errors)


def validate_slide_specs(specs: Sequence[SlideSpec], templates: TemplateCatalog) -> ValidationResult:
    """Validate slides grouped by section, indexed in flattened order."""
    slides = [slide for spec in specs for slide in spec.slides]
    return validate_slide_spec(slides, templates)
