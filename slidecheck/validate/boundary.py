"""Parse untrusted JSON payloads into strict models.

LLM responses and upstream files are checked here before any validator sees
them. Each parser keeps the well-formed items, in order, and reports every
malformed item as ``MALFORMED_INPUT`` errors instead of raising.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from ..models.section import Section
from ..models.slide import SlideSpec, SlideUnit
from ..models.template import TemplateDef
from ..models.timing import Timing
from ..models.validation import ValidationError, ValidationResult

ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_loc(collection: str, index: int, loc: Tuple[Any, ...]) -> str:
    path = f"{collection}[{index}]"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _schema_errors(collection: str, index: int, exc: SchemaError) -> List[ValidationError]:
    return [
        ValidationError(
            code="MALFORMED_INPUT",
            message=f"{collection}[{index}]: {err['msg']}",
            field=_format_loc(collection, index, err["loc"]),
            context={"index": index, "error_type": err["type"]},
        )
        for err in exc.errors()
    ]


def _parse_list(
    payload: Any, model: Type[ModelT], collection: str
) -> Tuple[List[ModelT], ValidationResult]:
    if not isinstance(payload, list):
        error = ValidationError(
            code="MALFORMED_INPUT",
            message=f"{collection} must be a list, got {type(payload).__name__}",
            field=collection,
            context={"error_type": "list_type"},
        )
        return [], ValidationResult.build(errors=[error])

    items: List[ModelT] = []
    errors: List[ValidationError] = []
    for index, entry in enumerate(payload):
        try:
            items.append(model.model_validate(entry))
        except SchemaError as exc:
            errors.extend(_schema_errors(collection, index, exc))
    return items, ValidationResult.build(errors=errors)


def parse_templates(payload: Any) -> Tuple[List[TemplateDef], ValidationResult]:
    return _parse_list(payload, TemplateDef, "templates")


def parse_slide_units(payload: Any) -> Tuple[List[SlideUnit], ValidationResult]:
    return _parse_list(payload, SlideUnit, "slides")


def parse_slide_specs(payload: Any) -> Tuple[List[SlideSpec], ValidationResult]:
    return _parse_list(payload, SlideSpec, "specs")


def parse_sections(payload: Any) -> Tuple[List[Section], ValidationResult]:
    return _parse_list(payload, Section, "sections")


def parse_timings(payload: Any) -> Tuple[List[Timing], ValidationResult]:
    return _parse_list(payload, Timing, "timings")


def parse_text_map(payload: Any) -> Tuple[Dict[str, str], ValidationResult]:
    """Parse a ``{line_id: text}`` mapping, dropping non-string entries."""
    if not isinstance(payload, dict):
        error = ValidationError(
            code="MALFORMED_INPUT",
            message=f"lines must be an object, got {type(payload).__name__}",
            field="lines",
            context={"error_type": "dict_type"},
        )
        return {}, ValidationResult.build(errors=[error])

    texts: Dict[str, str] = {}
    errors: List[ValidationError] = []
    for line_id, text in payload.items():
        if isinstance(text, str):
            texts[line_id] = text
            continue
        errors.append(ValidationError(
            code="MALFORMED_INPUT",
            message=f"lines.{line_id}: text must be a string",
            field=f"lines.{line_id}",
            context={"line_id": line_id, "error_type": "string_type"},
        ))
    return texts, ValidationResult.build(errors=errors)
