"""Section length and intent checks."""

from __future__ import annotations

from typing import List

from ..models.section import INTENT_TYPES, Section
from ..models.validation import ValidationResult, ValidationWarning

# Recommended narration length for one slide, in characters.
SECTION_MIN_CHARS = 300
SECTION_MAX_CHARS = 600


def validate_section(section: Section) -> ValidationResult:
    """Check section length and intent tags. Findings are warnings only."""
    warnings: List[ValidationWarning] = []
    length = len(section.text)

    if length < SECTION_MIN_CHARS:
        warnings.append(ValidationWarning(
            code="SECTION_TOO_SHORT",
            message=f"Section text is shorter than recommended: {length} < {SECTION_MIN_CHARS}",
            field="text",
            context={"section_id": section.id, "length": length},
        ))

    if length > SECTION_MAX_CHARS:
        warnings.append(ValidationWarning(
            code="SECTION_TOO_LONG",
            message=f"Section text is longer than recommended: {length} > {SECTION_MAX_CHARS}",
            field="text",
            context={"section_id": section.id, "length": length},
        ))

    for idx, intent in enumerate(section.intents or []):
        if intent not in INTENT_TYPES:
            warnings.append(ValidationWarning(
                code="INVALID_INTENT",
                message=f"Unknown intent type: {intent}",
                field=f"intents[{idx}]",
                context={"section_id": section.id, "intent": intent},
            ))

    return ValidationResult.build(warnings=warnings)
