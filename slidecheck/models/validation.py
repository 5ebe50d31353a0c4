"""ValidationResult contracts."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Sequence

from pydantic import Field, model_validator

from .base import SlideCheckBaseModel

ErrorCode = Literal[
    "UNKNOWN_TEMPLATE",
    "SLIDE_VALIDATION_ERROR",
    "INVALID_DURATION",
    "TIMING_OVERLAP",
    "UNSORTED_INPUT",
    "MALFORMED_INPUT",
]
WarningCode = Literal[
    "SECTION_TOO_SHORT",
    "SECTION_TOO_LONG",
    "INVALID_INTENT",
    "MISSING_TEXT",
    "SPEECH_TOO_SLOW",
    "SPEECH_TOO_FAST",
    "LARGE_GAP",
]


class ValidationIssue(SlideCheckBaseModel):
    code: str
    message: str
    field: Optional[str] = None
    context: Dict[str, Any] = Field(default_factory=dict)


class ValidationError(ValidationIssue):
    """A finding that blocks acceptance."""

    code: ErrorCode


class ValidationWarning(ValidationIssue):
    """A finding that is accepted but flagged for review."""

    code: WarningCode


class ValidationResult(SlideCheckBaseModel):
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationWarning] = Field(default_factory=list)

    @model_validator(mode="after")
    def _valid_matches_errors(self) -> "ValidationResult":
        if self.valid != (not self.errors):
            raise ValueError("valid must be true exactly when there are no errors")
        return self

    @classmethod
    def build(
        cls,
        errors: Sequence[ValidationError] = (),
        warnings: Sequence[ValidationWarning] = (),
    ) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors), warnings=list(warnings))

    def codes(self) -> List[str]:
        """Return error codes followed by warning codes, in report order."""
        return [e.code for e in self.errors] + [w.code for w in self.warnings]
