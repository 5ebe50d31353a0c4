"""TemplateDef contracts."""

from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, ConfigDict, Field, NonNegativeInt, constr, field_validator

from .base import SlideCheckBaseModel

NonEmptyStr = constr(min_length=1)


class TemplateConstraints(SlideCheckBaseModel):
    """Layout limits; a missing or zero limit is not enforced."""

    model_config = ConfigDict(frozen=True)

    bullets_max: Optional[NonNegativeInt] = Field(
        None, validation_alias=AliasChoices("bullets_max", "bulletsMax")
    )
    chars_per_line_max: Optional[NonNegativeInt] = Field(
        None, validation_alias=AliasChoices("chars_per_line_max", "charsPerLineMax")
    )
    lines_max: Optional[NonNegativeInt] = Field(
        None, validation_alias=AliasChoices("lines_max", "linesMax")
    )


class TemplateDef(SlideCheckBaseModel):
    model_config = ConfigDict(frozen=True)

    id: NonEmptyStr = Field(..., description="Unique template key")
    description: str = Field(
        "",
        validation_alias=AliasChoices("description", "desc"),
        description="Human readable layout summary",
    )
    vars: List[NonEmptyStr] = Field(default_factory=list, description="Required variable names")
    constraints: Optional[TemplateConstraints] = None

    @field_validator("vars")
    @classmethod
    def _unique_vars(cls, value: List[str]) -> List[str]:
        seen = set()
        for name in value:
            if name in seen:
                raise ValueError(f"duplicate var name: {name}")
            seen.add(name)
        return value
