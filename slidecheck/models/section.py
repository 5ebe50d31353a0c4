"""Section contracts."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field, NonNegativeInt, constr

from .base import SlideCheckBaseModel

NonEmptyStr = constr(min_length=1)

IntentType = Literal[
    "summary",
    "procedure",
    "caution",
    "tip",
    "example",
    "intro",
    "conclusion",
]
INTENT_TYPES = frozenset(IntentType.__args__)


class Section(SlideCheckBaseModel):
    id: NonEmptyStr
    script_id: NonEmptyStr = Field(..., alias="scriptId")
    order: NonNegativeInt = Field(..., description="Zero-based position within the script")
    text: str
    # Plain strings: tags outside IntentType are reported, not rejected.
    intents: Optional[List[str]] = None
