"""SlideUnit contracts."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, constr

from .base import SlideCheckBaseModel

NonEmptyStr = constr(min_length=1)
AssetKind = Literal["image", "svg", "audio", "video"]

# Written by asset resolution when a reference could not be resolved.
MISSING_ASSET_PATH = "missing://"


class AssetRef(SlideCheckBaseModel):
    kind: AssetKind = Field(..., description="image|svg|audio|video")
    path: Optional[str] = Field(None, description="Resolved asset path; None when unresolved")
    license: Optional[str] = None
    attribution: Optional[str] = None

    @property
    def is_unresolved(self) -> bool:
        return not self.path or self.path == MISSING_ASSET_PATH


class SlideUnit(SlideCheckBaseModel):
    template: NonEmptyStr = Field(..., description="TemplateDef id")
    vars: Dict[str, Any] = Field(default_factory=dict)
    assets: List[AssetRef] = Field(default_factory=list)


class SlideSpec(SlideCheckBaseModel):
    section_id: NonEmptyStr
    slides: List[SlideUnit] = Field(default_factory=list)
