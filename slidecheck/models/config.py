"""Config model."""

from __future__ import annotations

from pydantic import Field, constr

from .base import SlideCheckBaseModel

NonEmptyStr = constr(min_length=1)


class Config(SlideCheckBaseModel):
    project_root: NonEmptyStr = Field(..., description="Project root directory")
    assets_dir: NonEmptyStr = Field(..., description="Canonical assets directory")
    templates_path: NonEmptyStr = Field(..., description="Template catalog JSON path")
    inputs_dir: NonEmptyStr = Field(..., description="Inputs directory")
    runs_dir: NonEmptyStr = Field(..., description="Runs output directory")
