"""Timing contracts."""

from __future__ import annotations

from pydantic import Field, NonNegativeFloat, constr

from .base import SlideCheckBaseModel

NonEmptyStr = constr(min_length=1)


class Timing(SlideCheckBaseModel):
    line_id: NonEmptyStr = Field(..., alias="lineId")
    start_sec: NonNegativeFloat = Field(..., alias="startSec")
    end_sec: NonNegativeFloat = Field(..., alias="endSec")
    gap_after_sec: NonNegativeFloat = Field(0.0, alias="gapAfterSec")

    @property
    def duration(self) -> float:
        return self.end_sec - self.start_sec
