"""Strict base model shared by every SlideCheck contract."""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class SlideCheckBaseModel(BaseModel):
    """Rejects unknown fields; serializes deterministically.

    Fields may declare camelCase aliases for upstream JSON. Input accepts the
    alias or the attribute name; output always uses the alias, so a report
    round-trips through `model_validate_json`.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=False)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Sorted-key JSON; `indent` is only for files meant to be read by people."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=True, indent=indent)
