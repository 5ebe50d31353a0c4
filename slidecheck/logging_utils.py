"""Structured JSONL run logs for CLI validation runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .models.config import Config
from .models.validation import ValidationResult

RUN_LOG_NAME = "run_log.jsonl"


def run_log_path(config: Config, run_id: Optional[str]) -> Optional[Path]:
    """Return `runs/<run_id>/run_log.jsonl`, or None when no run id was given."""
    if not run_id:
        return None
    return Path(config.runs_dir) / run_id / RUN_LOG_NAME


def log_event(log_path: Path, event_type: str, payload: Dict[str, Any]) -> None:
    """Append one `{timestamp, event_type, payload}` record, creating the run dir."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    record = {
        "timestamp": timestamp.replace("+00:00", "Z"),
        "event_type": event_type,
        "payload": payload,
    }
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, ensure_ascii=True, sort_keys=True) + "\n")


def result_summary(result: ValidationResult) -> Dict[str, Any]:
    """Counts suitable for a VALIDATE_DONE event payload."""
    return {
        "valid": result.valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "codes": sorted(set(result.codes())),
    }
