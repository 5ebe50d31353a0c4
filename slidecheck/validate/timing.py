"""Speech density and subtitle timing synchronization checks.

Both checks are pure functions over a sequence of ``Timing`` records. The sync
check walks adjacent pairs in the order given and never sorts; a pair that
goes backwards in time is reported as ``UNSORTED_INPUT``.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..models.timing import Timing
from ..models.validation import ValidationError, ValidationResult, ValidationWarning

# Acceptable narration speed band, characters per second (inclusive).
SPEECH_DENSITY_MIN = 12
SPEECH_DENSITY_MAX = 28

# Silence between utterances above this many seconds is flagged.
LARGE_GAP_SEC = 1.0

# Pauses timing generators insert after a line, in seconds.
PAUSE_RULES = {
    "continuous": 0.1,
    "topic_change": 0.35,
    "section_break": 0.5,
}


def speech_rate(text: str, duration: float) -> float:
    """Characters per second; ``duration`` must be positive."""
    return len(text) / duration


def validate_speech_density(
    timings: Sequence[Timing], text_by_line_id: Mapping[str, str]
) -> ValidationResult:
    """Check narration speed of each timing against its line's text."""
    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []

    for idx, timing in enumerate(timings):
        text = text_by_line_id.get(timing.line_id)
        if not text:
            warnings.append(ValidationWarning(
                code="MISSING_TEXT",
                message=f"No text found for lineId: {timing.line_id}",
                field=f"timings[{idx}].lineId",
                context={"line_id": timing.line_id},
            ))
            continue

        duration = timing.duration
        if duration <= 0:
            errors.append(ValidationError(
                code="INVALID_DURATION",
                message=f"Invalid duration for lineId {timing.line_id}: {duration}",
                field=f"timings[{idx}]",
                context={"line_id": timing.line_id, "duration": duration},
            ))
            continue

        chars_per_sec = speech_rate(text, duration)
        if chars_per_sec < SPEECH_DENSITY_MIN:
            warnings.append(ValidationWarning(
                code="SPEECH_TOO_SLOW",
                message=f"Speech density too low: {chars_per_sec:.2f} < {SPEECH_DENSITY_MIN}",
                field=f"timings[{idx}]",
                context={
                    "line_id": timing.line_id,
                    "chars_per_sec": round(chars_per_sec, 2),
                    "min": SPEECH_DENSITY_MIN,
                },
            ))
        elif chars_per_sec > SPEECH_DENSITY_MAX:
            warnings.append(ValidationWarning(
                code="SPEECH_TOO_FAST",
                message=f"Speech density too high: {chars_per_sec:.2f} > {SPEECH_DENSITY_MAX}",
                field=f"timings[{idx}]",
                context={
                    "line_id": timing.line_id,
                    "chars_per_sec": round(chars_per_sec, 2),
                    "max": SPEECH_DENSITY_MAX,
                },
            ))

    return ValidationResult.build(errors=errors, warnings=warnings)


def validate_timing_sync(timings: Sequence[Timing]) -> ValidationResult:
    """Check adjacent timings for overlap, ordering and long silences.

    Callers must pass timings sorted by ``start_sec``.
    """
    errors: List[ValidationError] = []
    warnings: List[ValidationWarning] = []

    for idx in range(len(timings) - 1):
        current = timings[idx]
        following = timings[idx + 1]
        pair = {"current_id": current.line_id, "next_id": following.line_id}

        if following.start_sec < current.start_sec:
            errors.append(ValidationError(
                code="UNSORTED_INPUT",
                message=(
                    f"Timings out of order: {following.line_id} starts before "
                    f"{current.line_id} ({following.start_sec} < {current.start_sec})"
                ),
                field=f"timings[{idx + 1}].startSec",
                context={**pair, "current_start": current.start_sec, "next_start": following.start_sec},
            ))

        # The next line may begin once this line and its pause are over.
        current_end = current.end_sec + current.gap_after_sec
        if current_end > following.start_sec:
            errors.append(ValidationError(
                code="TIMING_OVERLAP",
                message=f"Timing overlap detected between {current.line_id} and {following.line_id}",
                field=f"timings[{idx + 1}].startSec",
                context={**pair, "current_end": current_end, "next_start": following.start_sec},
            ))

        gap = following.start_sec - current_end
        if gap > LARGE_GAP_SEC:
            warnings.append(ValidationWarning(
                code="LARGE_GAP",
                message=(
                    f"Large gap detected: {gap:.2f}s between "
                    f"{current.line_id} and {following.line_id}"
                ),
                field=f"timings[{idx + 1}].startSec",
                context={**pair, "gap": round(gap, 2)},
            ))

    return ValidationResult.build(errors=errors, warnings=warnings)
