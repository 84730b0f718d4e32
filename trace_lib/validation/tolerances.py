"""Adaptive capture bands for a single checkpoint.

All values are in normalized progress units of the owning stroke. Physical
tolerances scale with the checkpoint length and the caller's ink width.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..planning.plan import Checkpoint, TracePath
from ..settings import (
    END_TOLERANCE_INK_MULTIPLIER,
    END_TOLERANCE_LENGTH_FRACTION,
    END_TOLERANCE_SPAN_CAP,
    MINIMUM_ADVANCE_FRACTION,
    START_CAPTURE_SPAN_CAP,
    START_TOLERANCE_INK_MULTIPLIER,
    START_TOLERANCE_LENGTH_FRACTION,
)


@dataclass(frozen=True)
class CaptureBands:
    """Progress thresholds for one checkpoint.

    Attributes:
        accept_from: Samples before this progress are ignored.
        start_capture_until: Samples up to here count as touching the start.
        completion_threshold: max_progress needed (with a start touch)
            to complete.
    """
    accept_from: float
    start_capture_until: float
    completion_threshold: float


def capture_bands(checkpoint: Checkpoint, path: TracePath, ink_width: float) -> CaptureBands:
    """Compute the start/end bands for ``checkpoint`` on ``path``."""
    start = checkpoint.start_progress
    if path.is_degenerate:
        # A dot completes on any in-corridor visit
        return CaptureBands(start, start, start)

    total = path.total_length
    span = checkpoint.span

    start_tolerance = max(checkpoint.length * START_TOLERANCE_LENGTH_FRACTION,
                          ink_width * START_TOLERANCE_INK_MULTIPLIER) / total
    end_tolerance = max(checkpoint.length * END_TOLERANCE_LENGTH_FRACTION,
                        ink_width * END_TOLERANCE_INK_MULTIPLIER) / total

    forward_capture = min(start_tolerance, span * START_CAPTURE_SPAN_CAP)
    end_tolerance = min(end_tolerance, span * END_TOLERANCE_SPAN_CAP)

    threshold = max(checkpoint.end_progress - end_tolerance,
                    start + span * MINIMUM_ADVANCE_FRACTION)
    return CaptureBands(
        accept_from=start - start_tolerance,
        start_capture_until=start + forward_capture,
        completion_threshold=threshold,
    )
