"""Validation result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FailureReason(Enum):
    """Why an attempt failed.

    OUT_OF_ORDER is raised by the per-sample loop. INSUFFICIENT_COVERAGE
    and EXCESSIVE_OUTSIDE are only raised by the summary pass
    (validation.summary.apply_summary_checks).
    """
    OUT_OF_ORDER = 'out_of_order'
    INSUFFICIENT_COVERAGE = 'insufficient_coverage'
    EXCESSIVE_OUTSIDE = 'excessive_outside'


@dataclass
class CheckpointProgress:
    """Mutable per-checkpoint state for one evaluation run."""
    has_contact: bool = False
    touched_start: bool = False
    max_progress: float = 0.0
    completed: bool = False


@dataclass(frozen=True)
class CheckpointStatus:
    """Published state of one checkpoint."""
    path_id: str
    path_index: int
    global_index: int
    completed: bool
    has_contact: bool


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of replaying a sample stream against a plan.

    Attributes:
        checkpoint_statuses: One status per checkpoint, in global order.
        active_checkpoint_index: Pointer position; on failure, the index
            at which the failure was detected.
        total_checkpoint_count: Number of checkpoints in the plan.
        failure: Failure reason, or None.
    """
    checkpoint_statuses: tuple[CheckpointStatus, ...] = field(default_factory=tuple)
    active_checkpoint_index: int = 0
    total_checkpoint_count: int = 0
    failure: FailureReason | None = None

    @property
    def completed_checkpoint_count(self) -> int:
        return sum(1 for s in self.checkpoint_statuses if s.completed)

    @property
    def is_complete(self) -> bool:
        return self.failure is None and self.active_checkpoint_index >= self.total_checkpoint_count

    def completed_indices(self) -> set[int]:
        return {s.global_index for s in self.checkpoint_statuses if s.completed}

    def _path_completion(self) -> dict[int, bool]:
        done: dict[int, bool] = {}
        for status in self.checkpoint_statuses:
            done[status.path_index] = done.get(status.path_index, True) and status.completed
        return done

    def completed_stroke_count(self) -> int:
        """Number of strokes whose checkpoints are all completed."""
        return sum(1 for complete in self._path_completion().values() if complete)

    def first_incomplete_path_index(self) -> int | None:
        """Draw-order index of the first stroke with an open checkpoint."""
        for path_index, complete in sorted(self._path_completion().items()):
            if not complete:
                return path_index
        return None
