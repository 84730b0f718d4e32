"""Ordered checkpoint validation.

The validator replays the full, timestamp-ordered ink stream against a
checkpoint plan and reports which checkpoints were satisfied, where the
pointer stands, and whether the attempt failed. It keeps no state between
calls: callers re-run it on every ink event with all committed samples plus
the live stroke, and simply drop results that went stale.

Per sample, in timestamp order:
    1. Stop once a failure is recorded.
    2. Project the sample onto the stroke owning the pointer checkpoint.
    3. Inside the corridor and past the checkpoint's acceptance band, record
       contact and the furthest progress; a start touch plus enough advance
       completes the checkpoint and moves the pointer.
    4. Leaving the corridor keeps the partial progress.
    5. For samples that did not advance the pointer, find the globally
       nearest checkpoint. Ink inside the corridor on a later checkpoint of
       a different stroke is an out-of-order attempt.

Example usage::

    from trace_lib.validation import CheckpointValidator

    result = CheckpointValidator.evaluate(template, configuration,
                                          committed=committed, live=live)
    if result.failure is not None:
        reset_row()
    elif result.is_complete:
        advance_row()
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..domain.samples import InkSample, merge_samples
from ..domain.template import StrokeTemplate
from ..planning.plan import CheckpointPlan, make_plan
from ..profiles.difficulty import ValidationConfiguration
from .result import CheckpointProgress, CheckpointStatus, FailureReason, ValidationResult
from .tolerances import capture_bands

logger = logging.getLogger(__name__)


class CheckpointValidator:
    """Stateless evaluator of ink against an ordered checkpoint plan."""

    @staticmethod
    def evaluate(template: StrokeTemplate,
                 configuration: ValidationConfiguration,
                 committed: Iterable[InkSample] = (),
                 live: Iterable[InkSample] = (),
                 plan: CheckpointPlan | None = None) -> ValidationResult:
        """Replay ink samples and produce a fresh ValidationResult.

        Args:
            template: Reference strokes of the glyph.
            configuration: Corridor radius, checkpoint lengths and ink width.
            committed: Samples of finalized strokes.
            live: Samples of the stroke still being drawn.
            plan: Precomputed plan for this template and configuration.
                Built on the fly when omitted.

        Returns:
            ValidationResult. Only OUT_OF_ORDER is raised here; the coverage
            and outside-ink failures come from the summary pass.
        """
        if plan is None:
            plan = make_plan(template, configuration.checkpoint_length, configuration.spacing_length)

        if plan.total_checkpoint_count == 0:
            return ValidationResult()

        samples = merge_samples(committed, live)
        return run_checkpoints(plan, samples, configuration)


def run_checkpoints(plan: CheckpointPlan,
                    samples: list[InkSample],
                    configuration: ValidationConfiguration) -> ValidationResult:
    """Advance the checkpoint pointer through already-ordered samples."""
    descriptors = plan.descriptors()
    total = len(descriptors)
    bands = [
        capture_bands(c, plan.paths[c.path_index], configuration.ink_width)
        for c in descriptors
    ]
    states = [CheckpointProgress() for _ in descriptors]
    radius = configuration.corridor_radius

    pointer = 0
    failure = None
    failure_index = None

    for sample in samples:
        if failure is not None:
            break

        if pointer < total:
            checkpoint = descriptors[pointer]
            projection = plan.paths[checkpoint.path_index].projection(sample.location)
            band = bands[pointer]

            if projection.distance <= radius and projection.progress >= band.accept_from:
                state = states[pointer]
                state.has_contact = True
                state.max_progress = max(state.max_progress, projection.progress)
                if (projection.progress <= band.start_capture_until
                        or state.max_progress <= checkpoint.start_progress):
                    state.touched_start = True

                if state.touched_start and state.max_progress >= band.completion_threshold:
                    state.completed = True
                    pointer += 1
                    continue

        if pointer < total:
            jumped_to = _jump_ahead_index(plan, sample, pointer, descriptors[pointer].path_index, radius)
            if jumped_to is not None:
                failure = FailureReason.OUT_OF_ORDER
                failure_index = jumped_to
                logger.debug("Out-of-order ink at t=%.3f: checkpoint %d reached while pointer at %d",
                             sample.timestamp, jumped_to, pointer)

    statuses = tuple(
        CheckpointStatus(
            path_id=plan.paths[c.path_index].id,
            path_index=c.path_index,
            global_index=c.global_index,
            completed=state.completed,
            has_contact=state.has_contact,
        )
        for c, state in zip(descriptors, states)
    )

    logger.debug("Evaluated %d samples: pointer %d/%d, failure=%s",
                 len(samples), pointer, total, failure)
    return ValidationResult(
        checkpoint_statuses=statuses,
        active_checkpoint_index=pointer if failure is None else failure_index,
        total_checkpoint_count=total,
        failure=failure,
    )


def _jump_ahead_index(plan: CheckpointPlan, sample: InkSample, pointer: int,
                      pointer_path_index: int, radius: float) -> int | None:
    """Global index of a later checkpoint on another stroke hit by ``sample``."""
    nearest = plan.nearest_path(sample.location)
    if nearest is None:
        return None

    path_index, projection = nearest
    if projection.distance > radius or path_index == pointer_path_index:
        return None

    path = plan.paths[path_index]
    local = path.checkpoint_index_for(projection.progress)
    if local is None:
        return None

    global_index = path.checkpoints[local].global_index
    return global_index if global_index > pointer else None
