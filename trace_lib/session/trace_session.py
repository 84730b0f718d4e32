"""Row-attempt orchestration around the checkpoint validator.

TraceSession holds the state the validator does not: the buffers of
committed and live samples, the plan cache, the current configuration, and
the reaction to failures (full reset plus a paced warning). Every call to
evaluate() returns a SessionUpdate value; callers re-render from it.

Example usage::

    from trace_lib.profiles import Difficulty
    from trace_lib.session import TraceSession

    session = TraceSession(template, Difficulty.INTERMEDIATE.profile,
                           row_height=120, visual_start_radius=12, ink_width=6,
                           feedback_sink=haptics_queue.put)
    session.update_live(live_samples)
    update = session.evaluate()
    if update.reset:
        canvas.clear()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from ..domain.samples import InkSample, SampleClass, merge_samples
from ..domain.template import StrokeTemplate
from ..feedback.providers import FeedbackProvider, FeedbackSink, provider_for_style
from ..planning.cache import PlanCache
from ..planning.plan import CheckpointPlan
from ..profiles.difficulty import DifficultyProfile, ValidationConfiguration
from ..validation.result import FailureReason, ValidationResult
from ..validation.summary import SummaryReport, apply_summary_checks, summarize
from ..validation.validator import run_checkpoints

logger = logging.getLogger(__name__)

WARNING_MESSAGES = {
    FailureReason.OUT_OF_ORDER: "Follow the strokes in order, starting at the green dot.",
    FailureReason.INSUFFICIENT_COVERAGE: "Trace the whole letter before lifting.",
    FailureReason.EXCESSIVE_OUTSIDE: "Stay inside the guide.",
}


@dataclass(frozen=True)
class SessionUpdate:
    """State produced by one evaluation.

    Attributes:
        result: Validation result, summary checks applied.
        summary: Whole-attempt statistics behind the summary checks.
        warning: Message to show, or None. Suppressed during cooldown.
        reset: True when the attempt failed and the buffers were cleared.
    """
    result: ValidationResult
    summary: SummaryReport
    warning: str | None = None
    reset: bool = False


class TraceSession:
    """One row's tracing attempt against a template.

    Attributes:
        template: Reference strokes being traced.
        profile: Active difficulty profile.
        configuration: Tolerances derived from profile and row metrics.
    """

    def __init__(self, template: StrokeTemplate, profile: DifficultyProfile,
                 row_height: float, visual_start_radius: float, ink_width: float,
                 feedback_sink: FeedbackSink | None = None,
                 feedback: FeedbackProvider | None = None,
                 clock: Callable[[], float] = time.monotonic,
                 plan_cache: PlanCache | None = None):
        self.template = template
        self._row_height = row_height
        self._visual_start_radius = visual_start_radius
        self._ink_width = ink_width
        self._feedback_sink = feedback_sink
        self._explicit_feedback = feedback
        self._clock = clock
        self._plan_cache = plan_cache if plan_cache is not None else PlanCache()

        self._committed: list[InkSample] = []
        self._live: list[InkSample] = []
        self._last_warning_at: float | None = None
        self._completed_announced = False

        self.set_profile(profile)

    @property
    def plan(self) -> CheckpointPlan:
        return self._plan_cache.get(self.template,
                                    self.configuration.checkpoint_length,
                                    self.configuration.spacing_length)

    @property
    def committed_samples(self) -> list[InkSample]:
        return list(self._committed)

    def set_profile(self, profile: DifficultyProfile) -> None:
        """Switch tier; recomputes configuration and feedback provider."""
        self.profile = profile
        self.feedback = self._explicit_feedback or provider_for_style(profile.haptic_style,
                                                                      self._feedback_sink)
        self._refresh_configuration()

    def set_row_metrics(self, row_height: float, visual_start_radius: float | None = None,
                        ink_width: float | None = None) -> None:
        """Update the row's physical scale and recompute configuration."""
        self._row_height = row_height
        if visual_start_radius is not None:
            self._visual_start_radius = visual_start_radius
        if ink_width is not None:
            self._ink_width = ink_width
        self._refresh_configuration()

    def _refresh_configuration(self) -> None:
        self.configuration: ValidationConfiguration = self.profile.validation_configuration(
            self._row_height, self._visual_start_radius, self._ink_width)
        logger.debug("Configuration for %r: corridor=%.2f checkpoint=%.2f spacing=%.2f",
                     self.template.key, self.configuration.corridor_radius,
                     self.configuration.checkpoint_length, self.configuration.spacing_length)

    def update_live(self, samples: Iterable[InkSample]) -> None:
        """Replace the in-progress stroke's samples."""
        self._live = [InkSample(s.location, s.timestamp, SampleClass.LIVE) for s in samples]

    def commit_stroke(self, samples: Iterable[InkSample] | None = None) -> None:
        """Finalize a stroke.

        Args:
            samples: The finished stroke. When omitted, the current live
                samples are committed as they are.
        """
        finished = self._live if samples is None else list(samples)
        self._committed.extend(InkSample(s.location, s.timestamp, SampleClass.COMMITTED)
                               for s in finished)
        self._live = []

    def reset(self) -> None:
        """Discard all ink for a fresh attempt."""
        self._committed.clear()
        self._live.clear()
        self._completed_announced = False

    def evaluate(self) -> SessionUpdate:
        """Validate the accumulated ink and react to the outcome."""
        plan = self.plan
        samples = merge_samples(self._committed, self._live)
        result = run_checkpoints(plan, samples, self.configuration)
        summary = summarize(plan, samples, self.configuration)
        result = apply_summary_checks(result, summary, self.configuration)

        if result.failure is not None:
            warning = self._warn(result.failure)
            logger.info("Attempt on %r failed: %s at checkpoint %d/%d",
                        self.template.key, result.failure.value,
                        result.active_checkpoint_index, result.total_checkpoint_count)
            self.reset()
            return SessionUpdate(result, summary, warning=warning, reset=True)

        if result.is_complete and not self._completed_announced:
            self._completed_announced = True
            self.feedback.success()
            logger.info("Attempt on %r complete (%d checkpoints)",
                        self.template.key, result.total_checkpoint_count)

        return SessionUpdate(result, summary)

    def _warn(self, failure: FailureReason) -> str | None:
        now = self._clock()
        if (self._last_warning_at is not None
                and now - self._last_warning_at < self.profile.warning_cooldown):
            return None
        self._last_warning_at = now
        self.feedback.warning()
        return WARNING_MESSAGES[failure]
