"""Summary pass over a whole attempt.

The per-sample loop only judges ordering. This secondary pass looks at the
attempt as a whole and can raise the two remaining failure reasons:

    EXCESSIVE_OUTSIDE: too large a share of the ink lies outside every
        stroke's corridor.
    INSUFFICIENT_COVERAGE: the pointer reached the end but the ink covers
        too little of the reference paths.

Coverage resamples each reference path at half the corridor radius and
asks a KD-tree over the ink samples for the nearest sample to each
reference point.

Example usage::

    from trace_lib.validation import apply_summary_checks, summarize

    report = summarize(plan, samples, configuration)
    result = apply_summary_checks(result, report, configuration)
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

import numpy as np
from scipy.spatial import cKDTree

from ..domain.samples import InkSample
from ..planning.plan import CheckpointPlan
from ..profiles.difficulty import ValidationConfiguration
from ..settings import COVERAGE_STEP_FRACTION, MIN_SUMMARY_SAMPLES
from ..utils.geometry import resample_path
from .result import FailureReason, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryReport:
    """Whole-attempt ink statistics.

    Attributes:
        coverage_ratio: Fraction of resampled reference points with ink
            within the corridor radius (0.0 to 1.0).
        outside_ratio: Fraction of samples outside every corridor.
        sample_count: Number of samples considered.
    """
    coverage_ratio: float
    outside_ratio: float
    sample_count: int


def reference_points(plan: CheckpointPlan, step: float) -> np.ndarray:
    """Evenly spaced points along every path of the plan, shape (N, 2)."""
    chunks = []
    for path in plan.paths:
        coords = [p.to_tuple() for p in path.points] or [path.start_point.to_tuple()]
        if path.is_degenerate or step <= 0:
            chunks.append(np.array(coords[:1], dtype=np.float64))
            continue
        count = max(2, int(np.ceil(path.total_length / step)) + 1)
        chunks.append(np.array(resample_path(coords, count), dtype=np.float64))
    if not chunks:
        return np.empty((0, 2), dtype=np.float64)
    return np.vstack(chunks)


def summarize(plan: CheckpointPlan,
              samples: list[InkSample],
              configuration: ValidationConfiguration) -> SummaryReport:
    """Compute coverage and outside-ink ratios for an attempt."""
    radius = configuration.corridor_radius
    if not samples or not plan.paths:
        return SummaryReport(0.0, 0.0, len(samples))

    outside = 0
    for sample in samples:
        nearest = plan.nearest_path(sample.location)
        if nearest is None or nearest[1].distance > radius:
            outside += 1

    ink = np.array([s.location.to_tuple() for s in samples], dtype=np.float64)
    reference = reference_points(plan, radius * COVERAGE_STEP_FRACTION)
    if len(reference) == 0:
        coverage = 0.0
    else:
        distances, _ = cKDTree(ink).query(reference)
        coverage = float(np.mean(distances <= radius))

    return SummaryReport(
        coverage_ratio=coverage,
        outside_ratio=outside / len(samples),
        sample_count=len(samples),
    )


def apply_summary_checks(result: ValidationResult,
                         report: SummaryReport,
                         configuration: ValidationConfiguration) -> ValidationResult:
    """Fold the summary report into a per-sample result.

    An existing failure is never replaced. Outside ink is judged once at
    least MIN_SUMMARY_SAMPLES samples exist; coverage is judged only for
    results whose pointer already reached the end.

    Returns:
        The same result, or a copy carrying the summary failure.
    """
    if result.failure is not None:
        return result

    failure = None
    if (report.sample_count >= MIN_SUMMARY_SAMPLES
            and report.outside_ratio > configuration.outside_allowance):
        failure = FailureReason.EXCESSIVE_OUTSIDE
    elif (result.total_checkpoint_count > 0 and result.is_complete
            and report.coverage_ratio < configuration.coverage_threshold):
        failure = FailureReason.INSUFFICIENT_COVERAGE

    if failure is None:
        return result

    logger.debug("Summary failure %s (coverage=%.2f, outside=%.2f)",
                 failure.value, report.coverage_ratio, report.outside_ratio)
    return dataclasses.replace(result, failure=failure)
