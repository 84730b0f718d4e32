"""Unit tests for the secondary summary pass.

Tests trace_lib.validation.summary:
    - summarize: coverage and outside-ink ratios
    - apply_summary_checks: EXCESSIVE_OUTSIDE / INSUFFICIENT_COVERAGE rules
    - reference_points: resampling of the plan's paths
"""

import dataclasses
import sys
import unittest
from pathlib import Path

# Add parent dirs to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from glyphs import configuration_for, glyph_i, glyph_l, glyph_m, samples_from, trace_strokes

from trace_lib.domain import Point
from trace_lib.planning import make_plan
from trace_lib.validation import (
    CheckpointValidator,
    FailureReason,
    SummaryReport,
    ValidationResult,
    apply_summary_checks,
    summarize,
)
from trace_lib.validation.summary import reference_points


def plan_for(template, configuration):
    return make_plan(template, configuration.checkpoint_length, configuration.spacing_length)


class TestSummarize(unittest.TestCase):
    """Tests for summarize."""

    def setUp(self):
        self.configuration = configuration_for()

    def test_full_trace_covers_everything(self):
        template = glyph_m()
        report = summarize(plan_for(template, self.configuration),
                           trace_strokes(template), self.configuration)
        self.assertAlmostEqual(report.coverage_ratio, 1.0)
        self.assertEqual(report.outside_ratio, 0.0)

    def test_scribble_is_outside(self):
        template = glyph_l()
        samples = samples_from([Point(200 + i, 200) for i in range(10)])
        report = summarize(plan_for(template, self.configuration), samples, self.configuration)
        self.assertEqual(report.outside_ratio, 1.0)
        self.assertEqual(report.coverage_ratio, 0.0)
        self.assertEqual(report.sample_count, 10)

    def test_half_stroke_half_coverage(self):
        template = glyph_l()
        stem = template.strokes[0]
        report = summarize(plan_for(template, self.configuration),
                           samples_from(stem.points[:31]), self.configuration)
        self.assertGreater(report.coverage_ratio, 0.4)
        self.assertLess(report.coverage_ratio, 0.8)

    def test_no_samples(self):
        template = glyph_l()
        report = summarize(plan_for(template, self.configuration), [], self.configuration)
        self.assertEqual(report, SummaryReport(0.0, 0.0, 0))

    def test_reference_points_include_dots(self):
        template = glyph_i()
        points = reference_points(plan_for(template, self.configuration), 5.0)
        self.assertEqual(points.shape[1], 2)
        self.assertTrue(any((p == (30.0, 30.0)).all() for p in points))


class TestApplySummaryChecks(unittest.TestCase):
    """Tests for apply_summary_checks."""

    def setUp(self):
        self.configuration = configuration_for()
        self.complete = ValidationResult(active_checkpoint_index=4, total_checkpoint_count=4)
        self.in_progress = ValidationResult(active_checkpoint_index=1, total_checkpoint_count=4)

    def test_excessive_outside(self):
        report = SummaryReport(coverage_ratio=0.1, outside_ratio=0.9, sample_count=20)
        result = apply_summary_checks(self.in_progress, report, self.configuration)
        self.assertEqual(result.failure, FailureReason.EXCESSIVE_OUTSIDE)
        self.assertEqual(result.active_checkpoint_index, 1)

    def test_outside_not_judged_below_minimum_samples(self):
        report = SummaryReport(coverage_ratio=0.0, outside_ratio=1.0, sample_count=3)
        self.assertIsNone(apply_summary_checks(self.in_progress, report, self.configuration).failure)

    def test_insufficient_coverage_only_when_complete(self):
        report = SummaryReport(coverage_ratio=0.3, outside_ratio=0.0, sample_count=40)
        failed = apply_summary_checks(self.complete, report, self.configuration)
        self.assertEqual(failed.failure, FailureReason.INSUFFICIENT_COVERAGE)
        self.assertFalse(failed.is_complete)

        unchanged = apply_summary_checks(self.in_progress, report, self.configuration)
        self.assertIs(unchanged, self.in_progress)

    def test_existing_failure_kept(self):
        failed = ValidationResult(active_checkpoint_index=2, total_checkpoint_count=4,
                                  failure=FailureReason.OUT_OF_ORDER)
        report = SummaryReport(coverage_ratio=0.0, outside_ratio=1.0, sample_count=50)
        self.assertIs(apply_summary_checks(failed, report, self.configuration), failed)

    def test_empty_plan_never_fails_coverage(self):
        report = SummaryReport(0.0, 0.0, 0)
        self.assertIsNone(apply_summary_checks(ValidationResult(), report, self.configuration).failure)

    def test_passing_attempt_unchanged(self):
        template = glyph_m()
        samples = trace_strokes(template)
        plan = plan_for(template, self.configuration)
        result = CheckpointValidator.evaluate(template, self.configuration, committed=samples, plan=plan)
        report = summarize(plan, samples, self.configuration)
        self.assertEqual(apply_summary_checks(result, report, self.configuration), result)

    def test_sparse_complete_trace_under_strict_threshold(self):
        """Ink that skates from checkpoint to checkpoint leaves gaps uncovered."""
        template = glyph_l()
        configuration = dataclasses.replace(self.configuration, corridor_radius=3.0,
                                            coverage_threshold=0.95)
        points = [Point(20, 12 * k + d) for k in range(10) for d in (0, 2, 4)]
        samples = samples_from(points)
        plan = plan_for(template, configuration)

        result = CheckpointValidator.evaluate(template, configuration, committed=samples, plan=plan)
        self.assertTrue(result.is_complete)

        report = summarize(plan, samples, configuration)
        self.assertLess(report.coverage_ratio, 0.95)
        checked = apply_summary_checks(result, report, configuration)
        self.assertEqual(checked.failure, FailureReason.INSUFFICIENT_COVERAGE)


if __name__ == '__main__':
    unittest.main()
