"""Unit tests for trace_lib.session.TraceSession.

The session is driven with a fake clock and an event list as feedback sink,
so warning pacing and the reset-on-failure policy are deterministic.
"""

import sys
import unittest
from pathlib import Path

# Add parent dirs to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from glyphs import INK_WIDTH, ROW_HEIGHT, START_DOT_RADIUS, glyph_l, glyph_m, trace_strokes

from trace_lib.domain import InkSample, SampleClass
from trace_lib.planning import PlanCache
from trace_lib.profiles import Difficulty
from trace_lib.session import WARNING_MESSAGES, TraceSession
from trace_lib.validation import FailureReason


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_session(template, difficulty=Difficulty.INTERMEDIATE, **kwargs):
    events = []
    clock = FakeClock()
    session = TraceSession(template, difficulty.profile,
                           row_height=ROW_HEIGHT, visual_start_radius=START_DOT_RADIUS,
                           ink_width=INK_WIDTH, feedback_sink=events.append,
                           clock=clock, **kwargs)
    return session, events, clock


class TestTraceSessionProgress(unittest.TestCase):
    """Successful attempts."""

    def test_complete_attempt(self):
        template = glyph_l()
        session, events, _ = make_session(template, Difficulty.EXPERT)
        session.update_live(trace_strokes(template))
        update = session.evaluate()

        self.assertTrue(update.result.is_complete)
        self.assertFalse(update.reset)
        self.assertIsNone(update.warning)
        self.assertEqual([e.kind for e in events], ['success'])

    def test_success_announced_once(self):
        template = glyph_l()
        session, events, _ = make_session(template, Difficulty.EXPERT)
        session.update_live(trace_strokes(template))
        session.evaluate()
        session.evaluate()
        self.assertEqual([e.kind for e in events], ['success'])

    def test_commit_moves_live_samples(self):
        template = glyph_m()
        session, _, _ = make_session(template)
        stem = trace_strokes(template, indices=[0])
        session.update_live(stem)
        session.commit_stroke()

        committed = session.committed_samples
        self.assertEqual(len(committed), len(stem))
        self.assertTrue(all(s.source is SampleClass.COMMITTED for s in committed))

        update = session.evaluate()
        self.assertEqual(update.result.completed_stroke_count(), 1)
        self.assertFalse(update.result.is_complete)

    def test_live_and_committed_strokes_combine(self):
        template = glyph_m()
        session, _, _ = make_session(template)
        samples = trace_strokes(template)
        stem_count = len(template.ordered_strokes()[0].points)
        session.commit_stroke(samples[:stem_count])
        session.update_live(samples[stem_count:])
        self.assertTrue(session.evaluate().result.is_complete)


class TestTraceSessionFailure(unittest.TestCase):
    """Failures reset the attempt and pace warnings."""

    def skip_first_stroke(self, session, template):
        session.update_live(trace_strokes(template, indices=[1]))
        return session.evaluate()

    def test_failure_resets_and_warns(self):
        template = glyph_m()
        session, events, _ = make_session(template)
        session.commit_stroke(trace_strokes(template, indices=[1]))
        update = session.evaluate()

        self.assertEqual(update.result.failure, FailureReason.OUT_OF_ORDER)
        self.assertTrue(update.reset)
        self.assertEqual(update.warning, WARNING_MESSAGES[FailureReason.OUT_OF_ORDER])
        self.assertEqual(session.committed_samples, [])
        # Intermediate tier softens the warning to a notice
        self.assertEqual([e.kind for e in events], ['notice'])

    def test_warning_cooldown(self):
        template = glyph_m()
        session, events, clock = make_session(template)
        self.assertIsNotNone(self.skip_first_stroke(session, template).warning)

        clock.now = 0.5
        second = self.skip_first_stroke(session, template)
        self.assertTrue(second.reset)
        self.assertIsNone(second.warning)

        clock.now = 0.5 + Difficulty.INTERMEDIATE.profile.warning_cooldown
        self.assertIsNotNone(self.skip_first_stroke(session, template).warning)
        self.assertEqual(len(events), 2)

    def test_excessive_outside_from_summary_pass(self):
        template = glyph_l()
        session, _, _ = make_session(template)
        session.update_live([InkSample.at(200 + i, 200, i * 0.02) for i in range(12)])
        update = session.evaluate()
        self.assertEqual(update.result.failure, FailureReason.EXCESSIVE_OUTSIDE)
        self.assertTrue(update.reset)

    def test_beginner_has_no_feedback(self):
        template = glyph_m()
        session, events, _ = make_session(template, Difficulty.BEGINNER)
        update = self.skip_first_stroke(session, template)
        self.assertIsNotNone(update.warning)
        self.assertEqual(events, [])


class TestTraceSessionConfiguration(unittest.TestCase):
    """Profile and layout changes."""

    def test_set_profile_recomputes_configuration(self):
        session, _, _ = make_session(glyph_l(), Difficulty.BEGINNER)
        before = session.configuration
        session.set_profile(Difficulty.EXPERT.profile)
        self.assertLess(session.configuration.corridor_radius, before.corridor_radius)
        self.assertIs(session.profile, Difficulty.EXPERT.profile)

    def test_set_row_metrics(self):
        session, _, _ = make_session(glyph_l(), Difficulty.BEGINNER)
        session.set_row_metrics(240.0)
        self.assertAlmostEqual(session.configuration.checkpoint_length, 12.0)
        self.assertEqual(session.configuration.ink_width, INK_WIDTH)

    def test_plan_shared_through_cache(self):
        cache = PlanCache()
        template = glyph_l()
        first, _, _ = make_session(template, plan_cache=cache)
        second, _, _ = make_session(template, plan_cache=cache)
        self.assertIs(first.plan, second.plan)
        self.assertEqual(len(cache), 1)

    def test_reset_clears_ink(self):
        template = glyph_l()
        session, _, _ = make_session(template)
        session.commit_stroke(trace_strokes(template))
        session.reset()
        update = session.evaluate()
        self.assertEqual(update.result.completed_checkpoint_count, 0)
        self.assertEqual(update.summary.sample_count, 0)


if __name__ == '__main__':
    unittest.main()
