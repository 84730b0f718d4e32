"""Checkpoint-based stroke tracing validation.

This package judges, in real time, whether freehand ink reproduces a
reference handwriting template stroke by stroke, in order, inside a
tolerance corridor.

Architecture Overview:
    Template geometry is turned once per layout into a checkpoint plan:
    each stroke's arc length is split into short checkpoint spans separated
    by gaps, and checkpoints are numbered across strokes in draw order. The
    validator then replays the full ink stream on every input event and
    advances a single pointer through that sequence.

The package is organized into the following modules:
    domain: Point, Segment, TemplateStroke, StrokeTemplate, InkSample.
    planning: Checkpoint plans, corridor projection and the plan cache.
    validation: The ordered validator, result types and the summary pass.
    profiles: Difficulty tiers and the configuration derived from them.
    feedback: Injected feedback providers.
    session: Row-attempt orchestration (buffers, resets, warnings).
    utils: Path resampling and diagnostic rendering.

Example usage:
    One-shot validation::

        from trace_lib import CheckpointValidator, Difficulty

        configuration = Difficulty.BEGINNER.profile.validation_configuration(
            row_height=120, visual_start_radius=12, ink_width=6)
        result = CheckpointValidator.evaluate(template, configuration,
                                              committed=samples)
        print(f"{result.completed_checkpoint_count}/{result.total_checkpoint_count}")

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .domain import InkSample, Point, SampleClass, Segment, StrokeTemplate, TemplateStroke
from .planning import Checkpoint, CheckpointPlan, PlanCache, TracePath, make_plan
from .profiles import Difficulty, DifficultyProfile, HapticStyle, ValidationConfiguration
from .session import SessionUpdate, TraceSession
from .validation import (
    CheckpointValidator,
    FailureReason,
    ValidationResult,
    apply_summary_checks,
    summarize,
)

__all__ = [
    # Domain objects
    'Point', 'Segment', 'TemplateStroke', 'StrokeTemplate', 'InkSample', 'SampleClass',
    # Planning
    'Checkpoint', 'TracePath', 'CheckpointPlan', 'PlanCache', 'make_plan',
    # Profiles
    'Difficulty', 'DifficultyProfile', 'HapticStyle', 'ValidationConfiguration',
    # Validation
    'CheckpointValidator', 'ValidationResult', 'FailureReason',
    'summarize', 'apply_summary_checks',
    # Session
    'TraceSession', 'SessionUpdate',
]

__version__ = '1.0.0'
