"""Ordered checkpoint validation.

Classes:
    CheckpointValidator: Stateless per-sample state machine.
    ValidationResult: Statuses, pointer, count and failure of one run.
    CheckpointStatus: Published state of one checkpoint.
    CheckpointProgress: Mutable per-run state of one checkpoint.
    FailureReason: OUT_OF_ORDER, INSUFFICIENT_COVERAGE, EXCESSIVE_OUTSIDE.
    CaptureBands: Start/end progress bands of one checkpoint.
    SummaryReport: Whole-attempt coverage and outside-ink ratios.

Functions:
    run_checkpoints: Core loop over already-ordered samples.
    capture_bands: Adaptive tolerances for a checkpoint.
    summarize / apply_summary_checks: Secondary summary pass.
"""

from .result import CheckpointProgress, CheckpointStatus, FailureReason, ValidationResult
from .summary import SummaryReport, apply_summary_checks, summarize
from .tolerances import CaptureBands, capture_bands
from .validator import CheckpointValidator, run_checkpoints

__all__ = [
    'CheckpointValidator', 'run_checkpoints',
    'ValidationResult', 'CheckpointStatus', 'CheckpointProgress', 'FailureReason',
    'CaptureBands', 'capture_bands',
    'SummaryReport', 'summarize', 'apply_summary_checks',
]
