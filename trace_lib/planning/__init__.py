"""Checkpoint planning for reference strokes.

Classes:
    Checkpoint: Arc-length span of a stroke that must be visited.
    Projection: Distance and normalized progress of a closest-point query.
    TracePath: Segments, checkpoints and projection for one stroke.
    CheckpointPlan: All paths of a glyph with global checkpoint numbering.
    PlanCache: Memoizes plans per template and configuration.

Functions:
    build_checkpoints: Partition one stroke's arc length.
    make_plan: Build a CheckpointPlan from a StrokeTemplate.
"""

from .cache import PlanCache, plan_key
from .plan import (
    Checkpoint,
    CheckpointPlan,
    Projection,
    TracePath,
    build_checkpoints,
    make_plan,
)

__all__ = [
    'Checkpoint', 'Projection', 'TracePath', 'CheckpointPlan',
    'build_checkpoints', 'make_plan',
    'PlanCache', 'plan_key',
]
