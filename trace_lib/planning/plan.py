"""Checkpoint plans for reference strokes.

This module turns a template's stroke polylines into the ordered sequence
of short arc-length spans ("checkpoints") that a tracer must visit. Each
stroke is walked from its start, alternating a checkpoint span of
``checkpoint_length`` with a gap of ``spacing``; checkpoints from all
strokes are then numbered globally in draw order.

The module provides the following classes:
    Checkpoint: One arc-length span of a stroke.
    Projection: Closest-point query result (distance + progress).
    TracePath: A stroke's segments, checkpoints and projection queries.
    CheckpointPlan: All paths of a glyph plus the global numbering.

Example usage:
    Building a plan and projecting a point::

        from trace_lib.planning import make_plan
        from trace_lib.domain import Point

        plan = make_plan(template, checkpoint_length=6.0, spacing=6.0)
        path = plan.paths[0]
        hit = path.projection(Point(12, 40))
        print(f"{hit.distance:.1f} units away at {hit.progress:.0%}")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from ..domain.geometry import Point, Segment, build_segments
from ..domain.template import StrokeTemplate, TemplateStroke
from ..settings import CHECKPOINT_LOOKUP_SLACK, LENGTH_EPSILON, MIN_TAIL_CHECKPOINT_FRACTION
from ..utils.geometry import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Checkpoint:
    """A checkpoint span along one stroke.

    Attributes:
        start_progress: Normalized arc-length start (0..1) within the stroke.
        end_progress: Normalized arc-length end (0..1) within the stroke.
        length: Physical arc length of the span.
        path_index: Index of the owning stroke in draw order.
        global_index: Position in the glyph-wide checkpoint sequence.
    """
    start_progress: float
    end_progress: float
    length: float
    path_index: int = 0
    global_index: int = 0

    @property
    def span(self) -> float:
        return self.end_progress - self.start_progress

    @property
    def midpoint_progress(self) -> float:
        return (self.start_progress + self.end_progress) * 0.5


@dataclass(frozen=True)
class Projection:
    """Closest point on a path, as distance and normalized progress."""
    distance: float
    progress: float


def build_checkpoints(point_count: int,
                      total_length: float,
                      checkpoint_length: float,
                      spacing: float) -> list[Checkpoint]:
    """Partition a stroke's arc length into checkpoint spans.

    Walks the arc length alternating ``checkpoint_length`` and ``spacing``
    (just ``checkpoint_length`` when spacing is ~0), clipping the final span
    to whatever length remains. A clipped final span shorter than
    MIN_TAIL_CHECKPOINT_FRACTION of ``checkpoint_length`` is merged into the
    previous checkpoint, which then runs to the end of the stroke.

    Args:
        point_count: Number of polyline vertices.
        total_length: Total arc length of the stroke.
        checkpoint_length: Physical length of each checkpoint span.
        spacing: Physical length of each gap between checkpoints.

    Returns:
        Checkpoints in increasing progress order, with path and global
        indices left at 0. Never empty: degenerate strokes (fewer than two
        points or zero length) and a ~0 checkpoint length all produce one
        checkpoint spanning [0, 1].
    """
    if point_count < 2 or total_length <= LENGTH_EPSILON:
        return [Checkpoint(0.0, 1.0, 0.0)]

    if checkpoint_length <= LENGTH_EPSILON:
        return [Checkpoint(0.0, 1.0, total_length)]

    pattern = [checkpoint_length, spacing] if spacing > LENGTH_EPSILON else [checkpoint_length]
    pattern_index = 0
    remaining_in_pattern = pattern[0]
    is_checkpoint = True
    accumulated = 0.0
    checkpoints = []

    while accumulated < total_length - LENGTH_EPSILON:
        span_length = min(remaining_in_pattern, total_length - accumulated)

        if is_checkpoint:
            start = max(0.0, min(1.0, accumulated / total_length))
            end = max(start, min(1.0, (accumulated + span_length) / total_length))
            checkpoints.append(Checkpoint(start, end, span_length))

        accumulated += span_length
        remaining_in_pattern -= span_length
        if remaining_in_pattern <= LENGTH_EPSILON:
            pattern_index += 1
            remaining_in_pattern = pattern[pattern_index % len(pattern)]
            # A one-entry pattern never enters a gap
            is_checkpoint = len(pattern) == 1 or not is_checkpoint

    if (len(checkpoints) > 1
            and checkpoints[-1].length < checkpoint_length * MIN_TAIL_CHECKPOINT_FRACTION):
        tail = checkpoints.pop()
        previous = checkpoints.pop()
        checkpoints.append(Checkpoint(previous.start_progress, tail.end_progress,
                                      (tail.end_progress - previous.start_progress) * total_length))

    if not checkpoints:
        checkpoints.append(Checkpoint(0.0, 1.0, total_length))

    return checkpoints


class TracePath:
    """One reference stroke prepared for tracing.

    Holds the stroke's segments (also packed into numpy tables for the
    per-sample projection) and its checkpoints with global numbering.

    Attributes:
        id: Stroke identifier from the template.
        order: Draw order from the template.
        points: Polyline vertices.
        start_point: Authored start point.
        end_point: Authored end point.
        segments: Contiguous polyline edges.
        total_length: Sum of segment lengths.
        checkpoints: Checkpoints of this stroke in progress order.
    """

    def __init__(self, stroke: TemplateStroke, path_index: int, first_global_index: int,
                 checkpoint_length: float, spacing: float):
        self.id = stroke.id
        self.order = stroke.order
        self.points = list(stroke.points)
        self.start_point = stroke.start_point
        self.end_point = stroke.end_point
        self.segments, self.total_length = build_segments(self.points)

        local = build_checkpoints(len(self.points), self.total_length, checkpoint_length, spacing)
        self.checkpoints = [
            Checkpoint(c.start_progress, c.end_progress, c.length,
                       path_index=path_index, global_index=first_global_index + i)
            for i, c in enumerate(local)
        ]
        self._pack_segments()

    def __repr__(self) -> str:
        return (f"TracePath(id={self.id!r}, length={self.total_length:.2f}, "
                f"checkpoints={len(self.checkpoints)})")

    @property
    def is_degenerate(self) -> bool:
        """True for single-point or zero-length strokes (dots)."""
        return self.total_length <= LENGTH_EPSILON

    def _pack_segments(self) -> None:
        # Only non-degenerate segments take part in projection
        usable = [s for s in self.segments if s.length > LENGTH_EPSILON]
        if not usable:
            self._starts = None
            return
        self._starts = np.array([(s.start.x, s.start.y) for s in usable], dtype=np.float64)
        ends = np.array([(s.end.x, s.end.y) for s in usable], dtype=np.float64)
        self._vectors = ends - self._starts
        self._length_sq = np.einsum('ij,ij->i', self._vectors, self._vectors)
        self._lengths = np.array([s.length for s in usable], dtype=np.float64)
        self._cumulative = np.array([s.cumulative_length_at_start for s in usable], dtype=np.float64)

    def projection(self, point: Point) -> Projection:
        """Closest point on this path to ``point``.

        Each segment contributes its clamped scalar projection; the segment
        with the smallest squared distance wins (earliest on ties), and its
        ``cumulative_length_at_start + t * length`` is normalized by the
        total length.

        A path without usable segments reports the distance to its first
        point with progress 0.
        """
        if self._starts is None:
            anchor = self.points[0] if self.points else self.start_point
            return Projection(point.distance_to(anchor), 0.0)

        w = np.array((point.x, point.y)) - self._starts
        t = np.clip(np.einsum('ij,ij->i', w, self._vectors) / self._length_sq, 0.0, 1.0)
        offsets = w - self._vectors * t[:, None]
        dist_sq = np.einsum('ij,ij->i', offsets, offsets)

        best = int(np.argmin(dist_sq))
        travelled = self._cumulative[best] + t[best] * self._lengths[best]
        progress = travelled / self.total_length if self.total_length > 0 else 0.0
        return Projection(math.sqrt(dist_sq[best]), float(progress))

    def checkpoint_index_for(self, progress: float) -> int | None:
        """Local index of the checkpoint whose span contains ``progress``.

        Returns None when progress falls in a gap.
        """
        for index, checkpoint in enumerate(self.checkpoints):
            if (checkpoint.start_progress - CHECKPOINT_LOOKUP_SLACK <= progress
                    <= checkpoint.end_progress + CHECKPOINT_LOOKUP_SLACK):
                return index
        return None

    def point_at(self, progress: float) -> Point:
        """Point at normalized arc-length ``progress`` (clamped to 0..1)."""
        if self.is_degenerate:
            return self.points[0] if self.points else self.start_point

        target = clamp(progress, 0.0, 1.0) * self.total_length
        for segment in self.segments:
            if target < segment.cumulative_length_at_end:
                delta = target - segment.cumulative_length_at_start
                t = delta / segment.length if segment.length > LENGTH_EPSILON else 0.0
                return segment.start.lerp(segment.end, t)
        return self.segments[-1].end


class CheckpointPlan:
    """Checkpoints of every stroke of a glyph, numbered in draw order.

    Attributes:
        paths: TracePath per stroke, sorted by draw order.
        total_checkpoint_count: Number of checkpoints across all paths.
    """

    def __init__(self, paths: list[TracePath]):
        self.paths = paths
        self.total_checkpoint_count = sum(len(p.checkpoints) for p in paths)
        self._descriptors = [c for p in paths for c in p.checkpoints]

    def __len__(self) -> int:
        return self.total_checkpoint_count

    def descriptors(self) -> list[Checkpoint]:
        """All checkpoints in global order; index i has global_index i."""
        return list(self._descriptors)

    def checkpoint(self, global_index: int) -> Checkpoint:
        return self._descriptors[global_index]

    def checkpoints_for_path(self, path_index: int) -> list[Checkpoint]:
        return list(self.paths[path_index].checkpoints)

    def nearest_path(self, point: Point) -> tuple[int, Projection] | None:
        """Path closest to ``point`` and the projection onto it.

        Ties keep the earlier path. Returns None for a plan with no paths.
        """
        best = None
        best_distance = math.inf
        for index, path in enumerate(self.paths):
            projection = path.projection(point)
            if projection.distance < best_distance:
                best_distance = projection.distance
                best = (index, projection)
        return best


def make_plan(template: StrokeTemplate, checkpoint_length: float, spacing: float) -> CheckpointPlan:
    """Build the checkpoint plan for a template.

    Strokes are sorted by draw order, checkpointed independently, and
    numbered with consecutive global indices.

    Args:
        template: Reference strokes of the glyph.
        checkpoint_length: Physical length of each checkpoint span.
        spacing: Physical length of the gap between checkpoints.

    Returns:
        CheckpointPlan covering every stroke.
    """
    paths = []
    global_index = 0
    for path_index, stroke in enumerate(template.ordered_strokes()):
        path = TracePath(stroke, path_index, global_index, checkpoint_length, spacing)
        global_index += len(path.checkpoints)
        paths.append(path)

    logger.debug("Plan for %r: %d strokes, %d checkpoints (length=%.2f, spacing=%.2f)",
                 template.key, len(paths), global_index, checkpoint_length, spacing)
    return CheckpointPlan(paths)
