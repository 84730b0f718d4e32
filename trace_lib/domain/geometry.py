"""Geometric value objects for stroke tracing."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def lerp(self, other: Point, t: float) -> Point:
        """Point a fraction t of the way towards other."""
        return Point(self.x + (other.x - self.x) * t,
                     self.y + (other.y - self.y) * t)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        """Create from tuple or list."""
        return cls(float(t[0]), float(t[1]))


@dataclass(frozen=True)
class Segment:
    """One edge of a stroke polyline.

    ``cumulative_length_at_start`` is the arc length of every earlier
    segment in the same stroke, so a point a fraction ``t`` along this
    segment sits at ``cumulative_length_at_start + t * length``.
    """
    start: Point
    end: Point
    length: float
    cumulative_length_at_start: float

    @property
    def cumulative_length_at_end(self) -> float:
        return self.cumulative_length_at_start + self.length


def build_segments(points: Sequence[Point]) -> Tuple[List[Segment], float]:
    """Split a polyline into contiguous segments.

    Args:
        points: Ordered polyline vertices.

    Returns:
        Tuple of (segments, total_length). Fewer than two points yields
        an empty list and a total length of 0.
    """
    if len(points) < 2:
        return [], 0.0

    segments = []
    cumulative = 0.0
    for start, end in zip(points, points[1:]):
        length = start.distance_to(end)
        segments.append(Segment(start, end, length, cumulative))
        cumulative += length
    return segments, cumulative
