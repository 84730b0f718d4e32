"""Ink samples and the committed/live merge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .geometry import Point


class SampleClass(Enum):
    """Where a sample came from."""
    COMMITTED = 'committed'  # finalized earlier strokes
    LIVE = 'live'            # stroke still being drawn


@dataclass(frozen=True)
class InkSample:
    """A single timestamped ink observation."""
    location: Point
    timestamp: float
    source: SampleClass = SampleClass.COMMITTED

    @classmethod
    def at(cls, x: float, y: float, timestamp: float,
           source: SampleClass = SampleClass.COMMITTED) -> InkSample:
        """Shorthand constructor from raw coordinates."""
        return cls(Point(float(x), float(y)), float(timestamp), source)


def merge_samples(committed: Iterable[InkSample],
                  live: Iterable[InkSample] = ()) -> list[InkSample]:
    """Merge committed and live samples into one timestamp-ordered stream.

    The sort is stable: equal timestamps keep arrival order, with committed
    samples ahead of live ones. Replaying a finished stroke plus an
    in-progress stroke therefore matches replaying the eventual finished
    drawing.
    """
    merged = list(committed)
    merged.extend(live)
    merged.sort(key=lambda s: s.timestamp)
    return merged
