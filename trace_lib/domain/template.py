"""Reference stroke templates.

A template is the read-only geometry of one glyph: an ordered set of
strokes, each a polyline with explicit start and end points. The content
layer decodes templates from JSON; this module only holds the decoded
shape plus the scaling rule the row layout applies before validation.

Example usage:
    Building a template by hand::

        from trace_lib.domain import Point, StrokeTemplate, TemplateStroke

        stem = TemplateStroke('stem', 0, [Point(10, 0), Point(10, 100)])
        template = StrokeTemplate([stem], key='l.lower')

    Decoding content JSON::

        template = StrokeTemplate.from_dict(json.load(fh))
        row_template = template.scaled_to_row(row_height=120, ascender=700)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .geometry import Point


@dataclass(frozen=True)
class TemplateStroke:
    """A single continuous pen path of a glyph.

    Attributes:
        id: Stable identifier from the content data.
        order: Draw order; strokes of a glyph are traced in ascending order.
        points: Ordered polyline vertices.
        start_point: Authored start point. Defaults to the first vertex.
        end_point: Authored end point. Defaults to the last vertex.
    """
    id: str
    order: int
    points: tuple[Point, ...]
    start_point: Point | None = None
    end_point: Point | None = None

    def __post_init__(self):
        # Accept any sequence; store an immutable tuple
        object.__setattr__(self, 'points', tuple(self.points))
        if self.start_point is None:
            object.__setattr__(self, 'start_point', self.points[0] if self.points else Point(0.0, 0.0))
        if self.end_point is None:
            object.__setattr__(self, 'end_point', self.points[-1] if self.points else Point(0.0, 0.0))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the content JSON shape."""
        return {
            'id': self.id,
            'order': self.order,
            'points': [[p.x, p.y] for p in self.points],
            'start': [self.start_point.x, self.start_point.y],
            'end': [self.end_point.x, self.end_point.y],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TemplateStroke:
        """Create from a content JSON stroke entry.

        Point pairs with fewer than two numbers are dropped, and a missing
        or malformed ``start``/``end`` falls back to the first/last vertex.
        """
        points = [Point.from_tuple(pair) for pair in d.get('points', []) if len(pair) >= 2]
        start = d.get('start')
        end = d.get('end')
        return cls(
            id=str(d['id']),
            order=int(d['order']),
            points=points,
            start_point=Point.from_tuple(start) if start and len(start) >= 2 else None,
            end_point=Point.from_tuple(end) if end and len(end) >= 2 else None,
        )


@dataclass(frozen=True)
class StrokeTemplate:
    """Ordered reference strokes for one glyph.

    Attributes:
        strokes: Strokes in any order; use ordered_strokes() for draw order.
        key: Identifier used for plan caching (e.g. 'a.lower').
    """
    strokes: tuple[TemplateStroke, ...] = field(default_factory=tuple)
    key: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'strokes', tuple(self.strokes))

    def __len__(self) -> int:
        return len(self.strokes)

    def ordered_strokes(self) -> list[TemplateStroke]:
        """Strokes sorted by draw order, stable on equal order values."""
        return sorted(self.strokes, key=lambda s: s.order)

    def scaled_to_row(self, row_height: float, ascender: float) -> StrokeTemplate:
        """Translate to the origin and scale font units to row units.

        The template's minimum x and y move to (0, 0) and every coordinate
        is multiplied by ``row_height / max(ascender, 1)``.
        """
        scale = row_height / max(ascender, 1.0)
        all_points = [p for s in self.strokes for p in s.points]
        min_x = min((p.x for p in all_points), default=0.0)
        min_y = min((p.y for p in all_points), default=0.0)

        def convert(p: Point) -> Point:
            return Point((p.x - min_x) * scale, (p.y - min_y) * scale)

        strokes = [
            TemplateStroke(
                id=s.id,
                order=s.order,
                points=[convert(p) for p in s.points],
                start_point=convert(s.start_point),
                end_point=convert(s.end_point),
            )
            for s in self.ordered_strokes()
        ]
        return StrokeTemplate(strokes, key=self.key)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> StrokeTemplate:
        """Create from a decoded content JSON document."""
        strokes = [TemplateStroke.from_dict(s) for s in d.get('strokes', [])]
        return cls(strokes, key=str(d.get('id', '')))
