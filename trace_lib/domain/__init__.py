"""Domain objects for stroke tracing.

This module provides the value objects shared by planning and validation:
geometric primitives, reference templates, and ink samples.

Geometry classes:
    Point: Immutable 2D point.
    Segment: One polyline edge with its cumulative arc length.

Template classes:
    TemplateStroke: One reference stroke with draw order and endpoints.
    StrokeTemplate: All strokes of a glyph.

Sample classes:
    InkSample: Timestamped ink observation.
    SampleClass: Committed vs. live origin of a sample.

Example usage::

    from trace_lib.domain import InkSample, Point, StrokeTemplate, TemplateStroke

    stroke = TemplateStroke('stem', 0, [Point(0, 0), Point(0, 50)])
    template = StrokeTemplate([stroke], key='l')
    samples = [InkSample.at(0, y, t * 0.02) for t, y in enumerate(range(0, 51, 2))]
"""

from .geometry import Point, Segment, build_segments
from .samples import InkSample, SampleClass, merge_samples
from .template import StrokeTemplate, TemplateStroke

__all__ = [
    'Point', 'Segment', 'build_segments',
    'TemplateStroke', 'StrokeTemplate',
    'InkSample', 'SampleClass', 'merge_samples',
]
