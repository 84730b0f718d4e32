"""Synthetic glyph templates and ink builders shared by the tests.

Glyphs live in row space with a row height of 120 and are sampled about
every 2 units, so a template's own vertices double as a realistic pen
trace. Configurations use the same 120-unit row with a 12-unit start dot
and 6-unit ink.
"""

import math

from trace_lib.domain import InkSample, Point, StrokeTemplate, TemplateStroke
from trace_lib.profiles import Difficulty

ROW_HEIGHT = 120.0
START_DOT_RADIUS = 12.0
INK_WIDTH = 6.0
SAMPLE_INTERVAL = 0.02


# -----------------------------------------------------------------------------
# Polyline builders
# -----------------------------------------------------------------------------

def line_points(x0, y0, x1, y1, step=2.0):
    """Points from (x0, y0) to (x1, y1) inclusive, about ``step`` apart."""
    n = max(1, math.ceil(math.hypot(x1 - x0, y1 - y0) / step))
    return [Point(x0 + (x1 - x0) * i / n, y0 + (y1 - y0) * i / n) for i in range(n + 1)]


def arc_points(cx, cy, r, start_deg, end_deg, step=2.0):
    """Points on a circular arc in y-down screen coordinates."""
    sweep = math.radians(end_deg - start_deg)
    n = max(1, math.ceil(abs(sweep) * r / step))
    a0 = math.radians(start_deg)
    return [Point(cx + r * math.cos(a0 + sweep * i / n), cy + r * math.sin(a0 + sweep * i / n))
            for i in range(n + 1)]


def join(*parts):
    """Concatenate polylines, dropping the duplicated joint vertices."""
    points = list(parts[0])
    for part in parts[1:]:
        points.extend(part[1:])
    return points


# -----------------------------------------------------------------------------
# Glyphs
# -----------------------------------------------------------------------------

def glyph_l():
    """Lowercase 'l': one 120-unit vertical stroke."""
    return StrokeTemplate([TemplateStroke('l-stem', 0, line_points(20, 0, 20, 120))], key='l.lower')


def glyph_m():
    """Lowercase 'm': stem, then two arches each starting on the previous stroke."""
    stem = line_points(10, 40, 10, 120)
    arch1 = join(arc_points(25, 60, 15, 180, 360), line_points(40, 60, 40, 120))
    arch2 = join(arc_points(55, 60, 15, 180, 360), line_points(70, 60, 70, 120))
    return StrokeTemplate([
        TemplateStroke('m-stem', 0, stem),
        TemplateStroke('m-arch1', 1, arch1),
        TemplateStroke('m-arch2', 2, arch2),
    ], key='m.lower')


def glyph_a():
    """Lowercase 'a': closed bowl, then a stem starting where the bowl ends."""
    bowl = arc_points(45, 80, 15, -30, -390)
    joint = bowl[-1]
    stem = join(line_points(joint.x, joint.y, 60, 95), line_points(60, 95, 64, 99))
    return StrokeTemplate([
        TemplateStroke('a-bowl', 0, bowl),
        TemplateStroke('a-stem', 1, stem, start_point=joint),
    ], key='a.lower')


def glyph_i():
    """Lowercase 'i': stem plus a single-point dot."""
    return StrokeTemplate([
        TemplateStroke('i-stem', 0, line_points(30, 50, 30, 120)),
        TemplateStroke('i-dot', 1, [Point(30, 30)]),
    ], key='i.lower')


# -----------------------------------------------------------------------------
# Ink and configuration
# -----------------------------------------------------------------------------

def configuration_for(difficulty=Difficulty.BEGINNER):
    """Validation configuration for the 120-unit test row."""
    return difficulty.profile.validation_configuration(
        row_height=ROW_HEIGHT, visual_start_radius=START_DOT_RADIUS, ink_width=INK_WIDTH)


def samples_from(points, start_time=0.0):
    """Timestamped samples SAMPLE_INTERVAL apart along ``points``."""
    return [InkSample(p, start_time + i * SAMPLE_INTERVAL) for i, p in enumerate(points)]


def trace_strokes(template, indices=None, start_time=0.0):
    """Ink that follows the given strokes (default: all) in draw order."""
    strokes = template.ordered_strokes()
    if indices is not None:
        strokes = [strokes[i] for i in indices]
    samples = []
    t = start_time
    for stroke in strokes:
        stroke_samples = samples_from(stroke.points, t)
        samples.extend(stroke_samples)
        t = stroke_samples[-1].timestamp + 0.5
    return samples
