"""Diagnostic rendering of checkpoint plans.

This module draws a plan and a validation result onto an image so tuning
sessions can see which checkpoints filled, which only got contact, where
the pointer stopped and where an out-of-order jump landed. It is a developer tool; the product renders its
own UI from ValidationResult.

The module provides the following functions:
    render_plan_overlay: Render plan, result and ink samples as an RGB image.
    checkpoint_color: Color used for a checkpoint's state.

Example usage::

    from trace_lib.utils.rendering import render_plan_overlay

    image = render_plan_overlay(plan, result, samples, size=(240, 160))
    image.save('attempt.png')
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..domain.samples import InkSample
from ..planning.plan import CheckpointPlan, TracePath
from ..validation.result import ValidationResult

BACKGROUND = (255, 255, 255)
PATH_COLOR = (200, 200, 200)
COMPLETED_COLOR = (0, 170, 0)
CONTACT_COLOR = (255, 140, 0)
ACTIVE_COLOR = (0, 90, 255)
FAILED_COLOR = (200, 0, 0)
PENDING_COLOR = (140, 140, 140)
INK_COLOR = (0, 0, 0)

# Points sampled per checkpoint span when drawing it
SPAN_STEPS = 8


def checkpoint_color(global_index: int, result: Optional[ValidationResult]) -> Tuple[int, int, int]:
    """Color for a checkpoint given a (possibly missing) result.

    After a failure the active index is the checkpoint that was jumped to,
    which is drawn in FAILED_COLOR instead of ACTIVE_COLOR.
    """
    if result is None or global_index >= len(result.checkpoint_statuses):
        return PENDING_COLOR
    status = result.checkpoint_statuses[global_index]
    if status.completed:
        return COMPLETED_COLOR
    if global_index == result.active_checkpoint_index:
        return FAILED_COLOR if result.failure is not None else ACTIVE_COLOR
    if status.has_contact:
        return CONTACT_COLOR
    return PENDING_COLOR


def _span_points(path: TracePath, start: float, end: float) -> list:
    steps = [start + (end - start) * i / SPAN_STEPS for i in range(SPAN_STEPS + 1)]
    return [path.point_at(p).to_tuple() for p in steps]


def render_plan_overlay(plan: CheckpointPlan,
                        result: Optional[ValidationResult] = None,
                        samples: Sequence[InkSample] = (),
                        size: Tuple[int, int] = (256, 256),
                        line_width: int = 5) -> Image.Image:
    """Render a checkpoint plan with result colors and ink samples.

    Coordinates are drawn as-is, so the caller picks a ``size`` covering
    the template's row-space bounds.

    Args:
        plan: Plan to draw; every path is drawn in PATH_COLOR underneath.
        result: Optional result; checkpoints are colored by state.
        samples: Optional ink samples, drawn as small black dots.
        size: Image (width, height) in pixels.
        line_width: Width of checkpoint strokes in pixels.

    Returns:
        RGB PIL image.
    """
    image = Image.new('RGB', size, BACKGROUND)
    draw = ImageDraw.Draw(image)

    for path in plan.paths:
        coords = [p.to_tuple() for p in path.points]
        if len(coords) >= 2:
            draw.line(coords, fill=PATH_COLOR, width=max(1, line_width // 2))

    for path in plan.paths:
        for checkpoint in path.checkpoints:
            color = checkpoint_color(checkpoint.global_index, result)
            if path.is_degenerate:
                x, y = path.point_at(0.0).to_tuple()
                r = line_width
                draw.ellipse([x - r, y - r, x + r, y + r], fill=color)
                continue
            coords = _span_points(path, checkpoint.start_progress, checkpoint.end_progress)
            draw.line(coords, fill=color, width=line_width)

    for sample in samples:
        x, y = sample.location.to_tuple()
        draw.ellipse([x - 1, y - 1, x + 1, y + 1], fill=INK_COLOR)

    return image
