"""Utility functions for stroke tracing.

Geometry utilities:
    clamp: Clamp a value into a range.
    resample_path: Resample a path to evenly spaced points.

Rendering utilities live in trace_lib.utils.rendering and pull in Pillow
only when imported:
    render_plan_overlay: Draw a plan and result for diagnostics.

Example usage::

    from trace_lib.utils import resample_path

    resampled = resample_path([(0, 0), (10, 0), (10, 10)], num_points=7)
"""

from .geometry import clamp, resample_path

__all__ = ['clamp', 'resample_path']
