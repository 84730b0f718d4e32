"""Geometric utility functions.

This module provides path helpers that supplement the methods on the domain
objects (Point, Segment) and the plan (TracePath).

The module provides the following functions:
    clamp: Clamp a value into a closed range.
    resample_path: Resample a path to evenly spaced points.

Example usage::

    from trace_lib.utils.geometry import resample_path

    points = [(0, 0), (100, 0), (100, 100)]
    resampled = resample_path(points, num_points=5)
"""

from __future__ import annotations

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into [lower, upper]."""
    return min(max(value, lower), upper)


def resample_path(path: list[tuple[float, float]], num_points: int) -> list[tuple[float, float]]:
    """Resample a path to have a specified number of evenly-spaced points.

    Creates a new path with points distributed at equal arc-length
    intervals along the original path.

    Args:
        path: List of (x, y) coordinate tuples defining the path.
        num_points: Desired number of points in the output path.

    Returns:
        List of (x, y) coordinate tuples with evenly-spaced points.
        Always includes the original start and end points. Returns
        the input unchanged if it has fewer than 2 points or if
        num_points is less than 2.

    Example:
        >>> path = [(0, 0), (100, 0), (100, 100)]
        >>> resampled = resample_path(path, num_points=5)
        >>> len(resampled)
        5
    """
    if len(path) < 2 or num_points < 2:
        return path

    # Calculate cumulative arc length
    distances = [0.0]
    for i in range(1, len(path)):
        dx = path[i][0] - path[i-1][0]
        dy = path[i][1] - path[i-1][1]
        distances.append(distances[-1] + math.sqrt(dx*dx + dy*dy))

    total_length = distances[-1]
    if total_length < 0.001:
        return path

    result = [path[0]]
    step = total_length / (num_points - 1)
    j = 1

    for i in range(1, num_points - 1):
        target_dist = i * step
        while distances[j] < target_dist:
            j += 1
        seg = distances[j] - distances[j-1]
        t = (target_dist - distances[j-1]) / seg if seg > 0 else 0.0
        x = path[j-1][0] + t * (path[j][0] - path[j-1][0])
        y = path[j-1][1] + t * (path[j][1] - path[j-1][1])
        result.append((x, y))

    result.append(path[-1])
    return result
