"""Polyline simplification using the Ramer-Douglas-Peucker algorithm.

Reduces the number of points in a stroke while keeping its shape within a
distance tolerance.
"""

from collections.abc import Sequence

from glyphsmith.core.geometry import perpendicular_distance
from glyphsmith.domain import Point


def simplify(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    The first and last points form a baseline. The interior point farthest
    from it is kept when its distance exceeds epsilon, and both halves are
    simplified independently around it; otherwise every interior point is
    dropped.

    The result is an order-preserving subsequence of the input that always
    contains the first and last points. Every dropped point lies within
    epsilon of the line through the two retained points that bracket it.

    Args:
        points: Polyline vertices in drawing order
        epsilon: Maximum perpendicular deviation, in glyph units

    Returns:
        Simplified list of points

    Raises:
        ValueError: If epsilon is negative
    """
    if epsilon < 0:
        raise ValueError(f"Simplification tolerance must be non-negative, got {epsilon}")

    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    # Pending (start, end) index ranges; equivalent to recursing on slices.
    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        index, max_dist = _farthest_point(points, start, end)
        if max_dist > epsilon:
            keep[index] = True
            stack.append((index, end))
            stack.append((start, index))

    return [point for point, kept in zip(points, keep, strict=True) if kept]


def _farthest_point(points: Sequence[Point], start: int, end: int) -> tuple[int, float]:
    """Find the interior point farthest from the start-end baseline.

    Ties resolve to the earliest index.
    """
    line_start = points[start]
    line_end = points[end]

    max_index = start
    max_dist = 0.0
    for i in range(start + 1, end):
        dist = perpendicular_distance(points[i], line_start, line_end)
        if dist > max_dist:
            max_dist = dist
            max_index = i

    return max_index, max_dist
