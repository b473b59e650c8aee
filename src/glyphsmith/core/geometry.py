"""Geometric operations for stroke simplification and path synthesis.

This module provides the small mathematical utilities shared by the
simplifier and the style synthesizers:
- Point and perpendicular distances
- Bounding boxes and centroids
- Angle and grid snapping
- Path-data formatting with one decimal of precision

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Context, Decimal

from fontTools.misc.arrayTools import calcBounds

from glyphsmith.domain import Point

SNAP_ANGLE = math.pi / 4
GRID_SIZE = 10.0

_TENTH = Decimal("0.1")
# Wide enough to write out any finite float in full.
_DECIMAL_CONTEXT = Context(prec=400)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Calculate the distance from a point to the line through two points.

    The line is infinite: the projection is not clamped to the segment.
    When both line points coincide the line is undefined and the distance
    to the shared point is returned instead.

    Args:
        point: The point to measure
        line_start: First point on the line
        line_end: Second point on the line

    Returns:
        Perpendicular distance in glyph units

    Examples:
        >>> perpendicular_distance(Point(5.0, 3.0), Point(0.0, 0.0), Point(10.0, 0.0))
        3.0
        >>> perpendicular_distance(Point(3.0, 4.0), Point(0.0, 0.0), Point(0.0, 0.0))
        5.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y

    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return distance(point, line_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / length_sq

    closest_x = line_start.x + t * dx
    closest_y = line_start.y + t * dy

    return math.hypot(point.x - closest_x, point.y - closest_y)


def bounding_box(points: Sequence[Point]) -> tuple[float, float, float, float]:
    """Calculate the axis-aligned bounding box of a point set.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zeros for no points
    """
    return calcBounds([p.to_tuple() for p in points])


def centroid(points: Sequence[Point]) -> Point:
    """Average position of a non-empty point set."""
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def midpoint(p1: Point, p2: Point) -> Point:
    """Point halfway between two points."""
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, with halves rounding toward +infinity.

    Unlike the builtin round(), ties never go to the even neighbour, so
    2.5 -> 3.0 and -2.5 -> -2.0.
    """
    return float(math.floor(value + 0.5))


def snap_angle(angle: float, step: float = SNAP_ANGLE) -> float:
    """Snap an angle in radians to the nearest multiple of step."""
    return round_half_up(angle / step) * step


def snap_to_grid(point: Point, grid_size: float = GRID_SIZE) -> Point:
    """Snap each coordinate independently to the nearest grid line.

    Args:
        point: Point to snap
        grid_size: Grid spacing in glyph units

    Returns:
        Point whose coordinates are multiples of grid_size
    """
    return Point(
        round_half_up(point.x / grid_size) * grid_size,
        round_half_up(point.y / grid_size) * grid_size,
    )


def polar_offset(origin: Point, angle: float, length: float) -> Point:
    """Point at the given angle and distance from origin."""
    return Point(origin.x + math.cos(angle) * length, origin.y + math.sin(angle) * length)


def format_number(value: float) -> str:
    """Format a coordinate with exactly one decimal place.

    Halves round away from zero on the exact binary value, and an exact
    zero is always written as "0.0".

    Examples:
        >>> format_number(50)
        '50.0'
        >>> format_number(0.25)
        '0.3'
        >>> format_number(-0.0)
        '0.0'
    """
    if value == 0:
        return "0.0"
    quantized = Decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return str(quantized)


def format_point(point: Point) -> str:
    """Format a point as "x y" for path data."""
    return f"{format_number(point.x)} {format_number(point.y)}"


def polyline_path(points: Sequence[Point]) -> str:
    """Build straight-segment path data through the given points.

    Args:
        points: Vertices in drawing order

    Returns:
        Path data like "M 0.0 0.0 L 50.0 50.0", or "" for fewer than 2 points
    """
    if len(points) < 2:
        return ""

    commands = [f"M {format_point(points[0])}"]
    commands.extend(f"L {format_point(p)}" for p in points[1:])
    return " ".join(commands)
