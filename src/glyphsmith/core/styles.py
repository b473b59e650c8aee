"""Style-specific path synthesis.

Each style turns the points of one stroke into SVG path data. Styles first
simplify the stroke with their own tolerance and then apply a geometric rule:

- Runic: segment directions snapped to 45 degree steps
- Flowing: quadratic curves through neighbourhood centroids
- Geometric: near-square blobs become circles, everything else a few lines
- Organic: quadratic curves bulging to one side of every segment
- Blocky: vertices snapped to a 10 unit grid
- Minimal: as few straight segments as possible

All synthesizers are pure functions of their input points. Each accepts the
stroke already simplified at its style's tolerance and simplifies it
itself when none is given.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from glyphsmith.core.geometry import (
    bounding_box,
    centroid,
    distance,
    format_number,
    format_point,
    midpoint,
    polar_offset,
    polyline_path,
    snap_angle,
    snap_to_grid,
)
from glyphsmith.core.simplify import simplify
from glyphsmith.domain import Point, Stroke, StyleKind, VectorPath

# Geometric style: aspect ratio window and minimum sample count for circles
CIRCLE_ASPECT_MIN = 0.8
CIRCLE_ASPECT_MAX = 1.2
CIRCLE_MIN_POINTS = 10

# Organic style: midpoint offset as a fraction of segment length
ORGANIC_BULGE = 0.15

# Minimal style: simplified strokes this short collapse to one segment
MINIMAL_COLLAPSE_POINTS = 3


def _simplified(
    points: Sequence[Point], simplified: Sequence[Point] | None, style: StyleKind
) -> Sequence[Point]:
    """Reuse a precomputed simplification or simplify at the style's tolerance."""
    if simplified is None:
        return simplify(points, style.tolerance)
    return simplified


def runic_path(points: Sequence[Point], simplified: Sequence[Point] | None = None) -> VectorPath:
    """Angular strokes with every segment at a multiple of 45 degrees.

    Each simplified segment keeps its length but its direction is snapped
    to the nearest 45 degree step, and it starts where the previous snapped
    segment ended, so the drawn polyline is angle-exact throughout.
    """
    if len(points) < 2:
        return ""

    simplified = _simplified(points, simplified, StyleKind.RUNIC)
    if len(simplified) < 2:
        return polyline_path([points[0], points[-1]])

    placed = [simplified[0]]
    for prev, curr in zip(simplified, simplified[1:]):
        angle = snap_angle(math.atan2(curr.y - prev.y, curr.x - prev.x))
        placed.append(polar_offset(placed[-1], angle, distance(prev, curr)))

    return polyline_path(placed)


def flowing_path(points: Sequence[Point], simplified: Sequence[Point] | None = None) -> VectorPath:
    """Smooth calligraphic curves.

    Every interior vertex becomes the control point of a quadratic curve
    ending at the centroid of the vertex and its two neighbours; a final
    straight segment reaches the last vertex.
    """
    if len(points) < 2:
        return ""

    simplified = _simplified(points, simplified, StyleKind.FLOWING)
    if len(simplified) < 2:
        return polyline_path(points)

    commands = [f"M {format_point(simplified[0])}"]
    for i in range(1, len(simplified) - 1):
        control = simplified[i]
        target = centroid(simplified[i - 1 : i + 2])
        commands.append(f"Q {format_point(control)} {format_point(target)}")
    commands.append(f"L {format_point(simplified[-1])}")

    return " ".join(commands)


def is_circular(points: Sequence[Point]) -> bool:
    """True if the geometric style replaces these points with a circle."""
    min_x, min_y, max_x, max_y = bounding_box(points)
    aspect_ratio = (max_x - min_x) / ((max_y - min_y) or 1)
    return CIRCLE_ASPECT_MIN < aspect_ratio < CIRCLE_ASPECT_MAX and len(points) > CIRCLE_MIN_POINTS


def geometric_path(
    points: Sequence[Point], simplified: Sequence[Point] | None = None
) -> VectorPath:
    """Clean geometric shapes.

    A densely sampled stroke with a near-square bounding box is replaced by
    a full circle around the box center. Anything else is reduced to a few
    straight segments.
    """
    if len(points) < 2:
        return ""

    if is_circular(points):
        min_x, min_y, max_x, max_y = bounding_box(points)
        center = Point((min_x + max_x) / 2, (min_y + max_y) / 2)
        return _circle_path(center, max(max_x - min_x, max_y - min_y) / 2)

    return polyline_path(_simplified(points, simplified, StyleKind.GEOMETRIC))


def _circle_path(center: Point, radius: float) -> VectorPath:
    """Full circle drawn as two half-circle arcs."""
    r = format_number(radius)
    left = f"{format_number(center.x - radius)} {format_number(center.y)}"
    right = f"{format_number(center.x + radius)} {format_number(center.y)}"
    return f"M {left} A {r} {r} 0 1 1 {right} A {r} {r} 0 1 1 {left}"


def organic_path(points: Sequence[Point], simplified: Sequence[Point] | None = None) -> VectorPath:
    """Natural vine-like curves.

    Each segment becomes a quadratic curve whose control point is the
    segment midpoint pushed sideways by a fraction of the segment length,
    always to the same rotational side. Strokes that simplify below three
    points are drawn in the flowing style instead.
    """
    if len(points) < 2:
        return ""

    simplified = _simplified(points, simplified, StyleKind.ORGANIC)
    if len(simplified) < 3:
        return flowing_path(points)

    commands = [f"M {format_point(simplified[0])}"]
    for prev, curr in zip(simplified, simplified[1:]):
        mid = midpoint(prev, curr)
        # Rotate (dx, dy) by +90 degrees: (-dy, dx)
        control = Point(
            mid.x - (curr.y - prev.y) * ORGANIC_BULGE,
            mid.y + (curr.x - prev.x) * ORGANIC_BULGE,
        )
        commands.append(f"Q {format_point(control)} {format_point(curr)}")

    return " ".join(commands)


def blocky_path(points: Sequence[Point], simplified: Sequence[Point] | None = None) -> VectorPath:
    """Chunky strokes with every vertex on a 10 unit grid.

    Vertices that snap to the same grid cell are kept, producing
    zero-length segments.
    """
    if len(points) < 2:
        return ""

    simplified = _simplified(points, simplified, StyleKind.BLOCKY)
    return polyline_path([snap_to_grid(p) for p in simplified])


def minimal_path(points: Sequence[Point], simplified: Sequence[Point] | None = None) -> VectorPath:
    """Essential lines only.

    Strokes that simplify to three points or fewer collapse to a single
    segment from first to last point, even when a real corner survived.
    """
    if len(points) < 2:
        return ""

    simplified = _simplified(points, simplified, StyleKind.MINIMAL)
    if len(simplified) <= MINIMAL_COLLAPSE_POINTS:
        return polyline_path([simplified[0], simplified[-1]])

    return polyline_path(simplified)


SynthesizerFn = Callable[[Sequence[Point], Sequence[Point] | None], VectorPath]

STYLE_SYNTHESIZERS: dict[StyleKind, SynthesizerFn] = {
    StyleKind.RUNIC: runic_path,
    StyleKind.FLOWING: flowing_path,
    StyleKind.GEOMETRIC: geometric_path,
    StyleKind.ORGANIC: organic_path,
    StyleKind.BLOCKY: blocky_path,
    StyleKind.MINIMAL: minimal_path,
}


@dataclass(frozen=True)
class StrokeSynthesis:
    """Path data for one stroke plus the size of its simplified outline.

    Attributes:
        path: SVG path data, "" for a degenerate stroke
        simplified_points: Points kept by the style's simplification, or
            None when the path is not drawn from one (degenerate strokes and
            geometric circles)
    """

    path: VectorPath
    simplified_points: int | None


def synthesize_stroke(stroke: Stroke, style: StyleKind) -> StrokeSynthesis:
    """Synthesize one stroke, simplifying it exactly once.

    Args:
        stroke: Stroke to stylize
        style: Target style

    Returns:
        StrokeSynthesis with the path and simplified point count
    """
    if stroke.is_degenerate():
        return StrokeSynthesis(path="", simplified_points=None)

    points = stroke.points
    if style is StyleKind.GEOMETRIC and is_circular(points):
        return StrokeSynthesis(path=geometric_path(points), simplified_points=None)

    simplified = simplify(points, style.tolerance)
    return StrokeSynthesis(
        path=STYLE_SYNTHESIZERS[style](points, simplified),
        simplified_points=len(simplified),
    )


def synthesize(stroke: Stroke, style: StyleKind) -> VectorPath:
    """Synthesize path data for one stroke in the given style.

    Args:
        stroke: Stroke to stylize
        style: Target style

    Returns:
        SVG path data, or "" for a degenerate stroke
    """
    return synthesize_stroke(stroke, style).path
