"""Core geometric types for ink input.

This module defines the input side of the stylization pipeline:
- Point: A 2D point in glyph space
- Stroke: The points captured during one continuous drawing gesture
- Sketch: All strokes of one glyph drawing, in drawing order

Glyph space is a fixed 100x100 square; coordinates are abstract units, not
pixels.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

# Width and height of the square glyph coordinate space
GLYPH_SPACE_SIZE = 100


@dataclass(frozen=True, slots=True)
class Point:
    """A point in glyph space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in glyph units
        y: Y coordinate in glyph units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Stroke:
    """An ordered run of points from one drawing gesture.

    Point order is the drawing order and determines path direction.
    A stroke with fewer than two points is degenerate and never produces
    a path.

    Attributes:
        points: Points in the order they were sampled
    """

    points: tuple[Point, ...]

    @classmethod
    def from_coordinates(cls, coords: Iterable[tuple[float, float]]) -> "Stroke":
        """Build a stroke from (x, y) pairs.

        Args:
            coords: Iterable of (x, y) pairs

        Returns:
            Stroke instance
        """
        return cls(points=tuple(Point(float(x), float(y)) for x, y in coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_degenerate(self) -> bool:
        """Check if the stroke is too short to draw.

        Returns:
            True if the stroke has fewer than two points
        """
        return len(self.points) < 2

    def to_list(self) -> list[dict[str, float]]:
        """Serialize to a list of point dictionaries."""
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_list(cls, data: list[dict[str, Any]]) -> "Stroke":
        """Deserialize from a list of point dictionaries."""
        return cls(points=tuple(Point.from_dict(p) for p in data))


@dataclass(frozen=True)
class Sketch:
    """All strokes of one glyph drawing.

    Strokes render in sequence order, later strokes on top.

    Attributes:
        strokes: Strokes in drawing order
    """

    strokes: tuple[Stroke, ...] = ()

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self) -> Iterator[Stroke]:
        return iter(self.strokes)

    def is_empty(self) -> bool:
        """Check if the sketch has no strokes.

        Returns:
            True if nothing has been drawn
        """
        return len(self.strokes) == 0

    def drawable_strokes(self) -> list[Stroke]:
        """Get the strokes that can produce a path.

        Returns:
            Strokes with at least two points, in drawing order
        """
        return [stroke for stroke in self.strokes if not stroke.is_degenerate()]

    @property
    def point_count(self) -> int:
        """Total number of sampled points across all strokes."""
        return sum(len(stroke) for stroke in self.strokes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary of the form {"strokes": [[{"x": .., "y": ..}, ...], ...]}
        """
        return {"strokes": [stroke.to_list() for stroke in self.strokes]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sketch":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a sketch

        Returns:
            Sketch instance
        """
        return cls(strokes=tuple(Stroke.from_list(s) for s in data.get("strokes", [])))
