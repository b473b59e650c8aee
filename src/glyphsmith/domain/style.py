"""Glyph style variants.

Each style pairs a simplification tolerance with a rendered stroke width.
The set is closed: synthesis dispatches over every member.
"""

from enum import Enum


class StyleKind(str, Enum):
    """Procedural glyph style."""

    RUNIC = "runic"
    FLOWING = "flowing"
    GEOMETRIC = "geometric"
    ORGANIC = "organic"
    BLOCKY = "blocky"
    MINIMAL = "minimal"

    @property
    def tolerance(self) -> float:
        """Simplification tolerance in glyph units."""
        return STYLE_TOLERANCES[self]

    @property
    def stroke_width(self) -> int:
        """Rendered stroke width in glyph units."""
        return STYLE_STROKE_WIDTHS.get(self, DEFAULT_STROKE_WIDTH)


STYLE_TOLERANCES: dict[StyleKind, float] = {
    StyleKind.RUNIC: 8.0,
    StyleKind.FLOWING: 5.0,
    StyleKind.GEOMETRIC: 15.0,
    StyleKind.ORGANIC: 4.0,
    StyleKind.BLOCKY: 20.0,
    StyleKind.MINIMAL: 25.0,
}

DEFAULT_STROKE_WIDTH = 3

STYLE_STROKE_WIDTHS: dict[StyleKind, int] = {
    StyleKind.BLOCKY: 6,
    StyleKind.MINIMAL: 2,
}
