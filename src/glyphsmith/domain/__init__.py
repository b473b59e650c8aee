"""Domain models for glyphsmith.

This module contains the core domain models representing hand-drawn input,
glyph styles and rendered glyphs. All models are:

- Immutable (frozen dataclasses, tuples for sequences)
- Serializable to plain dictionaries
- Independent of the SVG library used for output

Key classes:
- Point: A 2D point in glyph space
- Stroke: Points from one drawing gesture
- Sketch: Ordered strokes of one glyph drawing
- StyleKind: Closed set of procedural styles
- GlyphDocument: Stylized output glyph
"""

from glyphsmith.domain.document import VIEWBOX, GlyphDocument, VectorPath
from glyphsmith.domain.stroke import GLYPH_SPACE_SIZE, Point, Sketch, Stroke
from glyphsmith.domain.style import StyleKind

__all__: list[str] = [
    # Constants
    "GLYPH_SPACE_SIZE",
    "VIEWBOX",
    # Enums
    "StyleKind",
    # Core types
    "Point",
    "Stroke",
    "Sketch",
    "VectorPath",
    "GlyphDocument",
]
