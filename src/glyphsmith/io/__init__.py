"""Glyph I/O layer for glyphsmith.

This module handles reading sketches and writing stylized glyphs. It
provides a clean abstraction layer between files and the domain models.

Key responsibilities:
- Load and validate sketch JSON files
- Serialize glyph documents to SVG with svgwrite
- Extract SVG documents from external glyph source responses

Key classes:
- SketchReader: Load sketches
- GlyphWriter: Save glyph documents
"""

from glyphsmith.io.markup import extract_svg
from glyphsmith.io.reader import SketchReader, parse_sketch
from glyphsmith.io.writer import GlyphWriter, document_to_svg

__all__ = [
    "GlyphWriter",
    "SketchReader",
    "document_to_svg",
    "extract_svg",
    "parse_sketch",
]
