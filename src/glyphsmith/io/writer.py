"""Glyph writer for saving stylized glyphs as SVG.

This module converts GlyphDocument objects to SVG markup with svgwrite and
writes them to disk.
"""

from pathlib import Path

import svgwrite

from glyphsmith.domain import VIEWBOX, GlyphDocument, StyleKind
from glyphsmith.exceptions import GlyphSaveError


def build_drawing(document: GlyphDocument, stroke_color: str = "currentColor") -> svgwrite.Drawing:
    """Create an SVG drawing containing every path of a glyph document.

    Each path is stroked, never filled, with round caps and joins.

    Args:
        document: Glyph to draw
        stroke_color: Paint for all strokes

    Returns:
        svgwrite.Drawing with a 100x100 viewBox
    """
    dwg = svgwrite.Drawing(size=("100%", "100%"), debug=False)
    dwg.viewbox(*VIEWBOX)

    for path_data in document.paths:
        dwg.add(
            dwg.path(
                d=path_data,
                fill="none",
                stroke=stroke_color,
                stroke_width=document.stroke_width,
                stroke_linecap="round",
                stroke_linejoin="round",
            )
        )

    return dwg


def document_to_svg(document: GlyphDocument, stroke_color: str = "currentColor") -> str:
    """Serialize a glyph document to SVG markup.

    Args:
        document: Glyph to serialize
        stroke_color: Paint for all strokes

    Returns:
        SVG document string
    """
    return build_drawing(document, stroke_color=stroke_color).tostring()


class GlyphWriter:
    """Writes glyph documents to SVG files.

    Example:
        writer = GlyphWriter()
        writer.write(document, Path("glyph.svg"))
    """

    def __init__(self, stroke_color: str = "currentColor") -> None:
        """Initialize writer.

        Args:
            stroke_color: Paint for all strokes
        """
        self._stroke_color = stroke_color

    def write(self, document: GlyphDocument, output_path: Path) -> None:
        """Write a glyph document as an SVG file.

        Args:
            document: Glyph to write
            output_path: Destination path

        Raises:
            GlyphSaveError: If the file cannot be written
        """
        dwg = build_drawing(document, stroke_color=self._stroke_color)
        try:
            dwg.saveas(str(output_path), pretty=True)
        except OSError as e:
            raise GlyphSaveError(str(output_path), str(e)) from e

    @staticmethod
    def get_output_path(sketch_path: Path, style: StyleKind) -> Path:
        """Generate the default output path for a stylized sketch.

        Args:
            sketch_path: Path to the input sketch file
            style: Style the glyph is rendered in

        Returns:
            Path like {stem}-{style}.svg beside the input

        Examples:
            >>> GlyphWriter.get_output_path(Path("ka.json"), StyleKind.RUNIC)
            PosixPath('ka-runic.svg')
        """
        return sketch_path.parent / f"{sketch_path.stem}-{style.value}.svg"
