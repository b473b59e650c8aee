"""Assembly of synthesized paths into a glyph document."""

from collections.abc import Iterable

from glyphsmith.domain import GlyphDocument, StyleKind, VectorPath


def render(paths: Iterable[VectorPath], style: StyleKind) -> GlyphDocument:
    """Assemble per-stroke path data into a glyph document.

    Empty path strings are skipped. No paths at all still yields a valid,
    empty document.

    Args:
        paths: Path data in drawing order
        style: Style the paths were synthesized in

    Returns:
        GlyphDocument stroked with the style's width
    """
    return GlyphDocument(
        style=style,
        stroke_width=style.stroke_width,
        paths=tuple(path for path in paths if path),
    )
