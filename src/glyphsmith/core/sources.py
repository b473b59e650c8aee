"""Interchangeable producers of glyph SVG markup.

A glyph source turns a sketch and a style into an SVG document. The
procedural source is the local engine and always succeeds; other sources
(for example a network-backed cleanup service) can be placed in front of it
with FallbackGlyphSource.
"""

from typing import Protocol

import structlog

from glyphsmith.core.processor import GlyphStylizer
from glyphsmith.domain import Sketch, StyleKind
from glyphsmith.exceptions import InvalidDocumentError
from glyphsmith.io.markup import extract_svg


class GlyphSource(Protocol):
    """Anything that can turn a sketch into SVG markup."""

    def generate(self, sketch: Sketch, style: StyleKind) -> str:
        """Produce an SVG document for the sketch in the given style."""
        ...


class ProceduralGlyphSource:
    """Glyph source backed by the deterministic stylization engine."""

    def __init__(self, stylizer: GlyphStylizer | None = None) -> None:
        self._stylizer = stylizer or GlyphStylizer()

    def generate(self, sketch: Sketch, style: StyleKind) -> str:
        result = self._stylizer.stylize(sketch, style)
        return self._stylizer.to_svg(result.document)


class FallbackGlyphSource:
    """Tries a primary glyph source and falls back to another on failure.

    The primary's output is reduced to its <svg> element. Any exception from
    the primary, or output without an SVG element, sends the request to the
    fallback, which defaults to the procedural engine.

    Example:
        source = FallbackGlyphSource(primary=cleanup_service)
        svg = source.generate(sketch, StyleKind.FLOWING)
    """

    def __init__(
        self,
        primary: GlyphSource,
        fallback: GlyphSource | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback or ProceduralGlyphSource()
        self._logger = logger or structlog.get_logger("glyphsmith")

    def generate(self, sketch: Sketch, style: StyleKind) -> str:
        """Produce SVG from the primary source, or the fallback if it fails.

        Args:
            sketch: Strokes in drawing order
            style: Target style

        Returns:
            SVG document string
        """
        try:
            return extract_svg(self._primary.generate(sketch, style))
        except InvalidDocumentError as e:
            self._logger.warning(
                "Primary glyph source returned no SVG, using fallback",
                style=style.value,
                reason=e.reason,
            )
        except Exception as e:
            self._logger.warning(
                "Primary glyph source failed, using fallback",
                style=style.value,
                error=str(e),
                error_type=type(e).__name__,
            )

        return self._fallback.generate(sketch, style)
