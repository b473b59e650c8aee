"""Stylization pipeline orchestration.

This module runs the full simplify -> synthesize -> render pipeline over a
sketch.

Key components:
- stylize: Pure pipeline function
- GlyphStylizer: Pipeline with structured logging and run statistics
"""

import time
from dataclasses import dataclass

import structlog

from glyphsmith.config import GlyphsmithSettings, get_default_settings
from glyphsmith.core.renderer import render
from glyphsmith.core.simplify import simplify
from glyphsmith.core.styles import synthesize, synthesize_stroke
from glyphsmith.domain import GlyphDocument, Sketch, StyleKind
from glyphsmith.io.writer import document_to_svg
from glyphsmith.utils import StylizeLogger, StylizeStats


def stylize(sketch: Sketch, style: StyleKind) -> GlyphDocument:
    """Stylize every stroke of a sketch into one glyph document.

    Degenerate strokes are dropped silently; an empty sketch gives an
    empty document.

    Args:
        sketch: Strokes in drawing order
        style: Target style

    Returns:
        GlyphDocument with one path per drawable stroke
    """
    return render((synthesize(stroke, style) for stroke in sketch), style)


@dataclass(frozen=True)
class StrokePreview:
    """Simplification summary for one stroke.

    Attributes:
        index: Position of the stroke in the sketch
        input_points: Number of sampled points
        simplified_points: Points left after simplification at the style tolerance
    """

    index: int
    input_points: int
    simplified_points: int

    @property
    def degenerate(self) -> bool:
        """True if the stroke is too short to draw."""
        return self.input_points < 2


@dataclass(frozen=True)
class StylizeResult:
    """Output of a logged stylization run."""

    document: GlyphDocument
    stats: StylizeStats


class GlyphStylizer:
    """Runs the stylization pipeline with logging and statistics.

    Holds only configuration and a logger, so a single instance can serve
    any number of sketches.

    Example:
        stylizer = GlyphStylizer(get_default_settings())
        result = stylizer.stylize(sketch, StyleKind.RUNIC)
        svg = stylizer.to_svg(result.document)
    """

    def __init__(
        self,
        settings: GlyphsmithSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the stylizer.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("glyphsmith")

    def stylize(self, sketch: Sketch, style: StyleKind) -> StylizeResult:
        """Stylize a sketch, logging every stroke.

        Args:
            sketch: Strokes in drawing order
            style: Target style

        Returns:
            StylizeResult with the document and run statistics
        """
        stylize_logger = StylizeLogger(self.logger.bind(style=style.value))
        stats = stylize_logger.stats
        stats.start_time = time.time()

        paths = []
        for idx, stroke in enumerate(sketch):
            if stroke.is_degenerate():
                stylize_logger.log_stroke_skipped(idx, reason=f"{len(stroke)} point(s)")
                continue

            synthesis = synthesize_stroke(stroke, style)
            if not synthesis.path:
                stylize_logger.log_stroke_skipped(idx, reason="empty path")
                continue

            paths.append(synthesis.path)
            stylize_logger.log_stroke_rendered(
                idx,
                input_points=len(stroke),
                simplified_points=synthesis.simplified_points,
            )

        document = render(paths, style)
        stats.end_time = time.time()
        stylize_logger.log_sketch_complete(style.value)

        return StylizeResult(document=document, stats=stats)

    def preview(self, sketch: Sketch, style: StyleKind) -> list[StrokePreview]:
        """Report how far each stroke simplifies without rendering.

        Args:
            sketch: Strokes in drawing order
            style: Style whose tolerance to apply

        Returns:
            One StrokePreview per stroke, degenerate strokes included
        """
        return [
            StrokePreview(
                index=idx,
                input_points=len(stroke),
                simplified_points=len(simplify(stroke.points, style.tolerance)),
            )
            for idx, stroke in enumerate(sketch)
        ]

    def to_svg(self, document: GlyphDocument) -> str:
        """Serialize a document with the configured stroke color."""
        return document_to_svg(document, stroke_color=self.settings.render.stroke_color)
