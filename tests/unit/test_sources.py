"""Unit tests for glyph sources and fallback behaviour."""

from unittest.mock import MagicMock, Mock

import pytest

from glyphsmith.core.processor import GlyphStylizer
from glyphsmith.core.sources import FallbackGlyphSource, ProceduralGlyphSource
from glyphsmith.domain import Sketch, Stroke, StyleKind
from glyphsmith.exceptions import InvalidDocumentError
from glyphsmith.io.markup import extract_svg

REMOTE_SVG = '<svg viewBox="0 0 100 100"><path d="M 10 10 L 90 90"/></svg>'


@pytest.fixture
def sketch() -> Sketch:
    """Single-stroke sketch."""
    return Sketch(strokes=(Stroke.from_coordinates([(0, 0), (50, 0), (50, 50)]),))


@pytest.fixture
def procedural() -> ProceduralGlyphSource:
    """Procedural source with a silent logger."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return ProceduralGlyphSource(GlyphStylizer(logger=logger))


class TestExtractSvg:
    """Tests for pulling SVG out of free-form responses."""

    def test_plain_svg(self) -> None:
        """A bare SVG document is returned unchanged."""
        assert extract_svg(REMOTE_SVG) == REMOTE_SVG

    def test_markdown_fenced_svg(self) -> None:
        """Surrounding prose and code fences are stripped."""
        text = f"Here is your glyph:\n```svg\n{REMOTE_SVG}\n```\nEnjoy!"
        assert extract_svg(text) == REMOTE_SVG

    def test_case_insensitive(self) -> None:
        """Upper-case tags are recognised."""
        assert extract_svg("<SVG></SVG>") == "<SVG></SVG>"

    @pytest.mark.parametrize("text", ["", "no markup here", "<svg viewBox='0 0 100 100'>"])
    def test_missing_svg_raises(self, text: str) -> None:
        """Text without a complete SVG element is rejected."""
        with pytest.raises(InvalidDocumentError):
            extract_svg(text)


class TestProceduralGlyphSource:
    """Tests for the local engine as a glyph source."""

    def test_generates_svg(self, procedural: ProceduralGlyphSource, sketch: Sketch) -> None:
        """Output is an SVG document holding the stylized path."""
        svg = procedural.generate(sketch, StyleKind.MINIMAL)
        assert svg.startswith("<svg")
        assert 'd="M 0.0 0.0 L 50.0 50.0"' in svg

    def test_empty_sketch(self, procedural: ProceduralGlyphSource) -> None:
        """An empty sketch still yields a canvas."""
        svg = procedural.generate(Sketch(), StyleKind.RUNIC)
        assert 'viewBox="0 0 100 100"' in svg
        assert "<path" not in svg


class TestFallbackGlyphSource:
    """Tests for primary-then-fallback generation."""

    def test_uses_primary_when_successful(
        self, procedural: ProceduralGlyphSource, sketch: Sketch
    ) -> None:
        """A valid primary response is returned, cleaned of prose."""
        primary = Mock()
        primary.generate.return_value = f"Sure! {REMOTE_SVG}"
        source = FallbackGlyphSource(primary, fallback=procedural, logger=MagicMock())

        assert source.generate(sketch, StyleKind.FLOWING) == REMOTE_SVG
        primary.generate.assert_called_once_with(sketch, StyleKind.FLOWING)

    def test_falls_back_on_exception(
        self, procedural: ProceduralGlyphSource, sketch: Sketch
    ) -> None:
        """A failing primary is replaced by the procedural engine."""
        primary = Mock()
        primary.generate.side_effect = TimeoutError("cleanup service timed out")
        logger = MagicMock()
        source = FallbackGlyphSource(primary, fallback=procedural, logger=logger)

        svg = source.generate(sketch, StyleKind.MINIMAL)

        assert svg == procedural.generate(sketch, StyleKind.MINIMAL)
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["error_type"] == "TimeoutError"

    def test_falls_back_on_malformed_output(
        self, procedural: ProceduralGlyphSource, sketch: Sketch
    ) -> None:
        """A primary response without SVG is rejected."""
        primary = Mock()
        primary.generate.return_value = "I cannot draw that."
        logger = MagicMock()
        source = FallbackGlyphSource(primary, fallback=procedural, logger=logger)

        svg = source.generate(sketch, StyleKind.BLOCKY)

        assert 'stroke-width="6"' in svg
        assert logger.warning.call_args.kwargs["reason"] == "no <svg> element found"

    def test_default_fallback_is_procedural(self, sketch: Sketch) -> None:
        """Without an explicit fallback the local engine is used."""
        primary = Mock()
        primary.generate.side_effect = ConnectionError("offline")
        source = FallbackGlyphSource(primary, logger=MagicMock())

        svg = source.generate(sketch, StyleKind.MINIMAL)
        assert 'd="M 0.0 0.0 L 50.0 50.0"' in svg
