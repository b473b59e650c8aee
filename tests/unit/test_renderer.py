"""Unit tests for document rendering and SVG serialization."""

import xml.etree.ElementTree as ET

import pytest

from glyphsmith.core.renderer import render
from glyphsmith.domain import GlyphDocument, StyleKind
from glyphsmith.io.writer import build_drawing, document_to_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_svg(markup: str) -> ET.Element:
    """Parse SVG markup into an element tree root."""
    return ET.fromstring(markup)


class TestRender:
    """Tests for assembling paths into a GlyphDocument."""

    @pytest.mark.parametrize(
        ("style", "width"),
        [
            (StyleKind.BLOCKY, 6),
            (StyleKind.MINIMAL, 2),
            (StyleKind.RUNIC, 3),
            (StyleKind.FLOWING, 3),
            (StyleKind.GEOMETRIC, 3),
            (StyleKind.ORGANIC, 3),
        ],
    )
    def test_stroke_width_by_style(self, style: StyleKind, width: int) -> None:
        """Stroke width comes from the fixed style table."""
        assert render(["M 0.0 0.0 L 1.0 1.0"], style).stroke_width == width

    def test_empty_paths_skipped(self) -> None:
        """Empty path strings produce no elements."""
        doc = render(["M 0.0 0.0 L 1.0 1.0", "", "M 5.0 5.0 L 6.0 6.0"], StyleKind.RUNIC)
        assert doc.paths == ("M 0.0 0.0 L 1.0 1.0", "M 5.0 5.0 L 6.0 6.0")

    def test_no_paths_is_valid_empty_document(self) -> None:
        """Rendering nothing is not an error."""
        doc = render([], StyleKind.FLOWING)
        assert doc.is_empty()
        assert doc.style is StyleKind.FLOWING

    def test_accepts_generator(self) -> None:
        """Paths may be supplied lazily."""
        doc = render((p for p in ["M 0.0 0.0 L 2.0 2.0"]), StyleKind.MINIMAL)
        assert doc.path_count == 1


class TestSvgSerialization:
    """Tests for converting documents to SVG markup."""

    @pytest.fixture
    def document(self) -> GlyphDocument:
        """Two-path blocky document."""
        return GlyphDocument(
            style=StyleKind.BLOCKY,
            stroke_width=6,
            paths=("M 0.0 0.0 L 50.0 0.0", "M 10.0 10.0 L 10.0 90.0"),
        )

    def test_viewbox(self, document: GlyphDocument) -> None:
        """The canvas is always 100x100 glyph units."""
        root = parse_svg(document_to_svg(document))
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("viewBox") == "0 0 100 100"

    def test_one_path_element_per_path(self, document: GlyphDocument) -> None:
        """Every document path becomes one <path> element, in order."""
        root = parse_svg(document_to_svg(document))
        paths = root.findall(f"{SVG_NS}path")
        assert [p.get("d") for p in paths] == list(document.paths)

    def test_path_styling(self, document: GlyphDocument) -> None:
        """Paths are stroked, unfilled, with round caps and joins."""
        root = parse_svg(document_to_svg(document))
        for path in root.findall(f"{SVG_NS}path"):
            assert path.get("fill") == "none"
            assert path.get("stroke") == "currentColor"
            assert path.get("stroke-width") == "6"
            assert path.get("stroke-linecap") == "round"
            assert path.get("stroke-linejoin") == "round"

    def test_custom_stroke_color(self, document: GlyphDocument) -> None:
        """The stroke paint can be overridden."""
        root = parse_svg(document_to_svg(document, stroke_color="#222222"))
        assert {p.get("stroke") for p in root.findall(f"{SVG_NS}path")} == {"#222222"}

    def test_empty_document_is_valid_svg(self) -> None:
        """An empty document still declares the canvas."""
        doc = GlyphDocument(style=StyleKind.RUNIC, stroke_width=3)
        root = parse_svg(document_to_svg(doc))
        assert root.get("viewBox") == "0 0 100 100"
        assert root.findall(f"{SVG_NS}path") == []

    def test_build_drawing_returns_svgwrite_drawing(self, document: GlyphDocument) -> None:
        """The drawing can be extended before serialization."""
        dwg = build_drawing(document)
        assert len(dwg.elements) >= 2
