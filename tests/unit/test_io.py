"""Unit tests for the glyph I/O layer.

Tests for SketchReader, GlyphWriter, and sketch parsing.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from glyphsmith.domain import GlyphDocument, Point, Sketch, StyleKind
from glyphsmith.exceptions import GlyphSaveError, SketchLoadError
from glyphsmith.io.reader import SketchReader, parse_sketch
from glyphsmith.io.writer import GlyphWriter


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseSketch:
    """Tests for sketch validation."""

    def test_valid_sketch(self) -> None:
        """Strokes and points are converted in order."""
        sketch = parse_sketch({"strokes": [[{"x": 1, "y": 2}, {"x": 3.5, "y": 4}], []]})
        assert len(sketch) == 2
        assert sketch.strokes[0].points == (Point(1.0, 2.0), Point(3.5, 4.0))
        assert sketch.strokes[1].is_degenerate()

    def test_extra_fields_ignored(self) -> None:
        """Unknown keys such as pressure or timestamps are dropped."""
        sketch = parse_sketch({"strokes": [[{"x": 1, "y": 2, "t": 17}]], "phoneme": "ka"})
        assert sketch.strokes[0].points == (Point(1.0, 2.0),)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad: float) -> None:
        """NaN and infinite coordinates never reach the core."""
        with pytest.raises(ValidationError):
            parse_sketch({"strokes": [[{"x": bad, "y": 0}]]})

    def test_missing_coordinate_rejected(self) -> None:
        """Points need both coordinates."""
        with pytest.raises(ValidationError):
            parse_sketch({"strokes": [[{"x": 1}]]})


class TestSketchReader:
    """Tests for SketchReader class."""

    def test_load(self, tmp_path: Path) -> None:
        """A sketch written with to_dict loads back identically."""
        sketch = Sketch.from_dict({"strokes": [[{"x": 0, "y": 0}, {"x": 10, "y": 5}]]})
        path = write_json(tmp_path / "ka.json", sketch.to_dict())

        assert SketchReader(path).load() == sketch

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        """Missing files raise SketchLoadError."""
        reader = SketchReader(tmp_path / "missing.json")
        with pytest.raises(SketchLoadError) as exc_info:
            reader.load()
        assert exc_info.value.path == str(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises SketchLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{strokes: ", encoding="utf-8")
        with pytest.raises(SketchLoadError, match="invalid JSON"):
            SketchReader(path).load()

    def test_load_nan_literal(self, tmp_path: Path) -> None:
        """JSON NaN literals are rejected by validation."""
        path = tmp_path / "nan.json"
        path.write_text('{"strokes": [[{"x": NaN, "y": 1}]]}', encoding="utf-8")
        with pytest.raises(SketchLoadError, match="invalid sketch"):
            SketchReader(path).load()

    def test_load_wrong_shape(self, tmp_path: Path) -> None:
        """A JSON document of the wrong shape raises SketchLoadError."""
        path = write_json(tmp_path / "list.json", [[1, 2], [3, 4]])
        with pytest.raises(SketchLoadError, match="invalid sketch"):
            SketchReader(path).load()

    def test_path_property(self) -> None:
        """The reader exposes its path."""
        assert SketchReader(Path("ka.json")).path == Path("ka.json")


class TestGlyphWriter:
    """Tests for GlyphWriter class."""

    @pytest.fixture
    def document(self) -> GlyphDocument:
        return GlyphDocument(
            style=StyleKind.MINIMAL, stroke_width=2, paths=("M 0.0 0.0 L 50.0 50.0",)
        )

    def test_write(self, tmp_path: Path, document: GlyphDocument) -> None:
        """The written file is an SVG glyph."""
        out = tmp_path / "ka.svg"
        GlyphWriter().write(document, out)

        content = out.read_text(encoding="utf-8")
        assert 'viewBox="0 0 100 100"' in content
        assert 'd="M 0.0 0.0 L 50.0 50.0"' in content
        assert 'stroke-width="2"' in content

    def test_write_custom_color(self, tmp_path: Path, document: GlyphDocument) -> None:
        """The writer applies its stroke color."""
        out = tmp_path / "ka.svg"
        GlyphWriter(stroke_color="black").write(document, out)
        assert 'stroke="black"' in out.read_text(encoding="utf-8")

    def test_write_into_missing_directory(self, tmp_path: Path, document: GlyphDocument) -> None:
        """OS errors surface as GlyphSaveError."""
        out = tmp_path / "no" / "such" / "dir" / "ka.svg"
        with pytest.raises(GlyphSaveError) as exc_info:
            GlyphWriter().write(document, out)
        assert exc_info.value.path == str(out)

    def test_write_permission_error(self, tmp_path: Path, document: GlyphDocument) -> None:
        """Permission problems are wrapped as well."""
        with patch("svgwrite.Drawing.saveas", side_effect=PermissionError("denied")):
            with pytest.raises(GlyphSaveError, match="denied"):
                GlyphWriter().write(document, tmp_path / "ka.svg")

    @pytest.mark.parametrize(
        ("sketch_path", "style", "expected"),
        [
            (Path("ka.json"), StyleKind.RUNIC, Path("ka-runic.svg")),
            (Path("/glyphs/tha.json"), StyleKind.BLOCKY, Path("/glyphs/tha-blocky.svg")),
            (Path("dir/sketch.v2.json"), StyleKind.MINIMAL, Path("dir/sketch.v2-minimal.svg")),
        ],
    )
    def test_get_output_path(self, sketch_path: Path, style: StyleKind, expected: Path) -> None:
        """Output sits beside the sketch with the style appended."""
        assert GlyphWriter.get_output_path(sketch_path, style) == expected
