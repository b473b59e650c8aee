"""Sketch reader for loading hand-drawn strokes.

Sketch files are JSON documents of the form::

    {"strokes": [[{"x": 10.0, "y": 20.0}, {"x": 12.5, "y": 21.0}], ...]}

Coordinates are validated on load; NaN and infinite values are rejected so
they never reach the stylization core.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, FiniteFloat, ValidationError

from glyphsmith.domain import Point, Sketch, Stroke
from glyphsmith.exceptions import SketchLoadError


class _PointModel(BaseModel):
    x: FiniteFloat
    y: FiniteFloat

    model_config = ConfigDict(extra="ignore")


class _SketchModel(BaseModel):
    strokes: list[list[_PointModel]]

    model_config = ConfigDict(extra="ignore")


def parse_sketch(data: object) -> Sketch:
    """Validate decoded JSON data and convert it to a Sketch.

    Args:
        data: Decoded JSON value

    Returns:
        Sketch instance

    Raises:
        pydantic.ValidationError: If the data is not a valid sketch
    """
    model = _SketchModel.model_validate(data)
    return Sketch(
        strokes=tuple(
            Stroke(points=tuple(Point(p.x, p.y) for p in stroke))
            for stroke in model.strokes
        )
    )


class SketchReader:
    """Reads sketches from JSON files.

    Example:
        reader = SketchReader(Path("sketch.json"))
        sketch = reader.load()
    """

    def __init__(self, sketch_path: Path) -> None:
        """Initialize reader with sketch path.

        Args:
            sketch_path: Path to sketch JSON file
        """
        self._sketch_path = sketch_path

    @property
    def path(self) -> Path:
        """Path of the sketch file."""
        return self._sketch_path

    def load(self) -> Sketch:
        """Load and validate the sketch file.

        Returns:
            Sketch instance

        Raises:
            SketchLoadError: If the file is missing, not JSON, or not a valid sketch
        """
        path = str(self._sketch_path)

        try:
            text = self._sketch_path.read_text(encoding="utf-8")
        except OSError as e:
            raise SketchLoadError(path, str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SketchLoadError(path, f"invalid JSON: {e}") from e

        try:
            return parse_sketch(data)
        except ValidationError as e:
            raise SketchLoadError(path, f"invalid sketch: {e.error_count()} error(s)") from e
