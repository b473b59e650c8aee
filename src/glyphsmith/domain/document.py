"""Rendered glyph representation.

A GlyphDocument is the final artifact of one stylization run: the synthesized
path data for every drawable stroke together with the stroke width of the
chosen style. Serialization to SVG markup lives in the io layer.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphsmith.domain.stroke import GLYPH_SPACE_SIZE
from glyphsmith.domain.style import StyleKind

VIEWBOX: tuple[int, int, int, int] = (0, 0, GLYPH_SPACE_SIZE, GLYPH_SPACE_SIZE)

# SVG path data ("M 0.0 0.0 L 50.0 50.0"); empty string means no path.
VectorPath = str


@dataclass(frozen=True)
class GlyphDocument:
    """A stylized glyph ready for display or persistence.

    Attributes:
        style: Style the glyph was rendered in
        stroke_width: Width of every stroked path
        paths: Non-empty path data strings, in drawing order
    """

    style: StyleKind
    stroke_width: int
    paths: tuple[VectorPath, ...] = field(default_factory=tuple)

    @property
    def path_count(self) -> int:
        """Number of rendered path elements."""
        return len(self.paths)

    def is_empty(self) -> bool:
        """Check if the document has no paths.

        Returns:
            True if nothing will be drawn
        """
        return len(self.paths) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the document
        """
        return {
            "style": self.style.value,
            "stroke_width": self.stroke_width,
            "paths": list(self.paths),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphDocument":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a document

        Returns:
            GlyphDocument instance
        """
        return cls(
            style=StyleKind(data["style"]),
            stroke_width=data["stroke_width"],
            paths=tuple(data["paths"]),
        )
