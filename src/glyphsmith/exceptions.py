"""Exception hierarchy for Glyphsmith.

The stylization core itself never raises for any sketch shape; these
exceptions belong to the layers around it (sketch loading, document output,
external glyph sources).
"""


class GlyphsmithError(Exception):
    """Base exception for all Glyphsmith errors."""

    pass


class SketchError(GlyphsmithError):
    """Errors related to sketch input."""

    pass


class SketchLoadError(SketchError):
    """Error loading a sketch file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load sketch '{path}': {reason}")


class GlyphDocumentError(GlyphsmithError):
    """Errors related to glyph documents."""

    pass


class GlyphSaveError(GlyphDocumentError):
    """Error saving a glyph document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save glyph '{path}': {reason}")


class InvalidDocumentError(GlyphDocumentError):
    """Markup does not contain a usable SVG document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid glyph document: {reason}")
