"""Extraction of SVG documents from free-form text.

External glyph sources may wrap their SVG in prose or markdown fences; only
the <svg>...</svg> element is kept.
"""

import re

from glyphsmith.exceptions import InvalidDocumentError

_SVG_PATTERN = re.compile(r"<svg[\s\S]*</svg>", re.IGNORECASE)


def extract_svg(text: str) -> str:
    """Return the SVG element contained in a block of text.

    Args:
        text: Response text that should contain an SVG document

    Returns:
        The text from the first "<svg" to the last "</svg>"

    Raises:
        InvalidDocumentError: If no complete SVG element is present
    """
    match = _SVG_PATTERN.search(text)
    if match is None:
        raise InvalidDocumentError("no <svg> element found")
    return match.group(0)
