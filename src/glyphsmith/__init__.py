"""Glyphsmith - Procedural stylization of hand-drawn glyphs.

Glyphsmith turns freehand ink strokes, sampled in a 100x100 glyph space, into
clean stylized SVG glyphs for constructed writing systems. Every style is a
deterministic geometric transform: path simplification followed by a
style-specific path synthesis.

Example:
    $ glyphsmith sketch.json --style runic

This will create sketch-runic.svg next to the input sketch.
"""

__version__ = "0.1.0"
__author__ = "Glyphsmith Contributors"

__all__ = ["__author__", "__version__"]
