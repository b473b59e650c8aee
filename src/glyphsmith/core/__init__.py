"""Core stylization algorithms for glyphsmith.

This module contains the core algorithms for:

- Geometry operations (distances, bounding boxes, snapping, path formatting)
- Polyline simplification (Ramer-Douglas-Peucker)
- Style-specific path synthesis
- Document rendering and pipeline orchestration

All algorithms are:
- Stateless (safe to call from any number of threads)
- Pure (no side effects, no I/O)
- Deterministic for identical input

Key functions:
- simplify: Reduce a polyline within a distance tolerance
- synthesize: Path data for one stroke in one style
- synthesize_stroke: Path data plus simplified point count, for statistics
- render: Assemble paths into a GlyphDocument
- stylize: Full sketch -> GlyphDocument pipeline

Key classes:
- GlyphStylizer: Pipeline with logging and statistics
- ProceduralGlyphSource: Local engine as a glyph source
- FallbackGlyphSource: Primary glyph source with procedural fallback
"""

from glyphsmith.core.geometry import perpendicular_distance
from glyphsmith.core.processor import GlyphStylizer, StrokePreview, StylizeResult, stylize
from glyphsmith.core.renderer import render
from glyphsmith.core.simplify import simplify
from glyphsmith.core.sources import FallbackGlyphSource, GlyphSource, ProceduralGlyphSource
from glyphsmith.core.styles import (
    STYLE_SYNTHESIZERS,
    StrokeSynthesis,
    synthesize,
    synthesize_stroke,
)

__all__ = [
    # Source classes
    "FallbackGlyphSource",
    "GlyphSource",
    # Processor classes
    "GlyphStylizer",
    "ProceduralGlyphSource",
    "STYLE_SYNTHESIZERS",
    "StrokePreview",
    "StrokeSynthesis",
    "StylizeResult",
    # Pipeline functions
    "perpendicular_distance",
    "render",
    "simplify",
    "stylize",
    "synthesize",
    "synthesize_stroke",
]
