"""Core algorithms for glyphtrace.

This module contains the core algorithms for:

- Viewport math (pan, zoom-to-cursor, fit-to-view, screen <-> model)
- Pixel classification and single-contour boundary tracing
- Polyline simplification (collinearity, decimation, smoothing)
- The editable path model and its bounded undo history
- Extraction, selection and editing sessions

Key functions:
- is_foreground: Classify a pixel as ink
- remove_collinear: Collapse straight runs of boundary points
- decimate: Keep every other point
- smooth: Cut every corner of a polygon
- build_glyph: Create a glyph record

Key classes:
- ViewportTransform: Immutable pan/zoom state
- ContourTracer: Moore-neighbor boundary tracer
- PathModel: Editable closed outline
- EditHistory: Bounded undo stack
- GlyphExtractor: Selection to glyph pipeline
- SelectionSession: Extraction canvas state
- EditSession: Editor canvas state
"""

from glyphtrace.core.editor import EditSession
from glyphtrace.core.extractor import GlyphExtractor
from glyphtrace.core.glyph_builder import build_glyph
from glyphtrace.core.history import EditHistory
from glyphtrace.core.path_model import PathModel
from glyphtrace.core.sampler import is_foreground, luma
from glyphtrace.core.selection import SelectionSession
from glyphtrace.core.simplify import decimate, remove_collinear, smooth
from glyphtrace.core.tracer import ContourTracer
from glyphtrace.core.viewport import ViewportTransform, wheel_zoom_factor

__all__ = [
    # Sessions
    "EditSession",
    "SelectionSession",
    # Pipeline
    "ContourTracer",
    "GlyphExtractor",
    "build_glyph",
    # Path editing
    "EditHistory",
    "PathModel",
    # View
    "ViewportTransform",
    "wheel_zoom_factor",
    # Functions
    "decimate",
    "is_foreground",
    "luma",
    "remove_collinear",
    "smooth",
]
