"""Domain models for glyphtrace.

This module contains the plain data types exchanged between the tracer,
the editor and the host application. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any rendering toolkit

Key classes:
- Point: A 2D outline vertex
- RasterBuffer: Decoded RGBA pixels supplied by the caller
- BoundingBox: A selection rectangle
- VectorGlyph: The extracted glyph record
"""

from glyphtrace.domain.contour import Point, PointKind, bounding_box
from glyphtrace.domain.glyph import VectorGlyph
from glyphtrace.domain.raster import BoundingBox, RasterBuffer

__all__: list[str] = [
    # Enums
    "PointKind",
    # Core types
    "BoundingBox",
    "Point",
    "RasterBuffer",
    "VectorGlyph",
    # Helpers
    "bounding_box",
]
