"""Path I/O layer for glyphtrace.

This module handles the textual path description and the bridge to
fontTools pens. It keeps the core algorithms independent of both.

Key responsibilities:
- Parse and serialize M/L/Z path descriptions
- Draw outlines into fontTools pens
- Import straight-line outlines from a RecordingPen
"""

from glyphtrace.io.converter import draw_points, path_bounds, points_from_recording
from glyphtrace.io.path_codec import format_number, parse_path_description, serialize_path

__all__ = [
    "draw_points",
    "format_number",
    "parse_path_description",
    "path_bounds",
    "points_from_recording",
    "serialize_path",
]
