"""Glyphtrace - Turn scanned glyphs into editable vector outlines.

Glyphtrace traces the dark pixels inside a selected region of a decoded
raster image into a single closed polygon, and provides the node-level
editing engine (move, delete, smooth, simplify, undo) and the pan/zoom
viewport math used to refine that outline.

Example:
    $ glyphtrace inspect "M0 0L10 0L10 10L0 10Z"
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
