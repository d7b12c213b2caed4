"""Pixel classification for tracing.

A pixel is foreground (ink) when its weighted brightness falls below the
threshold. The weights favour green, roughly like perceived luminance;
alpha is ignored.
"""

from glyphtrace.domain import RasterBuffer

DEFAULT_THRESHOLD = 128

RED_WEIGHT = 0.34
GREEN_WEIGHT = 0.50
BLUE_WEIGHT = 0.16


def validate_threshold(threshold: int) -> int:
    """Return threshold if it is an integer in [0, 255].

    Raises:
        ValueError: If the threshold is out of range or not an integer
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise ValueError(f"Threshold must be an integer, got {threshold!r}")
    if not 0 <= threshold <= 255:
        raise ValueError(f"Threshold must be within [0, 255], got {threshold}")
    return threshold


def luma(buffer: RasterBuffer, x: int, y: int) -> float:
    """Weighted brightness of an in-bounds pixel."""
    r, g, b, _ = buffer.pixel(x, y)
    return RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b


def is_foreground(buffer: RasterBuffer, x: int, y: int, threshold: int = DEFAULT_THRESHOLD) -> bool:
    """Check whether a pixel counts as ink.

    Args:
        buffer: Pixel data
        x: Column
        y: Row
        threshold: Brightness cutoff in [0, 255]

    Returns:
        True for pixels darker than threshold; always False out of bounds
    """
    if not buffer.contains(x, y):
        return False
    return luma(buffer, x, y) < threshold
