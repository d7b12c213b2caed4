"""Conversion between outline points and fontTools pens.

This module lets a path be drawn into any fontTools pen (for example a
TTGlyphPen in a font export layer) and lets straight-line outlines recorded
by a RecordingPen be brought back as points.
"""

from typing import Any

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen

from glyphtrace.domain import Point
from glyphtrace.exceptions import PathParseError


def draw_points(points: list[Point], pen: AbstractPen) -> None:
    """Draw a closed outline into a fontTools pen.

    Args:
        points: Outline vertices; nothing is drawn when empty
        pen: Any fontTools pen
    """
    if not points:
        return

    pen.moveTo(points[0].to_tuple())
    for point in points[1:]:
        pen.lineTo(point.to_tuple())
    pen.closePath()


def points_from_recording(value: list[tuple[str, tuple[Any, ...]]]) -> list[Point]:
    """Convert a RecordingPen value holding one straight-line contour.

    Args:
        value: ``RecordingPen.value`` list of (operator, args) pairs

    Returns:
        Outline vertices in drawing order

    Raises:
        PathParseError: If the recording holds curves, components, or more
            than one contour
    """
    points: list[Point] = []
    started = False
    finished = False

    for operator, args in value:
        if finished:
            raise PathParseError(str(value), "recording holds more than one contour")
        if operator == "moveTo":
            if started:
                raise PathParseError(str(value), "recording holds more than one contour")
            started = True
            (pt,) = args
            points.append(Point(float(pt[0]), float(pt[1])))
        elif operator == "lineTo":
            if not started:
                raise PathParseError(str(value), "lineTo before moveTo")
            (pt,) = args
            points.append(Point(float(pt[0]), float(pt[1])))
        elif operator in ("closePath", "endPath"):
            finished = True
        else:
            raise PathParseError(str(value), f"unsupported pen operation '{operator}'")

    return points


def path_bounds(points: list[Point]) -> tuple[float, float, float, float] | None:
    """Calculate outline bounds with a fontTools BoundsPen.

    Returns:
        (x_min, y_min, x_max, y_max), or None for an empty outline
    """
    pen = BoundsPen(glyphSet=None)
    draw_points(points, pen)
    return pen.bounds
