"""Core geometric types for outline representation.

This module defines the point type shared by the tracer, the simplifier
and the path editor:
- Point: A 2D outline vertex
- PointKind: Enum tagging a vertex as a corner or smooth node
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PointKind(Enum):
    """Node kind on an outline.

    Outlines are straight-segment polygons, so the kind never changes how a
    path is serialized or drawn. It is carried as metadata only:
    - CORNER: Default for traced, parsed and smoothed points
    - SMOOTH: Node the user has tagged as smooth
    """

    CORNER = "corner"
    SMOOTH = "smooth"


@dataclass(frozen=True, slots=True)
class Point:
    """A vertex in 2D space.

    Immutable and hashable, so path snapshots can share point objects.
    Equality and hashing use the position only; the kind tag is metadata
    that path descriptions do not carry.

    Attributes:
        x: X coordinate in model (image pixel) units
        y: Y coordinate in model (image pixel) units, growing downwards
        kind: Node kind tag
    """

    x: float
    y: float
    kind: PointKind = field(default=PointKind.CORNER, compare=False)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def moved_to(self, x: float, y: float) -> "Point":
        """Return a copy of this point at a new position, keeping its kind."""
        return Point(x, y, self.kind)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and kind fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional kind fields

        Returns:
            Point instance
        """
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            kind=PointKind(data.get("kind", PointKind.CORNER.value)),
        )


def bounding_box(points: list[Point]) -> tuple[float, float, float, float]:
    """Calculate the bounding box of a point sequence.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zeros for no points
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
