"""Editable closed outline.

A PathModel holds an ordered, implicitly closed sequence of points. It is
either empty or a polygon of at least three points; any edit that would
leave one or two points is refused with PathInvariantError and the model
is left unchanged.

Points live in an immutable tuple that each edit replaces, so a snapshot
is the tuple itself and undo history shares unchanged points instead of
deep copying them.
"""

from collections.abc import Iterable, Iterator

from glyphtrace.domain import Point
from glyphtrace.exceptions import PathInvariantError
from glyphtrace.io.path_codec import parse_path_description, serialize_path

MIN_POINTS = 3

PathSnapshot = tuple[Point, ...]


def _check_count(operation: str, count: int) -> None:
    if 0 < count < MIN_POINTS:
        raise PathInvariantError(operation, count)


class PathModel:
    """Mutable outline built on immutable point tuples."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        snapshot = tuple(points)
        _check_count("create", len(snapshot))
        self._points: PathSnapshot = snapshot

    @classmethod
    def from_description(cls, description: str) -> "PathModel":
        """Parse a path description into a model.

        Raises:
            PathParseError: If the description is malformed
            PathInvariantError: If it describes one or two points
        """
        return cls(parse_path_description(description))

    def to_description(self) -> str:
        """Serialize the outline (empty string for an empty model)."""
        return serialize_path(list(self._points))

    @property
    def points(self) -> list[Point]:
        """Copy of the current points."""
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathModel):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"PathModel({len(self._points)} points)"

    def is_empty(self) -> bool:
        """Check whether the model has no points."""
        return not self._points

    def snapshot(self) -> PathSnapshot:
        """Capture the current state; O(1) since the tuple is immutable."""
        return self._points

    def restore(self, snapshot: PathSnapshot) -> None:
        """Replace the current state with a previous snapshot."""
        self.replace_all(snapshot)

    def _index(self, index: int) -> int:
        if not -len(self._points) <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range for {len(self._points)} points")
        return index % len(self._points)

    def move_point(self, index: int, x: float, y: float) -> None:
        """Move one point, keeping its kind.

        Raises:
            IndexError: If index is out of range
        """
        i = self._index(index)
        pts = self._points
        self._points = pts[:i] + (pts[i].moved_to(x, y),) + pts[i + 1 :]

    def delete_point(self, index: int) -> None:
        """Remove one point.

        Raises:
            IndexError: If index is out of range
            PathInvariantError: If fewer than three points would remain
        """
        i = self._index(index)
        if len(self._points) - 1 < MIN_POINTS:
            raise PathInvariantError("delete_point", len(self._points) - 1)
        self._points = self._points[:i] + self._points[i + 1 :]

    def insert_points(self, index: int, points: Iterable[Point]) -> None:
        """Insert points before index (index == len appends).

        Raises:
            IndexError: If index is out of range
            PathInvariantError: If the result would have one or two points
        """
        if not 0 <= index <= len(self._points):
            raise IndexError(f"Insert index {index} out of range for {len(self._points)} points")
        new_points = self._points[:index] + tuple(points) + self._points[index:]
        _check_count("insert_points", len(new_points))
        self._points = new_points

    def replace_all(self, points: Iterable[Point]) -> None:
        """Replace every point at once.

        Raises:
            PathInvariantError: If the result would have one or two points
        """
        new_points = tuple(points)
        _check_count("replace_all", len(new_points))
        self._points = new_points
