"""Bounded undo history of path snapshots."""

from collections import deque

from glyphtrace.core.path_model import PathSnapshot

DEFAULT_CAPACITY = 11


class EditHistory:
    """Stack of the most recent path snapshots.

    Holds at most capacity entries; pushing onto a full history drops the
    oldest one. Snapshots are tuples of frozen points, so keeping a
    reference is as good as a deep copy.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._entries: deque[PathSnapshot] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of snapshots kept."""
        return self._entries.maxlen or 0

    def snapshot(self, state: PathSnapshot) -> None:
        """Push the pre-edit state."""
        self._entries.append(tuple(state))

    def undo(self) -> PathSnapshot | None:
        """Pop the most recent snapshot, or None when there is nothing to undo."""
        if not self._entries:
            return None
        return self._entries.pop()

    @property
    def can_undo(self) -> bool:
        """Check whether undo would restore anything."""
        return bool(self._entries)

    def clear(self) -> None:
        """Forget every snapshot."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
