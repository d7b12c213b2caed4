"""Vector glyph record.

This module defines the artifact handed to the glyph collection once an
outline has been traced or edited.
"""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class VectorGlyph:
    """An extracted glyph outline.

    The glyph collection owns these records; the core only creates them or
    returns updated copies.

    Attributes:
        id: Unique identifier
        path_description: Closed outline in M/L/Z path syntax
        width: Width of the traced region in natural pixels
        height: Height of the traced region in natural pixels
        name: Human-readable label
    """

    id: str
    path_description: str
    width: int
    height: int
    name: str

    def with_path(self, path_description: str) -> "VectorGlyph":
        """Return a copy of this glyph with a new outline and the same id."""
        return replace(self, path_description=path_description)

    def is_empty(self) -> bool:
        """Check whether the glyph has no outline."""
        return not self.path_description.strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "id": self.id,
            "path": self.path_description,
            "width": self.width,
            "height": self.height,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VectorGlyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            VectorGlyph instance
        """
        return cls(
            id=str(data["id"]),
            path_description=data["path"],
            width=int(data["width"]),
            height=int(data["height"]),
            name=data["name"],
        )
