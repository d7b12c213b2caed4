"""Pointer interaction states.

Views track what the pointer is doing as one explicit state value instead
of loose flags. Releasing the button or leaving the view always returns to
IDLE, so no drag or pan can get stuck.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    """No button held."""


@dataclass(frozen=True)
class Selecting:
    """Rubber-band selection in progress.

    Attributes:
        anchor: Model point where the drag started
    """

    anchor: tuple[float, float]


@dataclass(frozen=True)
class DraggingPoint:
    """An outline node is being dragged.

    Attributes:
        index: Index of the dragged point
    """

    index: int


@dataclass(frozen=True)
class Panning:
    """The view is being dragged.

    Attributes:
        last_screen: Pointer position at the previous event
    """

    last_screen: tuple[float, float]


InteractionState = Idle | Selecting | DraggingPoint | Panning

IDLE = Idle()
