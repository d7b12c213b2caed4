"""Node-level editing session for one glyph.

An EditSession owns a PathModel parsed from a glyph, an undo history and
the editor's view state. Every action that changes the outline pushes the
pre-edit snapshot first and ends any node drag in progress. Refused or
no-op actions leave the outline, the history and the drag untouched.

The session ends with commit (an updated glyph with the same id) or cancel
(nothing is written back).
"""

import structlog

from glyphtrace.config import GlyphTraceSettings
from glyphtrace.core.history import EditHistory
from glyphtrace.core.interaction import IDLE, DraggingPoint, InteractionState, Panning
from glyphtrace.core.path_model import MIN_POINTS, PathModel
from glyphtrace.core.simplify import decimate, smooth
from glyphtrace.core.viewport import ViewportTransform, wheel_zoom_factor
from glyphtrace.domain import VectorGlyph
from glyphtrace.exceptions import PathInvariantError

logger = structlog.get_logger(__name__)


class EditSession:
    """Interactive editor state for a single glyph outline.

    Example:
        session = EditSession(glyph, viewport_size=(800, 600))
        session.simplify()
        session.undo()
        updated = session.commit()
    """

    def __init__(
        self,
        glyph: VectorGlyph,
        viewport_size: tuple[float, float],
        settings: GlyphTraceSettings | None = None,
    ) -> None:
        """Open a glyph for editing.

        Args:
            glyph: Glyph to edit
            viewport_size: (width, height) of the editor canvas in screen pixels
            settings: Application settings (defaults if None)

        Raises:
            PathParseError: If the glyph's path description is malformed
            PathInvariantError: If it describes one or two points
        """
        self.settings = settings if settings is not None else GlyphTraceSettings()
        self.glyph = glyph
        self.path = PathModel.from_description(glyph.path_description)
        self.history = EditHistory(self.settings.editor.history_capacity)
        self.viewport_size = viewport_size
        self.state: InteractionState = IDLE
        self.viewport = ViewportTransform.identity(
            self.settings.viewport.min_scale, self.settings.viewport.max_scale
        )
        self._closed = False
        self.fit_to_screen()
        logger.debug("Edit session opened", glyph=glyph.id, points=len(self.path))

    @property
    def node_count(self) -> int:
        """Number of outline points."""
        return len(self.path)

    @property
    def zoom_percent(self) -> int:
        """Current zoom as a rounded percentage."""
        return round(self.viewport.scale * 100)

    @property
    def can_undo(self) -> bool:
        """Check whether undo would restore anything."""
        return self.history.can_undo

    @property
    def is_closed(self) -> bool:
        """Check whether the session was committed or cancelled."""
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Edit session is closed")

    # --- View ---

    def fit_to_screen(self) -> None:
        """Center the glyph box in the canvas with the configured margin."""
        cfg = self.settings.viewport
        self.viewport = self.viewport.fit_to_view(
            self.glyph.width,
            self.glyph.height,
            self.viewport_size[0],
            self.viewport_size[1],
            margin=cfg.editor_fit_margin,
            max_fit_scale=cfg.editor_max_fit_scale,
        )

    def resize(self, viewport_size: tuple[float, float]) -> None:
        """Record a new canvas size; the transform is left as is."""
        self.viewport_size = viewport_size

    def zoom_in(self) -> None:
        """Zoom in around the middle of the canvas."""
        self.viewport = self.viewport.zoom_about_center(
            self.settings.viewport.zoom_step, *self.viewport_size
        )

    def zoom_out(self) -> None:
        """Zoom out around the middle of the canvas."""
        self.viewport = self.viewport.zoom_about_center(
            1 / self.settings.viewport.zoom_step, *self.viewport_size
        )

    def wheel(self, screen: tuple[float, float], delta_y: float) -> None:
        """Zoom one wheel notch around the cursor."""
        self.viewport = self.viewport.zoom_at(screen, wheel_zoom_factor(delta_y))

    # --- Pointer ---

    def node_pressed(self, index: int) -> None:
        """Start dragging a node; the pre-drag outline becomes an undo step.

        Raises:
            IndexError: If index does not name a point
        """
        self._ensure_open()
        if not 0 <= index < len(self.path):
            raise IndexError(f"Point index {index} out of range for {len(self.path)} points")
        self.history.snapshot(self.path.snapshot())
        self.state = DraggingPoint(index)

    def canvas_pressed(self, screen: tuple[float, float]) -> None:
        """Start panning the canvas."""
        self.state = Panning(screen)

    def pointer_move(self, screen: tuple[float, float]) -> None:
        """Pan the canvas or move the dragged node to the pointer."""
        state = self.state
        if isinstance(state, Panning):
            dx = screen[0] - state.last_screen[0]
            dy = screen[1] - state.last_screen[1]
            self.viewport = self.viewport.pan(dx, dy)
            self.state = Panning(screen)
        elif isinstance(state, DraggingPoint):
            x, y = self.viewport.to_model(screen)
            self.path.move_point(state.index, x, y)

    def pointer_up(self) -> None:
        """End any drag or pan."""
        self.state = IDLE

    def pointer_leave(self) -> None:
        """End any drag or pan when the pointer leaves the canvas."""
        self.state = IDLE

    # --- Outline edits ---

    def delete_point(self, index: int) -> bool:
        """Remove a node.

        Returns:
            True if the node was removed, False if the outline is already
            at its minimum size
        """
        self._ensure_open()
        before = self.path.snapshot()
        try:
            self.path.delete_point(index)
        except PathInvariantError as e:
            logger.info("Delete refused", glyph=self.glyph.id, reason=str(e))
            return False
        self.history.snapshot(before)
        self.state = IDLE
        return True

    def smooth(self) -> bool:
        """Cut every corner, doubling the node count.

        Returns:
            True if the outline changed
        """
        self._ensure_open()
        if len(self.path) < MIN_POINTS:
            return False
        self.history.snapshot(self.path.snapshot())
        self.path.replace_all(smooth(self.path.points))
        self.state = IDLE
        return True

    def simplify(self) -> bool:
        """Keep every other node of a long enough outline.

        Returns:
            True if the outline changed
        """
        self._ensure_open()
        min_points = self.settings.editor.decimate_min_points
        if len(self.path) <= min_points:
            return False
        self.history.snapshot(self.path.snapshot())
        self.path.replace_all(decimate(self.path.points, min_points))
        self.state = IDLE
        return True

    def undo(self) -> bool:
        """Restore the outline before the most recent edit.

        Returns:
            True if a snapshot was restored
        """
        self._ensure_open()
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.path.restore(snapshot)
        self.state = IDLE
        return True

    # --- Session end ---

    def commit(self) -> VectorGlyph:
        """End the session and return the glyph with the edited outline."""
        self._ensure_open()
        self._closed = True
        self.state = IDLE
        updated = self.glyph.with_path(self.path.to_description())
        logger.info("Glyph edited", glyph=updated.id, points=len(self.path))
        return updated

    def cancel(self) -> None:
        """End the session without writing anything back."""
        self._closed = True
        self.state = IDLE
        self.history.clear()
        logger.debug("Edit session cancelled", glyph=self.glyph.id)
