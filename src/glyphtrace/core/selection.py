"""Selection session over a source image.

Holds the view state of the extraction canvas: the pan/zoom transform, the
pointer interaction state, the rubber-band selection (in image
coordinates) and the threshold used when the selection is extracted.
"""

import structlog

from glyphtrace.config import GlyphTraceSettings
from glyphtrace.core.extractor import GlyphExtractor
from glyphtrace.core.interaction import IDLE, InteractionState, Panning, Selecting
from glyphtrace.core.sampler import validate_threshold
from glyphtrace.core.viewport import ViewportTransform, wheel_zoom_factor
from glyphtrace.domain import BoundingBox, RasterBuffer, VectorGlyph

logger = structlog.get_logger(__name__)


class SelectionSession:
    """Pointer-driven selection of a glyph region.

    The primary button drags out a selection; the secondary button (or any
    button with shift held) pans. The wheel zooms around the cursor.
    """

    def __init__(
        self,
        image_size: tuple[int, int],
        viewport_size: tuple[float, float],
        settings: GlyphTraceSettings | None = None,
        extractor: GlyphExtractor | None = None,
    ) -> None:
        """Initialize the session and fit the image into the view.

        Args:
            image_size: (width, height) of the source image in natural pixels
            viewport_size: (width, height) of the view in screen pixels
            settings: Application settings (defaults if None)
            extractor: Extraction pipeline (built from settings if None)
        """
        self.settings = settings if settings is not None else GlyphTraceSettings()
        self.extractor = extractor if extractor is not None else GlyphExtractor(self.settings)
        self.image_size = image_size
        self.viewport_size = viewport_size
        self.state: InteractionState = IDLE
        self.selection: BoundingBox | None = None
        self._threshold = self.settings.trace.threshold
        self.viewport = ViewportTransform.identity(
            self.settings.viewport.min_scale, self.settings.viewport.max_scale
        )
        self.reset_view()

    @property
    def threshold(self) -> int:
        """Brightness cutoff used for extraction."""
        return self._threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        self._threshold = validate_threshold(value)

    def reset_view(self) -> None:
        """Fit the whole image into the view, never magnifying past the configured cap."""
        cfg = self.settings.viewport
        self.viewport = self.viewport.fit_to_view(
            self.image_size[0],
            self.image_size[1],
            self.viewport_size[0],
            self.viewport_size[1],
            margin=cfg.selection_fit_margin,
            max_fit_scale=cfg.selection_max_fit_scale,
        )

    def resize(self, viewport_size: tuple[float, float]) -> None:
        """Record a new view size; the transform is left as is."""
        self.viewport_size = viewport_size

    def zoom_in(self) -> None:
        """Zoom in around the middle of the view."""
        self.viewport = self.viewport.zoom_about_center(
            self.settings.viewport.zoom_step, *self.viewport_size
        )

    def zoom_out(self) -> None:
        """Zoom out around the middle of the view."""
        self.viewport = self.viewport.zoom_about_center(
            1 / self.settings.viewport.zoom_step, *self.viewport_size
        )

    def wheel(self, screen: tuple[float, float], delta_y: float) -> None:
        """Zoom one wheel notch around the cursor."""
        self.viewport = self.viewport.zoom_at(screen, wheel_zoom_factor(delta_y))

    def pointer_down(self, screen: tuple[float, float], pan: bool = False) -> None:
        """Start panning, or start a new selection at the pointer."""
        if pan:
            self.state = Panning(screen)
            return

        anchor = self.viewport.to_model(screen)
        self.selection = BoundingBox(anchor[0], anchor[1], 0.0, 0.0)
        self.state = Selecting(anchor)

    def pointer_move(self, screen: tuple[float, float]) -> None:
        """Pan the view or grow the selection, depending on the state."""
        state = self.state
        if isinstance(state, Panning):
            dx = screen[0] - state.last_screen[0]
            dy = screen[1] - state.last_screen[1]
            self.viewport = self.viewport.pan(dx, dy)
            self.state = Panning(screen)
        elif isinstance(state, Selecting):
            self.selection = BoundingBox.from_corners(
                state.anchor, self.viewport.to_model(screen)
            )

    def pointer_up(self) -> None:
        """End any drag or pan."""
        self.state = IDLE

    def pointer_leave(self) -> None:
        """End any drag or pan when the pointer leaves the view."""
        self.state = IDLE

    def clear_selection(self) -> None:
        """Forget the current selection."""
        self.selection = None

    def selection_on_screen(self) -> BoundingBox | None:
        """The selection rectangle in screen coordinates, for drawing."""
        if self.selection is None:
            return None
        left, top = self.viewport.to_screen((self.selection.x, self.selection.y))
        return BoundingBox(
            left,
            top,
            self.selection.width * self.viewport.scale,
            self.selection.height * self.viewport.scale,
        )

    def extract(
        self, raster: RasterBuffer, scale_x: float = 1.0, scale_y: float = 1.0
    ) -> VectorGlyph | None:
        """Extract the selected glyph.

        The selection is cleared when a glyph is produced and kept
        otherwise, so the user can adjust it and retry.

        Returns:
            New glyph, or None if there is no selection or nothing to trace

        Raises:
            DegenerateSelectionError: If the selection is under the minimum size
            TraceLimitExceededError: If the boundary walk does not close
        """
        if self.selection is None:
            return None

        glyph = self.extractor.extract(
            raster, self.selection, scale_x, scale_y, threshold=self._threshold
        )
        if glyph is not None:
            logger.debug("Selection extracted", glyph=glyph.id)
            self.selection = None
        return glyph
