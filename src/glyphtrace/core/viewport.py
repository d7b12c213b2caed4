"""Viewport transform between screen and model coordinates.

A viewport maps model coordinates (pixels of the source raster or of a
glyph's own coordinate space) to screen coordinates (pixels of the viewing
widget) with a uniform scale and a translation:

    screen = model * scale + translate

Transforms are immutable; every operation returns a new transform. They
are view state only and are never persisted.
"""

from dataclasses import dataclass

MIN_SCALE = 0.1
MAX_SCALE = 10.0
WHEEL_ZOOM_IN = 1.1
WHEEL_ZOOM_OUT = 0.9


def clamp_scale(scale: float, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE) -> float:
    """Clamp a zoom level to [min_scale, max_scale]."""
    return max(min_scale, min(max_scale, scale))


def wheel_zoom_factor(delta_y: float) -> float:
    """Zoom factor for one mouse wheel notch.

    Scrolling down (positive delta) zooms out, anything else zooms in.
    """
    return WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN


@dataclass(frozen=True)
class ViewportTransform:
    """Pan/zoom state.

    Attributes:
        translate_x: Screen x of the model origin
        translate_y: Screen y of the model origin
        scale: Screen pixels per model unit
        min_scale: Lower zoom limit
        max_scale: Upper zoom limit
    """

    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE

    def __post_init__(self) -> None:
        if self.min_scale <= 0 or self.min_scale > self.max_scale:
            raise ValueError(
                f"Invalid scale range [{self.min_scale}, {self.max_scale}]"
            )
        object.__setattr__(
            self, "scale", clamp_scale(self.scale, self.min_scale, self.max_scale)
        )

    @classmethod
    def identity(
        cls, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE
    ) -> "ViewportTransform":
        """Transform where screen and model coordinates coincide."""
        return cls(0.0, 0.0, 1.0, min_scale, max_scale)

    def _with(self, translate_x: float, translate_y: float, scale: float) -> "ViewportTransform":
        return ViewportTransform(translate_x, translate_y, scale, self.min_scale, self.max_scale)

    def to_screen(self, point: tuple[float, float]) -> tuple[float, float]:
        """Map a model point to screen coordinates."""
        return (
            point[0] * self.scale + self.translate_x,
            point[1] * self.scale + self.translate_y,
        )

    def to_model(self, point: tuple[float, float]) -> tuple[float, float]:
        """Map a screen point to model coordinates."""
        return (
            (point[0] - self.translate_x) / self.scale,
            (point[1] - self.translate_y) / self.scale,
        )

    def pan(self, dx: float, dy: float) -> "ViewportTransform":
        """Shift the view by a screen-space delta; scale is unchanged."""
        return self._with(self.translate_x + dx, self.translate_y + dy, self.scale)

    def zoom_at(self, screen_point: tuple[float, float], factor: float) -> "ViewportTransform":
        """Zoom by factor, keeping the model point under screen_point fixed.

        Args:
            screen_point: Cursor position in screen coordinates
            factor: Multiplier applied to the current scale (> 0)

        Returns:
            New transform with the clamped scale
        """
        if factor <= 0:
            raise ValueError(f"Zoom factor must be positive, got {factor}")

        new_scale = clamp_scale(self.scale * factor, self.min_scale, self.max_scale)
        ratio = new_scale / self.scale
        sx, sy = screen_point
        return self._with(
            sx - (sx - self.translate_x) * ratio,
            sy - (sy - self.translate_y) * ratio,
            new_scale,
        )

    def zoom_about_center(
        self, factor: float, viewport_width: float, viewport_height: float
    ) -> "ViewportTransform":
        """Zoom keeping the middle of the viewport fixed (toolbar buttons)."""
        return self.zoom_at((viewport_width / 2, viewport_height / 2), factor)

    def fit_to_view(
        self,
        content_width: float,
        content_height: float,
        viewport_width: float,
        viewport_height: float,
        margin: float = 0.0,
        max_fit_scale: float = 2.0,
    ) -> "ViewportTransform":
        """Center content in the viewport at the largest scale that fits.

        The scale is ``min(vw / (cw + 2m), vh / (ch + 2m), max_fit_scale)``,
        clamped to the zoom limits, and the content is centered on both axes.

        Args:
            content_width: Content width in model units
            content_height: Content height in model units
            viewport_width: Viewport width in screen pixels
            viewport_height: Viewport height in screen pixels
            margin: Padding around the content in model units
            max_fit_scale: Upper bound for the fitted scale

        Returns:
            New transform

        Raises:
            ValueError: If the viewport has no area or sizes are negative
        """
        if viewport_width <= 0 or viewport_height <= 0:
            raise ValueError(
                f"Viewport must have positive size, got {viewport_width}x{viewport_height}"
            )
        if content_width < 0 or content_height < 0 or margin < 0:
            raise ValueError("Content size and margin must be non-negative")

        candidates = [max_fit_scale]
        if content_width + 2 * margin > 0:
            candidates.append(viewport_width / (content_width + 2 * margin))
        if content_height + 2 * margin > 0:
            candidates.append(viewport_height / (content_height + 2 * margin))

        scale = clamp_scale(min(candidates), self.min_scale, self.max_scale)
        return self._with(
            (viewport_width - content_width * scale) / 2,
            (viewport_height - content_height * scale) / 2,
            scale,
        )
