"""Unit tests for viewport transform math.

Tests cover:
- Screen <-> model round trips
- Zoom-to-cursor stability and scale clamping
- Fit-to-view scale and centering
- Panning
"""

import pytest

from glyphtrace.core.viewport import (
    MAX_SCALE,
    MIN_SCALE,
    ViewportTransform,
    clamp_scale,
    wheel_zoom_factor,
)

EPS = 1e-6


def _close(a: tuple[float, float], b: tuple[float, float], eps: float = EPS) -> bool:
    return abs(a[0] - b[0]) <= eps and abs(a[1] - b[1]) <= eps


class TestCoordinateMapping:
    """Tests for to_screen / to_model."""

    def test_identity(self):
        """Identity transform leaves points alone."""
        t = ViewportTransform.identity()
        assert t.to_screen((3.5, -2.0)) == (3.5, -2.0)
        assert t.to_model((3.5, -2.0)) == (3.5, -2.0)

    def test_to_screen_formula(self):
        """screen = model * scale + translate."""
        t = ViewportTransform(10.0, -5.0, 2.0)
        assert t.to_screen((3.0, 4.0)) == (16.0, 3.0)

    @pytest.mark.parametrize(
        "transform",
        [
            ViewportTransform(0.0, 0.0, 1.0),
            ViewportTransform(123.4, -56.7, 0.37),
            ViewportTransform(-800.0, 20.0, 9.3),
        ],
    )
    @pytest.mark.parametrize("point", [(0.0, 0.0), (17.25, 3.5), (-40.0, 999.0)])
    def test_round_trip(self, transform, point):
        """to_model undoes to_screen."""
        assert _close(transform.to_model(transform.to_screen(point)), point)
        assert _close(transform.to_screen(transform.to_model(point)), point)


class TestZoom:
    """Tests for zooming."""

    @pytest.mark.parametrize("factor", [0.5, 0.9, 1.0, 1.1, 1.37, 2.0])
    @pytest.mark.parametrize("screen", [(0.0, 0.0), (250.0, 125.0), (-30.0, 610.5)])
    def test_zoom_keeps_point_under_cursor(self, factor, screen):
        """The model point under the cursor stays under it."""
        t = ViewportTransform(37.0, -12.5, 1.3)
        before = t.to_model(screen)
        after = t.zoom_at(screen, factor).to_model(screen)
        assert _close(before, after)

    def test_zoom_sequence_is_stable(self):
        """Many zooms at the same cursor keep the anchor fixed, including clamped ones."""
        t = ViewportTransform(15.0, 40.0, 1.0)
        screen = (320.0, 240.0)
        anchor = t.to_model(screen)
        for factor in [1.1] * 40 + [0.9] * 80 + [2.0, 0.5, 1.7]:
            t = t.zoom_at(screen, factor)
            assert _close(t.to_model(screen), anchor)

    def test_zoom_clamps_to_max(self):
        """Scale never exceeds the maximum."""
        t = ViewportTransform(scale=8.0).zoom_at((0, 0), 2.0)
        assert t.scale == MAX_SCALE

    def test_zoom_clamps_to_min(self):
        """Scale never drops below the minimum."""
        t = ViewportTransform(scale=0.15).zoom_at((0, 0), 0.5)
        assert t.scale == MIN_SCALE

    def test_zoom_at_limit_is_noop(self):
        """Zooming past a limit does not move the view."""
        t = ViewportTransform(5.0, 6.0, MAX_SCALE)
        assert t.zoom_at((100, 100), 1.5) == t

    def test_zoom_rejects_non_positive_factor(self):
        """Factor must be positive."""
        with pytest.raises(ValueError):
            ViewportTransform().zoom_at((0, 0), 0.0)

    def test_zoom_about_center(self):
        """Button zoom keeps the viewport center fixed."""
        t = ViewportTransform(10.0, 10.0, 1.0)
        center = (400.0, 300.0)
        before = t.to_model(center)
        after = t.zoom_about_center(1.2, 800, 600).to_model(center)
        assert _close(before, after)

    def test_constructor_clamps_scale(self):
        """Out of range scales are clamped on construction."""
        assert ViewportTransform(scale=50.0).scale == MAX_SCALE
        assert clamp_scale(0.01) == MIN_SCALE

    def test_wheel_factor(self):
        """Scrolling down zooms out, scrolling up zooms in."""
        assert wheel_zoom_factor(120) == 0.9
        assert wheel_zoom_factor(-120) == 1.1


class TestPan:
    """Tests for panning."""

    def test_pan_moves_translation_only(self):
        """Pan adds the delta to the translation."""
        t = ViewportTransform(1.0, 2.0, 3.0).pan(10.0, -4.0)
        assert (t.translate_x, t.translate_y, t.scale) == (11.0, -2.0, 3.0)

    def test_pan_shifts_screen_position(self):
        """A model point moves on screen by exactly the pan delta."""
        t = ViewportTransform(0.0, 0.0, 2.5)
        before = t.to_screen((7.0, 9.0))
        after = t.pan(13.0, 21.0).to_screen((7.0, 9.0))
        assert _close((after[0] - before[0], after[1] - before[1]), (13.0, 21.0))


class TestFitToView:
    """Tests for fit_to_view."""

    @pytest.mark.parametrize(
        "content, viewport, margin, cap",
        [
            ((100, 50), (800, 600), 20, 2.0),
            ((1200, 900), (800, 600), 0, 1.0),
            ((31, 77), (500, 300), 20, 2.0),
            ((5000, 10), (640, 480), 0, 1.0),
        ],
    )
    def test_content_centered(self, content, viewport, margin, cap):
        """The content's center lands on the viewport center."""
        t = ViewportTransform().fit_to_view(*content, *viewport, margin=margin, max_fit_scale=cap)
        center = t.to_screen((content[0] / 2, content[1] / 2))
        assert _close(center, (viewport[0] / 2, viewport[1] / 2))

    def test_scale_formula(self):
        """Scale is the tightest of both axes and the cap."""
        t = ViewportTransform().fit_to_view(100, 50, 800, 600, margin=20, max_fit_scale=10)
        assert t.scale == pytest.approx(min(800 / 140, 600 / 90))

    def test_scale_capped(self):
        """Small content is not magnified beyond the cap."""
        t = ViewportTransform().fit_to_view(10, 10, 800, 600, margin=20, max_fit_scale=2.0)
        assert t.scale == 2.0

    def test_translation_formula(self):
        """translate = (viewport - content * scale) / 2."""
        t = ViewportTransform().fit_to_view(400, 300, 800, 600, margin=0, max_fit_scale=1.0)
        assert (t.translate_x, t.translate_y, t.scale) == (200.0, 150.0, 1.0)

    def test_huge_content_respects_min_scale(self):
        """Fitting never goes below the minimum zoom."""
        t = ViewportTransform().fit_to_view(100000, 100000, 800, 600)
        assert t.scale == MIN_SCALE

    def test_zero_content_uses_cap(self):
        """Empty content with no margin falls back to the cap."""
        t = ViewportTransform().fit_to_view(0, 0, 800, 600, margin=0, max_fit_scale=2.0)
        assert t.scale == 2.0
        assert (t.translate_x, t.translate_y) == (400.0, 300.0)

    def test_empty_viewport_rejected(self):
        """Viewport must have area."""
        with pytest.raises(ValueError):
            ViewportTransform().fit_to_view(10, 10, 0, 600)

    def test_fit_ignores_previous_state(self):
        """Fit depends only on its arguments."""
        a = ViewportTransform(999, -999, 7).fit_to_view(100, 80, 640, 480, margin=20)
        b = ViewportTransform().fit_to_view(100, 80, 640, 480, margin=20)
        assert a == b
