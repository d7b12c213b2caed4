"""Unit tests for the selection session."""

from unittest.mock import MagicMock

import pytest

from glyphtrace.core.extractor import GlyphExtractor
from glyphtrace.core.interaction import IDLE, Panning, Selecting
from glyphtrace.core.selection import SelectionSession
from glyphtrace.domain import BoundingBox
from glyphtrace.exceptions import DegenerateSelectionError


@pytest.fixture
def session() -> SelectionSession:
    """200x100 image in a 100x100 view: scale 0.5, image top at y=25."""
    return SelectionSession(image_size=(200, 100), viewport_size=(100, 100))


class TestView:
    """Tests for the selection view transform."""

    def test_fit_shrinks_large_image(self, session):
        """Large images are fitted and centered."""
        assert session.viewport.scale == pytest.approx(0.5)
        assert session.viewport.to_screen((0, 0)) == pytest.approx((0, 25))

    def test_fit_never_magnifies(self):
        """Small images stay at natural size."""
        session = SelectionSession(image_size=(20, 10), viewport_size=(100, 100))
        assert session.viewport.scale == pytest.approx(1.0)
        assert session.viewport.to_screen((0, 0)) == pytest.approx((40, 45))

    def test_wheel_down_zooms_out(self, session):
        """Scrolling down zooms out by ten percent."""
        session.wheel((30, 40), delta_y=3)
        assert session.viewport.scale == pytest.approx(0.45)

    def test_resize_moves_zoom_pivot(self, session):
        """After a resize the zoom buttons pivot on the new view center."""
        session.resize((200, 50))
        center = session.viewport.to_model((100, 25))
        session.zoom_out()
        assert session.viewport.to_model((100, 25)) == pytest.approx(center)

    def test_reset_view(self, session):
        """Reset restores the fitted transform."""
        fitted = session.viewport
        session.zoom_in()
        session.reset_view()
        assert session.viewport == fitted

    def test_pan(self, session):
        """Pan drags move the view and leave the selection alone."""
        session.pointer_down((10, 10), pan=True)
        assert isinstance(session.state, Panning)
        session.pointer_move((20, 15))
        session.pointer_up()
        assert session.viewport.to_screen((0, 0)) == pytest.approx((10, 30))
        assert session.selection is None


class TestSelecting:
    """Tests for rubber-band selection."""

    def test_selection_in_image_coordinates(self, session):
        """The selection is tracked in model space."""
        session.pointer_down((10, 35))
        assert isinstance(session.state, Selecting)
        session.pointer_move((30, 55))
        session.pointer_up()
        assert session.selection == BoundingBox(20, 20, 40, 40)
        assert session.state == IDLE

    def test_reverse_drag_normalizes(self, session):
        """Dragging up and left gives the same rectangle."""
        session.pointer_down((30, 55))
        session.pointer_move((10, 35))
        assert session.selection == BoundingBox(20, 20, 40, 40)

    def test_selection_on_screen(self, session):
        """The selection is drawn in screen space."""
        session.pointer_down((10, 35))
        session.pointer_move((30, 55))
        assert session.selection_on_screen() == BoundingBox(10, 35, 20, 20)

    def test_selection_follows_zoom(self, session):
        """Zooming moves the drawn selection with the image."""
        session.pointer_down((10, 35))
        session.pointer_move((30, 55))
        session.pointer_up()
        session.wheel((0, 0), delta_y=-1)
        drawn = session.selection_on_screen()
        assert drawn.width == pytest.approx(22)
        assert session.selection == BoundingBox(20, 20, 40, 40)

    def test_pointer_leave_stops_selecting(self, session):
        """Leaving the view ends the drag."""
        session.pointer_down((10, 35))
        session.pointer_leave()
        session.pointer_move((90, 90))
        assert session.state == IDLE
        assert session.selection == BoundingBox(20, 20, 0, 0)

    def test_clear_selection(self, session):
        """Clearing drops the rectangle."""
        session.pointer_down((10, 35))
        session.clear_selection()
        assert session.selection is None
        assert session.selection_on_screen() is None


class TestThreshold:
    """Tests for the threshold property."""

    def test_default(self, session):
        """The threshold starts at the configured value."""
        assert session.threshold == 128

    @pytest.mark.parametrize("value", [-1, 256, 12.5, True])
    def test_invalid(self, session, value):
        """Values outside [0, 255] are rejected."""
        with pytest.raises(ValueError):
            session.threshold = value
        assert session.threshold == 128

    def test_passed_to_extractor(self, session):
        """Extraction uses the session threshold."""
        extractor = MagicMock(spec=GlyphExtractor)
        extractor.extract.return_value = None
        session = SelectionSession((200, 100), (100, 100), extractor=extractor)
        session.threshold = 90
        session.selection = BoundingBox(0, 0, 10, 10)
        raster = object()
        session.extract(raster, 2.0, 2.0)
        extractor.extract.assert_called_once_with(
            raster, BoundingBox(0, 0, 10, 10), 2.0, 2.0, threshold=90
        )


class TestExtract:
    """Tests for extracting the selection."""

    @pytest.fixture
    def blob(self, ink_raster):
        rows = ["." * 20 for _ in range(12)]
        rows[4] = "......####.........."
        rows[5] = "......####.........."
        rows[6] = "......####.........."
        rows[7] = "......####.........."
        return ink_raster(rows)

    def drag(self, session, start, end):
        session.pointer_down(start)
        session.pointer_move(end)
        session.pointer_up()

    def test_extract_clears_selection(self, blob):
        """A successful extraction consumes the selection."""
        session = SelectionSession((20, 12), (20, 12))
        self.drag(session, (2, 1), (14, 10))
        glyph = session.extract(blob)
        assert glyph.path_description == "M4 3L7 3L7 6L4 6Z"
        assert (glyph.width, glyph.height) == (12, 9)
        assert session.selection is None

    def test_empty_keeps_selection(self, blob):
        """Nothing traced leaves the selection for another try."""
        session = SelectionSession((20, 12), (20, 12))
        self.drag(session, (12, 1), (19, 10))
        assert session.extract(blob) is None
        assert session.selection is not None

    def test_no_selection(self, blob):
        """Without a selection there is nothing to extract."""
        assert SelectionSession((20, 12), (20, 12)).extract(blob) is None

    def test_degenerate_selection(self, blob):
        """Tiny selections are rejected and kept."""
        session = SelectionSession((20, 12), (20, 12))
        self.drag(session, (2, 1), (4, 10))
        with pytest.raises(DegenerateSelectionError):
            session.extract(blob)
        assert session.selection is not None
