"""End-to-end tests: select, extract, edit, commit."""

import pytest
from fontTools.pens.recordingPen import RecordingPen

from glyphtrace.core import EditSession, PathModel, SelectionSession
from glyphtrace.domain import VectorGlyph
from glyphtrace.io import draw_points, path_bounds


@pytest.fixture
def letter_l(ink_raster):
    """A 3px-wide 'L' on a 16x16 page."""
    rows = ["." * 16 for _ in range(16)]
    for y in range(3, 13):
        rows[y] = "....###........."
    rows[10] = "....########...."
    rows[11] = "....########...."
    rows[12] = "....########...."
    return ink_raster(rows)


class TestExtractAndEdit:
    """Full workflow over a synthetic scan."""

    def test_letter_outline(self, letter_l):
        """The L is traced as its corners, with the inner corner cut diagonally."""
        selection = SelectionSession((16, 16), (16, 16))
        selection.pointer_down((2, 1))
        selection.pointer_move((14, 15))
        selection.pointer_up()

        glyph = selection.extract(letter_l)
        assert glyph is not None
        model = PathModel.from_description(glyph.path_description)
        assert [p.to_tuple() for p in model] == [
            (2, 2),
            (4, 2),
            (4, 8),
            (5, 9),
            (9, 9),
            (9, 11),
            (2, 11),
        ]
        assert path_bounds(model.points) == (2, 2, 9, 11)

    def test_edit_and_commit(self, letter_l):
        """Edits made in the editor come back on the same glyph."""
        selection = SelectionSession((16, 16), (16, 16))
        selection.pointer_down((2, 1))
        selection.pointer_move((14, 15))
        selection.pointer_up()
        glyph = selection.extract(letter_l)

        editor = EditSession(glyph, viewport_size=(400, 400))
        assert editor.node_count == 7
        editor.smooth()
        assert editor.node_count == 14
        assert editor.simplify()
        assert editor.node_count == 7
        assert editor.delete_point(0)
        editor.undo()
        editor.node_pressed(0)
        editor.pointer_move(editor.viewport.to_screen((1, 1)))
        editor.pointer_up()

        updated = editor.commit()
        assert isinstance(updated, VectorGlyph)
        assert updated.id == glyph.id
        assert updated.name == glyph.name
        assert updated.path_description.startswith("M1 1L")
        assert (updated.width, updated.height) == (glyph.width, glyph.height)

        pen = RecordingPen()
        draw_points(PathModel.from_description(updated.path_description).points, pen)
        assert len(pen.value) == 8
        assert pen.value[-1] == ("closePath", ())

    def test_cancel_leaves_glyph(self, letter_l):
        """Cancelling writes nothing back."""
        selection = SelectionSession((16, 16), (16, 16))
        selection.pointer_down((2, 1))
        selection.pointer_move((14, 15))
        selection.pointer_up()
        glyph = selection.extract(letter_l)

        editor = EditSession(glyph, viewport_size=(400, 400))
        editor.smooth()
        editor.cancel()
        assert PathModel.from_description(glyph.path_description).points[0].to_tuple() == (2, 2)
