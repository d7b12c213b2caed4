"""Shared fixtures for glyphtrace tests."""

from collections.abc import Callable

import pytest

from glyphtrace.domain import RasterBuffer

INK = b"\x00\x00\x00\xff"
PAPER = b"\xff\xff\xff\xff"


def raster_from_rows(rows: list[str]) -> RasterBuffer:
    """Build a raster from strings where '#' is black ink and anything else is white."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = b"".join(INK if ch == "#" else PAPER for row in rows for ch in row)
    return RasterBuffer(data, width, height)


@pytest.fixture
def ink_raster() -> Callable[[list[str]], RasterBuffer]:
    """Factory fixture turning ASCII art into a raster buffer."""
    return raster_from_rows


@pytest.fixture
def square_raster() -> RasterBuffer:
    """A filled 4x4 black square at (2, 2) on an 8x8 white background."""
    return raster_from_rows(
        [
            "........",
            "........",
            "..####..",
            "..####..",
            "..####..",
            "..####..",
            "........",
            "........",
        ]
    )
