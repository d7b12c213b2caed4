"""Raster input types.

This module defines the caller-owned pixel data the tracer reads and the
rectangle a user drags over it:
- RasterBuffer: Decoded row-major RGBA pixels
- BoundingBox: Axis-aligned selection rectangle
"""

import math
from dataclasses import dataclass

from glyphtrace.exceptions import RasterError

CHANNELS = 4
_WHITE = b"\xff\xff\xff\xff"


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in model coordinates.

    Width and height are never negative but may be zero while a selection
    drag is in progress.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"BoundingBox size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_corners(cls, a: tuple[float, float], b: tuple[float, float]) -> "BoundingBox":
        """Build the box spanned by two opposite corners, in any order."""
        return cls(
            x=min(a[0], b[0]),
            y=min(a[1], b[1]),
            width=abs(b[0] - a[0]),
            height=abs(b[1] - a[1]),
        )

    def scaled(self, scale_x: float, scale_y: float) -> "BoundingBox":
        """Return this box with both position and size scaled per axis."""
        return BoundingBox(
            x=self.x * scale_x,
            y=self.y * scale_y,
            width=self.width * scale_x,
            height=self.height * scale_y,
        )

    def is_degenerate(self, min_size: float) -> bool:
        """Check whether either side is shorter than min_size."""
        return self.width < min_size or self.height < min_size

    def center(self) -> tuple[float, float]:
        """Return the (x, y) center of the box."""
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class RasterBuffer:
    """Read-only view of decoded pixel data.

    Pixels are stored row-major with four channels (R, G, B, A) each.

    Attributes:
        data: Raw channel bytes, width * height * 4 long
        width: Width in pixels
        height: Height in pixels
    """

    data: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise RasterError(f"negative size {self.width}x{self.height}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise RasterError(
                f"expected {expected} bytes for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a pixel inside the buffer."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (R, G, B, A) channels of an in-bounds pixel.

        Raises:
            IndexError: If (x, y) lies outside the buffer
        """
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} raster")
        idx = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[idx : idx + CHANNELS]
        return (r, g, b, a)

    def crop(self, x: float, y: float, width: int, height: int) -> "RasterBuffer":
        """Copy a region into a new buffer.

        The source rectangle starts at the (possibly fractional) position
        (x, y) and is sampled nearest-neighbour at one source pixel per
        output pixel. Parts of the region outside this buffer come out as
        opaque white, i.e. background.

        Args:
            x: Left edge of the source region
            y: Top edge of the source region
            width: Output width in pixels
            height: Output height in pixels

        Returns:
            RasterBuffer of exactly width x height pixels
        """
        if width < 0 or height < 0:
            raise RasterError(f"negative crop size {width}x{height}")

        out = bytearray()
        for row in range(height):
            sy = math.floor(y + row + 0.5)
            if not 0 <= sy < self.height:
                out += _WHITE * width
                continue
            row_start = sy * self.width
            for col in range(width):
                sx = math.floor(x + col + 0.5)
                if 0 <= sx < self.width:
                    idx = (row_start + sx) * CHANNELS
                    out += self.data[idx : idx + CHANNELS]
                else:
                    out += _WHITE

        return RasterBuffer(bytes(out), width, height)

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterBuffer":
        """Create an all-white opaque buffer."""
        return cls(_WHITE * (width * height), width, height)
