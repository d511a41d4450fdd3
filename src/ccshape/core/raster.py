"""
Single-channel pixel buffer produced by shape rasterization.
"""

from __future__ import annotations

import numpy as np

from ccshape.config import PIXEL_DTYPE, PIXEL_MAX, PIXEL_MIN


def check_pixel_value(value: int) -> int:
    """Return `value` as an int, or raise ValueError if it is not a valid pixel."""
    if not PIXEL_MIN <= value <= PIXEL_MAX:
        raise ValueError(f"Pixel value must be in [{PIXEL_MIN}, {PIXEL_MAX}], got {value}")
    return int(value)


class RasterImage:
    """
    8-bit grayscale image addressed as (x, y) = (column, row).

    Keeps a drawing color used by `fill`.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {width}x{height}")
        self._pixels = np.zeros((height, width), dtype=PIXEL_DTYPE)
        self._color = PIXEL_MIN

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def color(self) -> int:
        return self._color

    def set_color(self, value: int) -> None:
        """Set the value used by subsequent `fill` calls."""
        self._color = check_pixel_value(value)

    def fill(self) -> None:
        """Flood the whole buffer with the current color."""
        self._pixels.fill(self._color)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, value: int) -> bool:
        """
        Write one pixel.

        Out-of-bounds coordinates are ignored; returns True if the pixel was written.
        """
        value = check_pixel_value(value)
        if not self.in_bounds(x, y):
            return False
        self._pixels[y, x] = value
        return True

    def get_pixel(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return int(self._pixels[y, x])

    def count(self, value: int) -> int:
        """Number of pixels equal to `value`."""
        return int(np.count_nonzero(self._pixels == value))

    def to_array(self) -> np.ndarray:
        """Copy of the buffer as a (height, width) array."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"RasterImage(width={self.width}, height={self.height})"


__all__ = ["RasterImage", "check_pixel_value"]
