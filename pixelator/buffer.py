"""Read-only pixel access over decoded RGBA images."""
from __future__ import annotations

from typing import NamedTuple

import numpy as np
from PIL import Image

from .config import InvalidArgumentError


class Color(NamedTuple):
    """An 8-bit RGBA color.

    Field order matches Pillow's RGBA tuples, so a Color can be used
    directly as a fill value.
    """

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def hex(self) -> str:
        """Color as ``#AARRGGBB`` (alpha first)."""
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def is_transparent(self) -> bool:
        return self.a == 0


class PixelBuffer:
    """Read-only view over an ``(height, width, 4)`` uint8 RGBA array.

    The buffer never copies or mutates the caller's data; it holds a
    non-writeable view for the duration of a pixelation pass.
    """

    def __init__(self, pixels: np.ndarray) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidArgumentError(
                f"Expected an (H, W, 4) RGBA array, got shape {pixels.shape}"
            )
        if pixels.dtype != np.uint8:
            raise InvalidArgumentError(
                f"Expected uint8 pixel data, got {pixels.dtype}"
            )
        view = pixels.view()
        view.flags.writeable = False
        self._pixels = view

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        """Create a buffer from a decoded Pillow image (converted to RGBA)."""
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        return cls(np.array(img, dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self):
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """The underlying read-only array, indexed ``[y, x]``."""
        return self._pixels

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the color stored at ``(x, y)``.

        Raises:
            InvalidArgumentError: If the coordinate lies outside the image.
        """
        if not self.contains(x, y):
            raise InvalidArgumentError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        r, g, b, a = self._pixels[y, x]
        return Color(int(r), int(g), int(b), int(a))

    def region(self, x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
        """Return pixels for the inclusive range ``x0..x1`` by ``y0..y1``.

        The result is ordered x-major, shape ``(x1 - x0 + 1, y1 - y0 + 1, 4)``,
        so flattening it yields the column-by-column scan order.

        Raises:
            InvalidArgumentError: If the range is empty or leaves the image.
        """
        if x1 < x0 or y1 < y0:
            raise InvalidArgumentError(
                f"Empty sample range x={x0}..{x1}, y={y0}..{y1}"
            )
        if not (self.contains(x0, y0) and self.contains(x1, y1)):
            raise InvalidArgumentError(
                f"Sample range x={x0}..{x1}, y={y0}..{y1} outside "
                f"{self.width}x{self.height} image"
            )
        return self._pixels[y0:y1 + 1, x0:x1 + 1].transpose(1, 0, 2)
