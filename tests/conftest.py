"""Pytest fixtures for pixelator tests."""
from __future__ import annotations

import io
from typing import Tuple

import numpy as np
import pytest
from PIL import Image

from pixelator import Config, PixelBuffer

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def solid_red_image() -> Image.Image:
    """Create a 16x16 solid red image."""
    return Image.new("RGBA", (16, 16), RED)


@pytest.fixture
def quadrant_image() -> Image.Image:
    """Create a 64x64 image split into four 32x32 colored quadrants.

    Top-left red, top-right green, bottom-left blue, bottom-right
    fully transparent.
    """
    arr = np.zeros((64, 64, 4), dtype=np.uint8)
    arr[0:32, 0:32] = RED
    arr[0:32, 32:64] = GREEN
    arr[32:64, 0:32] = BLUE
    arr[32:64, 32:64] = CLEAR
    return Image.fromarray(arr, "RGBA")


@pytest.fixture
def quadrant_image_bytes(quadrant_image: Image.Image) -> bytes:
    """Return quadrant image as PNG bytes."""
    buf = io.BytesIO()
    quadrant_image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def stripes_buffer() -> PixelBuffer:
    """A 10x1 buffer alternating black and white, black at x=0."""
    arr = np.zeros((1, 10, 4), dtype=np.uint8)
    for x in range(10):
        arr[0, x] = BLACK if x % 2 == 0 else WHITE
    return PixelBuffer(arr)


def make_buffer(
    width: int, height: int, color: Tuple[int, int, int, int] = RED
) -> PixelBuffer:
    """Helper to create a solid buffer of specified size and color."""
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :] = color
    return PixelBuffer(arr)
