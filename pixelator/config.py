"""Configuration and validation for pixelator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Grid sizes offered to users (the original slider range)
MIN_GRID_SIZE = 4
MAX_GRID_SIZE = 64
DEFAULT_GRID_SIZE = 16

# Longer color lists are not useful for picking physical colors
MAX_PALETTE_ENTRIES = 64


class PixelatorError(Exception):
    """Base exception for pixelator errors."""

    pass


class InvalidArgumentError(PixelatorError, ValueError):
    """Raised when a core operation receives an argument it cannot use."""

    pass


@dataclass
class Config:
    """Configuration for a pixelation pass."""

    grid_size: int = DEFAULT_GRID_SIZE
    interpolator: str = "middle-pixel"
    draw_grid: bool = True
    palette_limit: int = MAX_PALETTE_ENTRIES
    input_path: str = ""
    output_path: str = ""
    timing: bool = False

    # Rasterization colors (RGBA)
    grid_color: Tuple[int, int, int, int] = (0, 0, 0, 255)
    background: Tuple[int, int, int, int] = (0, 0, 0, 0)


def validate_grid_size(grid_size: int) -> None:
    """Validate a user-selected grid size.

    Args:
        grid_size: Block edge length in pixels.

    Raises:
        PixelatorError: If grid size is outside the supported range.
    """
    if grid_size < MIN_GRID_SIZE or grid_size > MAX_GRID_SIZE:
        raise PixelatorError(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, "
            f"got {grid_size}"
        )


def validate_image_dimensions(width: int, height: int) -> None:
    """Validate image dimensions are within acceptable bounds.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Raises:
        PixelatorError: If dimensions are invalid.
    """
    if width == 0 or height == 0:
        raise PixelatorError("Image dimensions cannot be zero")
    if width > 10000 or height > 10000:
        raise PixelatorError("Image dimensions too large (max 10000x10000)")
