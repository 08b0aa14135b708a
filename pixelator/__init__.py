"""Pixelator - Turn images into grids of solid color blocks.

This package divides an image into square blocks, picks one color per
block and lists how often each resulting color is used.

Example:
    from PIL import Image
    from pixelator import Interpolator, PixelBuffer, rank, render

    buffer = PixelBuffer.from_image(Image.open("input.png"))
    result = render(buffer, 16, Interpolator.DOMINANT_PIXEL, draw_grid=True)
    for entry in rank(result.usage):
        print(entry.color.hex, entry.count)

For a finished PNG, use pixelate_bytes:

    from pixelator import Config, pixelate_bytes

    result = pixelate_bytes(input_bytes, Config(grid_size=8))
    output_bytes = result.output_bytes

For debug logging, enable with:

    import logging
    logging.getLogger("pixelator").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("pixelator").setLevel(logging.DEBUG)
logger = logging.getLogger("pixelator")
logger.addHandler(logging.NullHandler())
from .buffer import Color, PixelBuffer
from .cli import PixelationResult, main, pixelate_bytes, pixelate_image
from .config import Config, InvalidArgumentError, PixelatorError
from .engine import ColorUsage, RenderResult, rasterize, render
from .grid import Block, GridLines, grid_lines, partition
from .histogram import PaletteEntry, RankedPalette, format_entry, rank
from .interpolate import (
    Area,
    Interpolator,
    determine_color,
    dominant_pixel,
    middle_pixel,
    weighted_average,
)

__all__ = [
    "Config",
    "PixelatorError",
    "InvalidArgumentError",
    "PixelationResult",
    "main",
    "pixelate_bytes",
    "pixelate_image",
    # Core
    "Color",
    "PixelBuffer",
    "Area",
    "Interpolator",
    "determine_color",
    "middle_pixel",
    "dominant_pixel",
    "weighted_average",
    "Block",
    "GridLines",
    "partition",
    "grid_lines",
    "ColorUsage",
    "RenderResult",
    "render",
    "rasterize",
    # Ranking
    "PaletteEntry",
    "RankedPalette",
    "rank",
    "format_entry",
]

__version__ = "1.0.0"
