"""Command-line interface for pixelator."""
from __future__ import annotations

import io
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from PIL import Image

logger = logging.getLogger("pixelator")

from .buffer import PixelBuffer
from .config import (
    Config,
    PixelatorError,
    validate_grid_size,
    validate_image_dimensions,
)
from .engine import RenderResult, rasterize, render
from .histogram import RankedPalette, format_entry, rank
from .interpolate import Interpolator


@dataclass
class PixelationResult:
    """Result of pixelating an image, including the color ranking."""

    output_bytes: bytes
    render: RenderResult
    palette: RankedPalette


def pixelate_bytes(
    input_bytes: bytes, config: Optional[Config] = None
) -> PixelationResult:
    """Pixelate encoded image bytes.

    Args:
        input_bytes: Input image as PNG/JPEG/BMP/GIF bytes.
        config: Configuration options. Uses defaults if None.

    Returns:
        PixelationResult with output PNG bytes and palette.
    """
    img = Image.open(io.BytesIO(input_bytes))
    return pixelate_image(img, config)


def pixelate_image(
    img: Image.Image, config: Optional[Config] = None
) -> PixelationResult:
    """Pixelate a decoded image.

    Args:
        img: Input image (any mode, converted to RGBA).
        config: Configuration options. Uses defaults if None.

    Returns:
        PixelationResult with output PNG bytes and palette.

    Raises:
        PixelatorError: If the image or configuration is invalid.
    """
    config = config or Config()
    validate_grid_size(config.grid_size)
    interpolator = Interpolator.from_name(config.interpolator)

    t0 = time.perf_counter()
    buffer = PixelBuffer.from_image(img)
    validate_image_dimensions(buffer.width, buffer.height)
    t1 = time.perf_counter()

    result = render(buffer, config.grid_size, interpolator, config.draw_grid)
    t2 = time.perf_counter()

    palette = rank(result.usage, config.palette_limit)
    t3 = time.perf_counter()

    output_img = rasterize(
        result, background=config.background, line_color=config.grid_color
    )
    if output_img is None:
        raise PixelatorError(
            f"Image too small to pixelate: {buffer.width}x{buffer.height}"
        )
    t4 = time.perf_counter()

    out_buf = io.BytesIO()
    output_img.save(out_buf, format="PNG")
    t5 = time.perf_counter()

    logger.debug(
        f"Palette: {len(palette)} of {len(result.usage)} colors listed"
    )
    if config.timing:
        print(
            "Timing (s): "
            f"load={t1 - t0:.4f}, "
            f"render={t2 - t1:.4f}, "
            f"rank={t3 - t2:.4f}, "
            f"rasterize={t4 - t3:.4f}, "
            f"encode={t5 - t4:.4f}, "
            f"total={t5 - t0:.4f}"
        )

    return PixelationResult(
        output_bytes=out_buf.getvalue(), render=result, palette=palette
    )


def process_image(config: Config) -> PixelationResult:
    """Pixelate an image file and print its color usage.

    Args:
        config: Configuration with input/output paths.
    """
    print(f"Processing: {config.input_path}")
    with open(config.input_path, "rb") as f:
        img_bytes = f.read()

    result = pixelate_bytes(img_bytes, config)
    with open(config.output_path, "wb") as f:
        f.write(result.output_bytes)

    print(f"Saved to: {config.output_path}")
    print(
        f"Colors ({len(result.palette)} shown, "
        f"{result.render.usage.total_blocks} blocks):"
    )
    for entry in result.palette:
        print(f"  {format_entry(entry)}")
    return result


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        PixelatorError: If arguments are invalid.
    """
    args = list(argv[1:])
    interpolator = "middle-pixel"
    draw_grid = True
    timing = False
    debug = False
    palette_limit: Optional[int] = None
    positional: List[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--no-grid":
            draw_grid = False
            i += 1
        elif arg == "--timing":
            timing = True
            i += 1
        elif arg == "--debug":
            debug = True
            i += 1
        elif arg == "--interpolator":
            if i + 1 >= len(args):
                raise PixelatorError(_usage_message())
            interpolator = Interpolator.from_name(args[i + 1]).value
            i += 2
        elif arg == "--palette-limit":
            if i + 1 >= len(args):
                raise PixelatorError(_usage_message())
            try:
                palette_limit = int(args[i + 1])
            except ValueError:
                raise PixelatorError(
                    f"Invalid palette-limit value: '{args[i + 1]}'"
                )
            if palette_limit <= 0:
                raise PixelatorError("palette-limit must be a positive integer")
            i += 2
        else:
            positional.append(arg)
            i += 1

    if len(positional) < 2 or len(positional) > 3:
        raise PixelatorError(_usage_message())

    config = Config(
        input_path=positional[0],
        output_path=positional[1],
        interpolator=interpolator,
        draw_grid=draw_grid,
        timing=timing,
    )
    if palette_limit is not None:
        config.palette_limit = palette_limit

    if len(positional) == 3:
        try:
            config.grid_size = int(positional[2])
        except ValueError:
            raise PixelatorError(f"Invalid grid size: '{positional[2]}'")
        validate_grid_size(config.grid_size)

    # Enable debug logging if requested
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("pixelator").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    choices = "|".join(member.value for member in Interpolator)
    return (
        "Usage: pixelator input.png output.png [grid_size] "
        f"[--interpolator {choices}] [--no-grid] [--palette-limit N] "
        "[--timing] [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        process_image(config)
        return 0
    except PixelatorError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main(sys.argv))
