"""Pixelation pass: partition, interpolate, group by color."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from PIL import Image, ImageDraw

from .buffer import Color, PixelBuffer
from .grid import Block, GridLines, grid_lines, partition
from .interpolate import Interpolator, determine_color

logger = logging.getLogger("pixelator")


class ColorUsage:
    """Blocks grouped by their assigned color.

    Colors keep the order in which the block scan first produced them.
    """

    def __init__(self) -> None:
        self._blocks: Dict[Color, List[Block]] = {}

    def add(self, color: Color, block: Block) -> None:
        self._blocks.setdefault(color, []).append(block)

    def blocks(self, color: Color) -> List[Block]:
        return list(self._blocks.get(color, []))

    def count(self, color: Color) -> int:
        return len(self._blocks.get(color, []))

    def counts(self) -> List[Tuple[Color, int]]:
        """``(color, count)`` pairs in first-encounter order."""
        return [(color, len(blocks)) for color, blocks in self._blocks.items()]

    def items(self) -> Iterator[Tuple[Color, List[Block]]]:
        for color, blocks in self._blocks.items():
            yield color, list(blocks)

    @property
    def total_blocks(self) -> int:
        return sum(len(blocks) for blocks in self._blocks.values())

    def __contains__(self, color: object) -> bool:
        return color in self._blocks

    def __iter__(self) -> Iterator[Color]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.hex}: {n}" for c, n in self.counts())
        return f"ColorUsage({{{inner}}})"


@dataclass
class RenderResult:
    """Output of one pixelation pass."""

    usage: ColorUsage = field(default_factory=ColorUsage)
    grid_lines: Optional[GridLines] = None
    width: int = 0
    height: int = 0
    grid_size: int = 0
    interpolator: Optional[Interpolator] = None

    @property
    def is_empty(self) -> bool:
        return len(self.usage) == 0


def render(
    buffer: Optional[PixelBuffer],
    grid_size: int,
    interpolator: Union[Interpolator, str] = Interpolator.MIDDLE_PIXEL,
    draw_grid: bool = False,
) -> RenderResult:
    """Run a pixelation pass over a buffer.

    Args:
        buffer: Source pixels, or None if no image is loaded yet.
        grid_size: Block edge length in pixels.
        interpolator: Strategy used to pick each block's color.
        draw_grid: Whether to include overlay grid line positions.

    Returns:
        RenderResult with the color-to-blocks mapping. Empty when buffer
        is None.

    Raises:
        InvalidArgumentError: If grid_size or interpolator is invalid.
    """
    if buffer is None:
        logger.debug("No image loaded, nothing to render")
        return RenderResult()

    strategy = Interpolator.from_name(interpolator)
    blocks = partition(buffer.width, buffer.height, grid_size)

    usage = ColorUsage()
    for block in blocks:
        color = determine_color(buffer, block.to_area(), strategy)
        usage.add(color, block)

    logger.debug(
        f"Rendered {len(blocks)} blocks into {len(usage)} colors "
        f"({strategy.value}, grid={grid_size})"
    )

    lines = grid_lines(buffer.width, buffer.height, grid_size) if draw_grid else None
    return RenderResult(
        usage=usage,
        grid_lines=lines,
        width=buffer.width,
        height=buffer.height,
        grid_size=grid_size,
        interpolator=strategy,
    )


def rasterize(
    result: RenderResult,
    background: Tuple[int, int, int, int] = (0, 0, 0, 0),
    line_color: Tuple[int, int, int, int] = (0, 0, 0, 255),
) -> Optional[Image.Image]:
    """Paint a render result onto a new RGBA image of the source size.

    Blocks sharing a color are filled together; grid lines, when present,
    are drawn on top.

    Args:
        result: Output of render().
        background: Canvas color for pixels no block covers.
        line_color: RGBA color for grid lines.

    Returns:
        The pixelated image, or None for an empty result.
    """
    if result.is_empty:
        return None

    canvas = Image.new("RGBA", (result.width, result.height), background)
    draw = ImageDraw.Draw(canvas)

    for color, blocks in result.usage.items():
        for block in blocks:
            if block.is_empty:
                continue
            draw.rectangle(block.box, fill=tuple(color))

    if result.grid_lines is not None:
        for start, end in result.grid_lines.segments():
            draw.line([start, end], fill=line_color, width=1)

    return canvas
