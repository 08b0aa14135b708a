"""Grid partitioning of an image into blocks."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .config import InvalidArgumentError
from .interpolate import Area

logger = logging.getLogger("pixelator")


@dataclass(frozen=True)
class Block:
    """One rectangular grid cell in pixel-buffer coordinates.

    Edge cells may have zero width or height (see partition()).
    """

    x: int
    y: int
    width: int
    height: int

    def to_area(self) -> Area:
        return Area(
            left=float(self.x),
            top=float(self.y),
            width=float(self.width),
            height=float(self.height),
        )

    @property
    def is_empty(self) -> bool:
        """True if the cell covers no pixels when filled."""
        return self.width <= 0 or self.height <= 0

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Inclusive ``(x0, y0, x1, y1)`` corners for filling."""
        return (
            self.x,
            self.y,
            self.x + self.width - 1,
            self.y + self.height - 1,
        )


@dataclass(frozen=True)
class GridLines:
    """Positions of overlay grid lines.

    ``columns`` holds x positions of vertical lines, ``rows`` holds
    y positions of horizontal lines.
    """

    columns: Tuple[int, ...]
    rows: Tuple[int, ...]
    width: int
    height: int

    def segments(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Line segments as ``((x0, y0), (x1, y1))`` pairs, verticals first."""
        vertical = [((x, 0), (x, self.height)) for x in self.columns]
        horizontal = [((0, y), (self.width, y)) for y in self.rows]
        return vertical + horizontal


def _clamped_extent(start: int, grid_size: int, limit: int) -> int:
    # Trailing cells stop one pixel short of the image edge. Interpolators
    # sample inclusively up to floor(right), so this keeps sampling in bounds.
    if start + grid_size >= limit:
        return limit - start - 1
    return grid_size


def partition(image_width: int, image_height: int, grid_size: int) -> List[Block]:
    """Divide an image into blocks of ``grid_size`` pixels.

    Blocks are produced column by column: x is the outer loop, y the inner.
    A block reaching the right or bottom edge is shortened to end one pixel
    before that edge. A cell starting on the last pixel column or row gets
    zero extent on that axis; it is still emitted because interpolators
    sample inclusively and so read that single column or row.

    Args:
        image_width: Image width in pixels.
        image_height: Image height in pixels.
        grid_size: Nominal block edge length.

    Returns:
        Blocks in scan order. Empty for non-positive image dimensions.

    Raises:
        InvalidArgumentError: If grid_size is not positive.
    """
    if grid_size <= 0:
        raise InvalidArgumentError(f"Grid size must be positive, got {grid_size}")
    if image_width <= 0 or image_height <= 0:
        return []

    blocks: List[Block] = []
    for x in range(0, image_width, grid_size):
        width = _clamped_extent(x, grid_size, image_width)
        for y in range(0, image_height, grid_size):
            height = _clamped_extent(y, grid_size, image_height)
            blocks.append(Block(x, y, width, height))

    logger.debug(
        f"Partitioned {image_width}x{image_height} at {grid_size}px: "
        f"{len(blocks)} blocks"
    )
    return blocks


def grid_lines(image_width: int, image_height: int, grid_size: int) -> GridLines:
    """Compute overlay line positions at every interior grid multiple.

    Raises:
        InvalidArgumentError: If grid_size is not positive.
    """
    if grid_size <= 0:
        raise InvalidArgumentError(f"Grid size must be positive, got {grid_size}")
    width = max(image_width, 0)
    height = max(image_height, 0)
    return GridLines(
        columns=tuple(range(grid_size, width, grid_size)),
        rows=tuple(range(grid_size, height, grid_size)),
        width=width,
        height=height,
    )
