"""Block color interpolation strategies.

Each strategy reduces the pixels covered by an area to one representative
color:

- MIDDLE_PIXEL: the pixel at the center of the area.
- DOMINANT_PIXEL: the most frequent color; ties go to the color seen first
  when scanning column by column.
- WEIGHTED_AVERAGE: the count-weighted mean of R, G and B (truncated);
  the result is always fully opaque.

Sampling is inclusive on both ends: ``ceil(left) <= x <= floor(right)`` and
``ceil(top) <= y <= floor(bottom)``, so an area of zero width or height
still reads a single column or row. All strategies are pure functions of
``(buffer, area)``.
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from .buffer import Color, PixelBuffer
from .config import InvalidArgumentError


@dataclass(frozen=True)
class Area:
    """A rectangle with possibly fractional bounds."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def sample_range(self) -> Tuple[int, int, int, int]:
        """Return inclusive pixel bounds ``(x0, x1, y0, y1)``."""
        return (
            math.ceil(self.left),
            math.floor(self.right),
            math.ceil(self.top),
            math.floor(self.bottom),
        )


class Interpolator(enum.Enum):
    """The available block color strategies."""

    MIDDLE_PIXEL = "middle-pixel"
    DOMINANT_PIXEL = "dominant-pixel"
    WEIGHTED_AVERAGE = "weighted-average"

    @classmethod
    def from_name(cls, name: Union[str, Interpolator]) -> "Interpolator":
        """Look up a strategy by value or name.

        Accepts ``"dominant-pixel"``, ``"DOMINANT_PIXEL"`` or
        ``"Dominant Pixel"`` alike.

        Raises:
            InvalidArgumentError: If no strategy matches.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "-").replace(" ", "-")
        for member in cls:
            if member.value == key:
                return member
        choices = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(
            f"Unknown interpolator: '{name}'. Choose one of: {choices}"
        )


def _check_arguments(buffer: Optional[PixelBuffer], area: Area) -> None:
    if buffer is None:
        raise InvalidArgumentError("A pixel buffer is required")
    if area.width < 0 or area.height < 0:
        raise InvalidArgumentError(
            f"Area cannot have negative size, got {area.width}x{area.height}"
        )


def _color_frequencies(
    buffer: PixelBuffer, area: Area
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Count each distinct color in the sampled area.

    Returns:
        Tuple of (colors, first_seen, counts): colors has shape (K, 4),
        first_seen holds each color's position in the column-major scan.
    """
    x0, x1, y0, y1 = area.sample_range()
    flat = buffer.region(x0, y0, x1, y1).reshape(-1, 4).astype(np.uint32)

    # Pack RGBA into single uint32 for efficient counting
    packed = (
        (flat[:, 0] << 24)
        | (flat[:, 1] << 16)
        | (flat[:, 2] << 8)
        | flat[:, 3]
    )
    values, first_seen, counts = np.unique(
        packed, return_index=True, return_counts=True
    )
    colors = np.stack(
        [
            (values >> 24) & 0xFF,
            (values >> 16) & 0xFF,
            (values >> 8) & 0xFF,
            values & 0xFF,
        ],
        axis=1,
    )
    return colors, first_seen, counts


def middle_pixel(buffer: PixelBuffer, area: Area) -> Color:
    """Return the pixel at the center of the area."""
    _check_arguments(buffer, area)
    x = math.floor(area.left + area.width / 2)
    y = math.floor(area.top + area.height / 2)
    return buffer.get_pixel(x, y)


def dominant_pixel(buffer: PixelBuffer, area: Area) -> Color:
    """Return the most frequent color in the area.

    Among equally frequent colors the one encountered first in the
    x-major scan wins.
    """
    _check_arguments(buffer, area)
    colors, first_seen, counts = _color_frequencies(buffer, area)

    tied = counts == counts.max()
    # Of the tied colors, pick the one with the earliest scan position
    winner = int(np.argmin(np.where(tied, first_seen, np.iinfo(np.int64).max)))
    r, g, b, a = (int(c) for c in colors[winner])
    return Color(r, g, b, a)


def weighted_average(buffer: PixelBuffer, area: Area) -> Color:
    """Return the count-weighted average color of the area.

    Channels are combined with truncating integer division. Alpha is not
    averaged: the result is always opaque.

    Raises:
        InvalidArgumentError: If the area samples no pixels.
    """
    _check_arguments(buffer, area)
    colors, _, counts = _color_frequencies(buffer, area)

    total = int(counts.sum())
    if total == 0:
        raise InvalidArgumentError("Cannot average an empty area")

    weighted = colors[:, :3].astype(np.int64) * counts[:, None].astype(np.int64)
    r, g, b = (int(channel) // total for channel in weighted.sum(axis=0))
    return Color(r, g, b, 255)


ColorFunction = Callable[[PixelBuffer, Area], Color]

_STRATEGIES: Dict[Interpolator, ColorFunction] = {
    Interpolator.MIDDLE_PIXEL: middle_pixel,
    Interpolator.DOMINANT_PIXEL: dominant_pixel,
    Interpolator.WEIGHTED_AVERAGE: weighted_average,
}


def determine_color(
    buffer: Optional[PixelBuffer],
    area: Area,
    interpolator: Union[Interpolator, str] = Interpolator.MIDDLE_PIXEL,
) -> Color:
    """Compute the representative color of an area.

    Args:
        buffer: Source pixels.
        area: Region to sample.
        interpolator: Strategy (enum member or name).

    Returns:
        The representative color.

    Raises:
        InvalidArgumentError: If the buffer is missing, the area is empty,
            or the interpolator is unknown.
    """
    strategy = _STRATEGIES[Interpolator.from_name(interpolator)]
    return strategy(buffer, area)
