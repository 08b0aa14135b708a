"""Ranked color usage lists."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .buffer import Color
from .config import MAX_PALETTE_ENTRIES, InvalidArgumentError
from .engine import ColorUsage


@dataclass(frozen=True)
class PaletteEntry:
    """A color and the number of blocks assigned to it."""

    color: Color
    count: int


RankedPalette = Tuple[PaletteEntry, ...]


def rank(usage: ColorUsage, limit: int = MAX_PALETTE_ENTRIES) -> RankedPalette:
    """Rank colors by block count, most used first.

    Equal counts keep the order in which the block scan first produced
    the colors. Fully transparent colors are dropped before the list is
    cut to ``limit`` entries.

    Args:
        usage: Color usage from a render pass (not modified).
        limit: Maximum number of entries.

    Returns:
        Immutable ranked palette.

    Raises:
        InvalidArgumentError: If limit is negative.
    """
    if limit < 0:
        raise InvalidArgumentError(f"Palette limit cannot be negative, got {limit}")

    # sorted() is stable, so ties stay in first-encounter order
    ordered = sorted(usage.counts(), key=lambda pair: -pair[1])
    visible = [
        PaletteEntry(color=color, count=count)
        for color, count in ordered
        if not color.is_transparent
    ]
    return tuple(visible[:limit])


def format_entry(entry: PaletteEntry) -> str:
    """Format an entry as ``#AARRGGBB, N time(s)``."""
    return f"{entry.color.hex}, {entry.count} time(s)"
