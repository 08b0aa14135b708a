"""Tests for interpolate module."""
from __future__ import annotations

import numpy as np
import pytest

from pixelator.buffer import Color, PixelBuffer
from pixelator.config import InvalidArgumentError
from pixelator.interpolate import (
    Area,
    Interpolator,
    determine_color,
    dominant_pixel,
    middle_pixel,
    weighted_average,
)

from conftest import BLACK, BLUE, GREEN, RED, WHITE, make_buffer

ALL_STRATEGIES = [middle_pixel, dominant_pixel, weighted_average]


def _row_buffer(*colors) -> PixelBuffer:
    """A 1-pixel-tall buffer with the given colors left to right."""
    arr = np.zeros((1, len(colors), 4), dtype=np.uint8)
    for x, color in enumerate(colors):
        arr[0, x] = color
    return PixelBuffer(arr)


class TestArea:
    """Tests for Area."""

    def test_right_and_bottom(self) -> None:
        """Right and bottom should be derived from size."""
        area = Area(1.0, 2.0, 3.0, 4.0)
        assert area.right == 4.0
        assert area.bottom == 6.0

    def test_sample_range_is_inclusive(self) -> None:
        """Bounds should use ceil on the start and floor on the end."""
        area = Area(0.5, 1.2, 2.0, 3.0)
        assert area.sample_range() == (1, 2, 2, 4)

    def test_integer_area_samples_extra_column(self) -> None:
        """An integer area includes its right and bottom edge pixels."""
        assert Area(0.0, 0.0, 4.0, 4.0).sample_range() == (0, 4, 0, 4)


class TestMiddlePixel:
    """Tests for middle_pixel."""

    def test_returns_exact_midpoint_pixel(self) -> None:
        """Should return the stored pixel at floor(left + width / 2)."""
        arr = np.zeros((5, 5, 4), dtype=np.uint8)
        for y in range(5):
            for x in range(5):
                arr[y, x] = (x * 40, y * 40, 3, 200)
        buffer = PixelBuffer(arr)

        assert middle_pixel(buffer, Area(0, 0, 4, 4)) == Color(80, 80, 3, 200)
        assert middle_pixel(buffer, Area(0, 0, 3, 3)) == Color(40, 40, 3, 200)
        assert middle_pixel(buffer, Area(1, 2, 3, 1)) == Color(80, 80, 3, 200)

    def test_no_blending(self) -> None:
        """Should never mix neighboring pixels."""
        buffer = _row_buffer(BLACK, WHITE, BLACK, WHITE)
        assert middle_pixel(buffer, Area(0, 0, 3, 0)) == Color(*WHITE)


class TestDominantPixel:
    """Tests for dominant_pixel."""

    def test_majority_wins(self) -> None:
        """Color B (5 pixels) should beat color A (3 pixels)."""
        buffer = _row_buffer(RED, RED, RED, BLUE, BLUE, BLUE, BLUE, BLUE)
        assert dominant_pixel(buffer, Area(0, 0, 7, 0)) == Color(*BLUE)

    def test_tie_goes_to_first_in_column_scan(self) -> None:
        """Ties should be broken by x-major scan order, not color value."""
        arr = np.zeros((4, 2, 4), dtype=np.uint8)
        # Column 0: green, red, red, red. Column 1: blue, blue, blue, green.
        arr[:, 0] = RED
        arr[0, 0] = GREEN
        arr[:, 1] = BLUE
        arr[3, 1] = GREEN
        buffer = PixelBuffer(arr)

        # Red is met at (0, 1) before blue at (1, 0) when scanning columns;
        # a row scan or a sort by color value would pick blue.
        assert dominant_pixel(buffer, Area(0, 0, 1, 3)) == Color(*RED)

    def test_alpha_distinguishes_colors(self) -> None:
        """Colors differing only in alpha should be counted separately."""
        faded = (255, 0, 0, 128)
        buffer = _row_buffer(faded, RED, RED)
        assert dominant_pixel(buffer, Area(0, 0, 2, 0)) == Color(*RED)


class TestWeightedAverage:
    """Tests for weighted_average."""

    def test_black_and_white_truncates(self) -> None:
        """One black and one white pixel should average to 127."""
        buffer = _row_buffer(BLACK, WHITE)
        assert weighted_average(buffer, Area(0, 0, 1, 0)) == Color(127, 127, 127, 255)

    def test_weights_by_count(self) -> None:
        """Each color should contribute in proportion to its pixel count."""
        buffer = _row_buffer(BLACK, BLACK, WHITE)
        assert weighted_average(buffer, Area(0, 0, 2, 0)) == Color(85, 85, 85, 255)

    def test_alpha_not_averaged(self) -> None:
        """Output should be opaque whatever the source alpha."""
        c1 = (30, 60, 90, 10)
        c2 = (70, 20, 10, 0)
        buffer = _row_buffer(c1, c1, c1, c2)
        assert weighted_average(buffer, Area(0, 0, 3, 0)) == Color(40, 50, 70, 255)


class TestCommonContract:
    """Behavior shared by all strategies."""

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_solid_area(self, strategy) -> None:
        """A solid area should yield exactly that color."""
        color = (12, 34, 56, 255)
        buffer = make_buffer(6, 6, color)
        assert strategy(buffer, Area(1, 1, 3, 3)) == Color(*color)

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_missing_buffer(self, strategy) -> None:
        """Should reject a missing buffer."""
        with pytest.raises(InvalidArgumentError, match="buffer is required"):
            strategy(None, Area(0, 0, 2, 2))

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_negative_size(self, strategy) -> None:
        """Should reject negative width or height."""
        buffer = make_buffer(4, 4)
        with pytest.raises(InvalidArgumentError, match="negative"):
            strategy(buffer, Area(2, 2, -1, 1))

    @pytest.mark.parametrize("strategy", [dominant_pixel, weighted_average])
    def test_area_sampling_nothing(self, strategy) -> None:
        """An area that covers no whole pixel should fail explicitly."""
        buffer = make_buffer(4, 4)
        with pytest.raises(InvalidArgumentError, match="Empty"):
            strategy(buffer, Area(0.5, 0, 0, 1))

    @pytest.mark.parametrize("strategy", [dominant_pixel, weighted_average])
    def test_zero_height_samples_one_row(self, strategy) -> None:
        """A zero-height integer area should read its single row."""
        buffer = _row_buffer(BLACK, BLACK, BLACK)
        assert strategy(buffer, Area(0, 0, 2, 0)) == Color(*BLACK)

    @pytest.mark.parametrize("strategy", [dominant_pixel, weighted_average])
    def test_area_past_edge(self, strategy) -> None:
        """Sampling past the image edge should fail."""
        buffer = make_buffer(4, 4)
        with pytest.raises(InvalidArgumentError, match="outside"):
            strategy(buffer, Area(0, 0, 4, 4))


class TestInterpolatorLookup:
    """Tests for Interpolator.from_name and determine_color."""

    @pytest.mark.parametrize(
        "name",
        ["dominant-pixel", "DOMINANT_PIXEL", "Dominant Pixel", " dominant_pixel "],
    )
    def test_name_variants(self, name: str) -> None:
        """Should accept values, enum names and display names."""
        assert Interpolator.from_name(name) is Interpolator.DOMINANT_PIXEL

    def test_enum_passthrough(self) -> None:
        """Should return enum members unchanged."""
        assert Interpolator.from_name(Interpolator.WEIGHTED_AVERAGE) is Interpolator.WEIGHTED_AVERAGE

    def test_unknown_name(self) -> None:
        """Should list valid choices for unknown names."""
        with pytest.raises(InvalidArgumentError, match="middle-pixel"):
            Interpolator.from_name("bicubic")

    def test_dispatch(self) -> None:
        """determine_color should route to the selected strategy."""
        buffer = _row_buffer(BLACK, WHITE, BLACK)
        area = Area(0, 0, 2, 0)
        assert determine_color(buffer, area, Interpolator.MIDDLE_PIXEL) == Color(*WHITE)
        assert determine_color(buffer, area, "dominant-pixel") == Color(*BLACK)
        assert determine_color(buffer, area, "weighted-average") == Color(85, 85, 85, 255)

    def test_default_is_middle_pixel(self) -> None:
        """determine_color should default to the middle pixel."""
        buffer = _row_buffer(BLACK, WHITE, BLACK)
        assert determine_color(buffer, Area(0, 0, 2, 0)) == Color(*WHITE)
