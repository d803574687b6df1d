"""Tests for PixelBuffer, Histogram and FilterSettings."""

from __future__ import annotations

import numpy as np
import pytest

from skin_editor.core_types import (
    FilterSettings,
    Histogram,
    PixelBuffer,
    clamp_value,
    hue_difference_degrees,
)
from skin_editor.errors import BoundsError

# ---------------------------------------------------------------------------
# PixelBuffer
# ---------------------------------------------------------------------------


class TestPixelBuffer:
    def test_blank_dimensions_and_byte_length(self) -> None:
        buf = PixelBuffer.blank(5, 3)
        assert buf.size == (5, 3)
        assert len(buf.to_bytes()) == 5 * 3 * 4
        assert buf.get(4, 2) == (0, 0, 0, 0)

    def test_set_then_get(self) -> None:
        buf = PixelBuffer.blank(4, 4)
        buf.set(1, 2, 10, 20, 30, 40)
        assert buf.get(1, 2) == (10, 20, 30, 40)
        # row-major: (x=1, y=2) is byte offset (2 * 4 + 1) * 4
        offset = (2 * 4 + 1) * 4
        assert buf.to_bytes()[offset : offset + 4] == bytes([10, 20, 30, 40])

    @pytest.mark.parametrize("xy", [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)])
    def test_get_out_of_bounds_raises(self, xy: tuple[int, int]) -> None:
        buf = PixelBuffer.blank(4, 3)
        with pytest.raises(BoundsError):
            buf.get(*xy)

    @pytest.mark.parametrize("xy", [(-1, 0), (4, 0), (0, 3)])
    def test_set_out_of_bounds_raises(self, xy: tuple[int, int]) -> None:
        buf = PixelBuffer.blank(4, 3)
        with pytest.raises(BoundsError):
            buf.set(*xy, 1, 2, 3, 4)

    def test_bounds_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            PixelBuffer.blank(2, 2).get(2, 0)

    def test_set_rejects_out_of_range_channel(self) -> None:
        buf = PixelBuffer.blank(2, 2)
        with pytest.raises(ValueError):
            buf.set(0, 0, 256, 0, 0, 0)
        assert buf.get(0, 0) == (0, 0, 0, 0)

    def test_clone_is_deep(self) -> None:
        buf = PixelBuffer.filled(3, 3, (1, 2, 3, 4))
        copy = buf.clone()
        copy.set(0, 0, 9, 9, 9, 9)
        assert buf.get(0, 0) == (1, 2, 3, 4)
        assert copy.get(0, 0) == (9, 9, 9, 9)
        assert copy.size == buf.size
        assert not np.shares_memory(buf.data, copy.data)

    def test_from_bytes_round_trip(self) -> None:
        raw = bytes(range(2 * 2 * 4))
        buf = PixelBuffer.from_bytes(2, 2, raw)
        assert buf.get(1, 0) == (4, 5, 6, 7)
        assert buf.to_bytes() == raw

    def test_from_bytes_rejects_wrong_length(self) -> None:
        with pytest.raises(ValueError):
            PixelBuffer.from_bytes(2, 2, bytes(15))

    @pytest.mark.parametrize("size", [(0, 4), (4, 0), (-1, 2)])
    def test_rejects_non_positive_dimensions(self, size: tuple[int, int]) -> None:
        with pytest.raises(ValueError):
            PixelBuffer.blank(*size)

    def test_rejects_wrong_array_layout(self) -> None:
        with pytest.raises(TypeError):
            PixelBuffer(np.zeros((4, 4, 3), dtype=np.uint8))
        with pytest.raises(TypeError):
            PixelBuffer(np.zeros((4, 4, 4), dtype=np.float32))

    def test_equality(self) -> None:
        a = PixelBuffer.filled(2, 2, (1, 1, 1, 1))
        b = PixelBuffer.filled(2, 2, (1, 1, 1, 1))
        assert a == b
        b.set(1, 1, 0, 0, 0, 0)
        assert a != b
        assert PixelBuffer.blank(2, 4) != PixelBuffer.blank(4, 2)


# ---------------------------------------------------------------------------
# Histogram
# ---------------------------------------------------------------------------


class TestHistogram:
    def test_buckets_are_read_only(self) -> None:
        hist = Histogram(np.zeros(36), np.zeros(30))
        with pytest.raises(ValueError):
            hist.hue_buckets[0] = 1

    def test_rejects_wrong_lengths(self) -> None:
        with pytest.raises(ValueError):
            Histogram(np.zeros(35), np.zeros(30))
        with pytest.raises(ValueError):
            Histogram(np.zeros(36), np.zeros(31))

    def test_normalised_hue(self) -> None:
        hue = np.zeros(36, dtype=np.int64)
        hue[3] = 1
        hue[7] = 3
        hist = Histogram(hue, np.zeros(30))
        dist = hist.normalised_hue()
        assert dist.sum() == pytest.approx(1.0)
        assert dist[7] == pytest.approx(0.75)

    def test_normalised_empty_is_zeros(self) -> None:
        hist = Histogram(np.zeros(36), np.zeros(30))
        assert hist.hue_total == 0
        assert not hist.normalised_hue().any()


# ---------------------------------------------------------------------------
# FilterSettings and helpers
# ---------------------------------------------------------------------------


class TestFilterSettings:
    def test_defaults_are_identity(self) -> None:
        settings = FilterSettings()
        assert settings.is_identity
        assert settings.hue_range == 30.0

    def test_from_percent_scales_amounts(self) -> None:
        settings = FilterSettings.from_percent(
            colorize_amount=50, grey_amount=25, hue_shift=10.0
        )
        assert settings.colorize_amount == pytest.approx(0.5)
        assert settings.grey_amount == pytest.approx(0.25)
        assert settings.hue_shift == 10.0
        assert not settings.is_identity

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grey_amount": 2.0},
            {"grey_amount": -0.1},
            {"colorize_amount": 1.5},
            {"colorize_amount": -1.0},
        ],
    )
    def test_amounts_outside_unit_range_rejected(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            FilterSettings(**kwargs)

    def test_amount_limits_accepted(self) -> None:
        settings = FilterSettings(colorize_amount=1.0, grey_amount=0.0)
        assert settings.colorize_amount == 1.0
        assert FilterSettings.from_percent(grey_amount=100).grey_amount == 1.0
        with pytest.raises(ValueError):
            FilterSettings.from_percent(grey_amount=200)

    def test_full_turn_hue_shift_is_identity(self) -> None:
        assert FilterSettings(hue_shift=360.0).is_identity

    def test_as_pairs_lists_every_field(self) -> None:
        names = [name for name, _ in FilterSettings().as_pairs()]
        assert names[0] == "hue_shift"
        assert "grey_amount" in names
        assert len(names) == 9


class TestHelpers:
    def test_clamp_value(self) -> None:
        assert clamp_value(-5, 0, 100) == 0
        assert clamp_value(105, 0, 100) == 100
        assert clamp_value(42, 0, 100) == 42

    @pytest.mark.parametrize(
        "a, b, want", [(10, 350, 20), (350, 10, 20), (0, 180, 180), (90, 90, 0)]
    )
    def test_hue_difference_wraps(self, a: float, b: float, want: float) -> None:
        assert hue_difference_degrees(a, b) == pytest.approx(want)
