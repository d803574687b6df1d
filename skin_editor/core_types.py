# skin_editor/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass, fields
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import (
    BRIGHT_BUCKETS,
    DEFAULT_HUE_RANGE,
    HUE_BUCKETS,
)
from .errors import BoundsError

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HSLTuple = Tuple[float, float, float]

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
U8Mask = NDArray[np.bool_]  # (H, W)
HSLArray = NDArray[np.float64]  # (..., 3) h, s, l
Buckets = NDArray[np.int64]

# Value objects


@dataclass(eq=False)
class PixelBuffer:
    """
    RGBA pixel buffer backed by a uint8 array of shape (height, width, 4).

    The array is row-major so the flat byte view is width*height*4 long with
    4 bytes (R, G, B, A) per pixel. Buffers are never resized in place.
    """

    data: U8Image

    def __post_init__(self) -> None:
        arr = np.asarray(self.data)
        if arr.dtype != np.uint8 or arr.ndim != 3 or arr.shape[-1] != 4:
            raise TypeError("expected uint8 (H,W,4) RGBA array")
        if arr.shape[0] <= 0 or arr.shape[1] <= 0:
            raise ValueError("buffer dimensions must be positive")
        self.data = np.ascontiguousarray(arr)

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """Fully transparent black buffer."""
        if width <= 0 or height <= 0:
            raise ValueError("buffer dimensions must be positive")
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_bytes(cls, width: int, height: int, raw: bytes) -> "PixelBuffer":
        """Wrap a flat row-major RGBA byte sequence (copied)."""
        if width <= 0 or height <= 0:
            raise ValueError("buffer dimensions must be positive")
        if len(raw) != width * height * 4:
            raise ValueError(
                f"expected {width * height * 4} bytes for {width}x{height}, got {len(raw)}"
            )
        arr = np.frombuffer(bytes(raw), dtype=np.uint8).reshape(height, width, 4)
        return cls(arr.copy())

    @classmethod
    def filled(cls, width: int, height: int, rgba: Sequence[int]) -> "PixelBuffer":
        """Buffer with every pixel set to one RGBA value."""
        buf = cls.blank(width, height)
        buf.data[...] = np.asarray(_check_channels(rgba), dtype=np.uint8)
        return buf

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)."""
        return self.width, self.height

    @property
    def rgb(self) -> NDArray[np.uint8]:
        """View of the colour channels, shape (H, W, 3)."""
        return self.data[..., :3]

    @property
    def alpha(self) -> NDArray[np.uint8]:
        """View of the alpha channel, shape (H, W)."""
        return self.data[..., 3]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> RGBATuple:
        if not self.contains(x, y):
            raise BoundsError(x, y, self.width, self.height)
        r, g, b, a = self.data[y, x].tolist()
        return (r, g, b, a)

    def set(self, x: int, y: int, r: int, g: int, b: int, a: int) -> None:
        """Write one pixel in place."""
        if not self.contains(x, y):
            raise BoundsError(x, y, self.width, self.height)
        self.data[y, x] = _check_channels((r, g, b, a))

    def clone(self) -> "PixelBuffer":
        return PixelBuffer(self.data.copy())

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(
            np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


@dataclass(frozen=True, eq=False)
class Histogram:
    """Hue (36 x 10 deg) and lightness (30 x ~3.33%) bucket counts."""

    hue_buckets: Buckets
    bright_buckets: Buckets

    def __post_init__(self) -> None:
        hue = np.array(self.hue_buckets, dtype=np.int64)
        bright = np.array(self.bright_buckets, dtype=np.int64)
        if hue.shape != (HUE_BUCKETS,) or bright.shape != (BRIGHT_BUCKETS,):
            raise ValueError(
                f"expected {HUE_BUCKETS} hue and {BRIGHT_BUCKETS} brightness buckets"
            )
        hue.setflags(write=False)
        bright.setflags(write=False)
        object.__setattr__(self, "hue_buckets", hue)
        object.__setattr__(self, "bright_buckets", bright)

    @property
    def hue_total(self) -> int:
        return int(self.hue_buckets.sum())

    @property
    def bright_total(self) -> int:
        return int(self.bright_buckets.sum())

    def normalised_hue(self) -> NDArray[np.float64]:
        """Hue buckets as a distribution summing to 1 (all zeros if empty)."""
        total = self.hue_total
        if total == 0:
            return np.zeros(HUE_BUCKETS, dtype=np.float64)
        return self.hue_buckets.astype(np.float64) / float(total)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Histogram):
            return NotImplemented
        return bool(
            np.array_equal(self.hue_buckets, other.hue_buckets)
            and np.array_equal(self.bright_buckets, other.bright_buckets)
        )


@dataclass(frozen=True)
class FilterSettings:
    """
    Adjustment parameters for one filter pass.

    Amount fields (colorize_amount, grey_amount) are fractions in 0..1.
    The defaults leave colours unchanged apart from HSL rounding.
    """

    hue_shift: float = 0.0  # degrees, signed
    saturation: float = 0.0  # signed percent
    lightness: float = 0.0  # signed percent
    contrast: float = 0.0  # -255..255
    colorize_hue: float = 0.0  # 0..360
    colorize_amount: float = 0.0  # 0..1
    target_hue: float = 0.0  # 0..360
    hue_range: float = float(DEFAULT_HUE_RANGE)  # degrees
    grey_amount: float = 0.0  # 0..1

    def __post_init__(self) -> None:
        for name in ("colorize_amount", "grey_amount"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} {value} out of range (must be 0..1)")

    @classmethod
    def from_percent(
        cls,
        *,
        colorize_amount: float = 0.0,
        grey_amount: float = 0.0,
        **kwargs: float,
    ) -> "FilterSettings":
        """Build settings with the amount fields given as 0..100 percentages."""
        return cls(
            colorize_amount=colorize_amount / 100.0,
            grey_amount=grey_amount / 100.0,
            **kwargs,
        )

    @property
    def is_identity(self) -> bool:
        return (
            self.hue_shift % 360.0 == 0.0
            and self.saturation == 0.0
            and self.lightness == 0.0
            and self.contrast == 0.0
            and self.colorize_amount <= 0.0
            and self.grey_amount <= 0.0
        )

    def as_pairs(self) -> list[tuple[str, float]]:
        """(name, value) pairs for log lines."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def hue_difference_degrees(hue_a: float, hue_b: float) -> float:
    """Minimal absolute difference between two hues in degrees [0..180]."""
    d = abs(hue_a - hue_b)
    return 360.0 - d if d > 180.0 else d


def _check_channels(values: Union[Sequence[int], NDArray[np.generic]]) -> RGBATuple:
    if len(values) != 4:
        raise ValueError("expected 4 channel values (r, g, b, a)")
    out = tuple(int(v) for v in values)
    for v in out:
        if v < 0 or v > 255:
            raise ValueError(f"channel value {v} outside 0..255")
    return out  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HSLTuple",
    "U8Image",
    "U8Mask",
    "HSLArray",
    "Buckets",
    # value objects
    "PixelBuffer",
    "Histogram",
    "FilterSettings",
    # helpers
    "clamp_value",
    "hue_difference_degrees",
]
