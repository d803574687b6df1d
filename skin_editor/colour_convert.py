# skin_editor/colour_convert.py
from __future__ import annotations

"""
RGB <-> HSL conversions.

Exports:
  rgb_to_hsl(r, g, b)        -> (h 0..360, s 0..100, l 0..100)
  hsl_to_rgb(h, s, l)        -> (r, g, b) rounded half-up, clamped to 0..255
  rgb_to_hsl_array(rgb)      vectorised, any shape (..., 3)
  hsl_to_rgb_array(hsl)      vectorised, any shape (..., 3) -> uint8

The scalar and vectorised paths perform the same float64 operations in the
same order, so they agree element for element.
"""

import math

import numpy as np
from numpy.typing import NDArray

from .core_types import HSLArray, HSLTuple, RGBTuple

_ONE_THIRD = 1.0 / 3.0
_ONE_SIXTH = 1.0 / 6.0
_TWO_THIRDS = 2.0 / 3.0


# Scalar reference implementations


def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """
    Convert 0..255 RGB to HSL.

    Achromatic colours (max == min) report hue 0 and saturation 0. When
    several channels share the maximum, the first of R, G, B wins.
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    light = (hi + lo) / 2.0

    if hi == lo:
        return (0.0, 0.0, light * 100.0)

    d = hi - lo
    sat = d / (2.0 - hi - lo) if light > 0.5 else d / (hi + lo)
    if hi == rf:
        hue = ((gf - bf) / d + (6.0 if gf < bf else 0.0)) / 6.0
    elif hi == gf:
        hue = ((bf - rf) / d + 2.0) / 6.0
    else:
        hue = ((rf - gf) / d + 4.0) / 6.0
    return ((hue * 360.0) % 360.0, sat * 100.0, light * 100.0)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < _ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < _TWO_THIRDS:
        return p + (q - p) * (_TWO_THIRDS - t) * 6.0
    return p


def _to_byte(unit: float) -> int:
    """0..1 float to 0..255 int, rounding half-up."""
    v = math.floor(unit * 255.0 + 0.5)
    return 0 if v < 0 else 255 if v > 255 else int(v)


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:
    """Convert HSL (h degrees, s/l percent) to 0..255 RGB."""
    hu, sat, light = h / 360.0, s / 100.0, l / 100.0
    if sat == 0.0:
        v = _to_byte(light)
        return (v, v, v)

    q = light * (1.0 + sat) if light < 0.5 else light + sat - light * sat
    p = 2.0 * light - q
    return (
        _to_byte(_hue_to_channel(p, q, hu + _ONE_THIRD)),
        _to_byte(_hue_to_channel(p, q, hu)),
        _to_byte(_hue_to_channel(p, q, hu - _ONE_THIRD)),
    )


# Vectorised


def rgb_to_hsl_array(rgb: np.ndarray) -> HSLArray:
    """
    RGB[..., 3] (uint8 or integer-valued) -> HSL[..., 3] float64.
    Shape is preserved.
    """
    f = np.asarray(rgb).astype(np.float64) / 255.0
    rf, gf, bf = f[..., 0], f[..., 1], f[..., 2]
    hi = f.max(axis=-1)
    lo = f.min(axis=-1)
    light = (hi + lo) / 2.0
    d = hi - lo
    chromatic = hi != lo

    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(light > 0.5, d / (2.0 - hi - lo), d / (hi + lo))
        hue_r = ((gf - bf) / d + np.where(gf < bf, 6.0, 0.0)) / 6.0
        hue_g = ((bf - rf) / d + 2.0) / 6.0
        hue_b = ((rf - gf) / d + 4.0) / 6.0
    hue = np.where(hi == rf, hue_r, np.where(hi == gf, hue_g, hue_b))

    out = np.empty(f.shape, dtype=np.float64)
    out[..., 0] = np.where(chromatic, np.mod(hue * 360.0, 360.0), 0.0)
    out[..., 1] = np.where(chromatic, sat * 100.0, 0.0)
    out[..., 2] = light * 100.0
    return out


def _hue_to_channel_array(
    p: NDArray[np.float64], q: NDArray[np.float64], t: NDArray[np.float64]
) -> NDArray[np.float64]:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.where(
        t < _ONE_SIXTH,
        p + (q - p) * 6.0 * t,
        np.where(
            t < 0.5,
            q,
            np.where(t < _TWO_THIRDS, p + (q - p) * (_TWO_THIRDS - t) * 6.0, p),
        ),
    )


def hsl_to_rgb_array(hsl: np.ndarray) -> NDArray[np.uint8]:
    """
    HSL[..., 3] (h degrees, s/l percent) -> RGB[..., 3] uint8.
    Shape is preserved.
    """
    arr = np.asarray(hsl, dtype=np.float64)
    hu = arr[..., 0] / 360.0
    sat = arr[..., 1] / 100.0
    light = arr[..., 2] / 100.0

    q = np.where(light < 0.5, light * (1.0 + sat), light + sat - light * sat)
    p = 2.0 * light - q
    grey = sat == 0.0

    out = np.empty(arr.shape, dtype=np.float64)
    out[..., 0] = np.where(grey, light, _hue_to_channel_array(p, q, hu + _ONE_THIRD))
    out[..., 1] = np.where(grey, light, _hue_to_channel_array(p, q, hu))
    out[..., 2] = np.where(grey, light, _hue_to_channel_array(p, q, hu - _ONE_THIRD))
    return np.clip(np.floor(out * 255.0 + 0.5), 0.0, 255.0).astype(np.uint8)


__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
]
