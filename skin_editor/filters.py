# skin_editor/filters.py
from __future__ import annotations

"""
Per-pixel colour adjustments.

Exports:
  apply_filters(buffer, settings) -> PixelBuffer   vectorised, input untouched
  filter_rgb(r, g, b, settings)   -> RGBTuple      scalar reference
  contrast_factor(contrast)       -> float

Order per pixel (changing it changes the output):
  1. RGB -> HSL
  2. hue shift (mod 360)
  3. saturation / lightness offsets, clamped to 0..100
  4. colorize: pull hue towards colorize_hue (skipped for s <= 5)
  5. selective desaturation around target_hue, fading to 0 at hue_range
  6. HSL -> RGB
  7. contrast around 128
Alpha is never touched and fully transparent pixels are skipped.
"""

import math

import numpy as np
from numpy.typing import NDArray

from .colour_convert import hsl_to_rgb, hsl_to_rgb_array, rgb_to_hsl, rgb_to_hsl_array
from .constants import COLORIZE_MIN_SATURATION
from .core_types import (
    FilterSettings,
    PixelBuffer,
    RGBTuple,
    clamp_value,
    hue_difference_degrees,
)


def contrast_factor(contrast: float) -> float:
    """Standard 259-based contrast multiplier."""
    if contrast >= 259.0:
        raise ValueError(f"contrast {contrast} out of range (must be < 259)")
    return (259.0 * (contrast + 255.0)) / (255.0 * (259.0 - contrast))


def _grey_influence(distance: float, hue_range: float) -> float:
    # hue_range == 0 only reaches here at distance 0
    return 1.0 if hue_range <= 0.0 else 1.0 - distance / hue_range


def filter_rgb(r: int, g: int, b: int, settings: FilterSettings) -> RGBTuple:
    """Apply settings to one opaque pixel."""
    h, s, l = rgb_to_hsl(r, g, b)
    h = (h + settings.hue_shift) % 360.0
    s = clamp_value(s + settings.saturation, 0.0, 100.0)
    l = clamp_value(l + settings.lightness, 0.0, 100.0)

    if settings.colorize_amount > 0.0 and s > COLORIZE_MIN_SATURATION:
        h = (h + (settings.colorize_hue - h) * settings.colorize_amount) % 360.0

    if settings.grey_amount > 0.0:
        dist = hue_difference_degrees(h, settings.target_hue)
        if dist <= settings.hue_range:
            s = s * (1.0 - settings.grey_amount * _grey_influence(dist, settings.hue_range))

    out = hsl_to_rgb(h, s, l)
    if settings.contrast != 0.0:
        factor = contrast_factor(settings.contrast)
        out = tuple(  # type: ignore[assignment]
            int(clamp_value(math.floor(factor * (c - 128) + 128 + 0.5), 0, 255))
            for c in out
        )
    return out


def _apply_contrast(rgb: NDArray[np.uint8], contrast: float) -> NDArray[np.uint8]:
    factor = contrast_factor(contrast)
    shifted = factor * (rgb.astype(np.float64) - 128.0) + 128.0
    return np.clip(np.floor(shifted + 0.5), 0.0, 255.0).astype(np.uint8)


def apply_filters(buffer: PixelBuffer, settings: FilterSettings) -> PixelBuffer:
    """
    Return a filtered copy of buffer.

    Args:
      buffer  : any size RGBA buffer
      settings: FilterSettings
    Returns:
      new PixelBuffer, same size, alpha unchanged
    """
    out = buffer.clone()
    visible = out.alpha != 0
    if not np.any(visible):
        return out

    hsl = rgb_to_hsl_array(out.rgb[visible])
    h = np.mod(hsl[:, 0] + settings.hue_shift, 360.0)
    s = np.clip(hsl[:, 1] + settings.saturation, 0.0, 100.0)
    l = np.clip(hsl[:, 2] + settings.lightness, 0.0, 100.0)

    if settings.colorize_amount > 0.0:
        pulled = np.mod(h + (settings.colorize_hue - h) * settings.colorize_amount, 360.0)
        h = np.where(s > COLORIZE_MIN_SATURATION, pulled, h)

    if settings.grey_amount > 0.0:
        dist = np.abs(h - settings.target_hue)
        dist = np.where(dist > 180.0, 360.0 - dist, dist)
        if settings.hue_range > 0.0:
            influence = 1.0 - dist / settings.hue_range
        else:
            influence = np.ones_like(dist)
        scaled = s * (1.0 - settings.grey_amount * influence)
        s = np.where(dist <= settings.hue_range, scaled, s)

    rgb = hsl_to_rgb_array(np.stack([h, s, l], axis=-1))
    if settings.contrast != 0.0:
        rgb = _apply_contrast(rgb, settings.contrast)

    out.data[..., :3][visible] = rgb
    return out


__all__ = ["apply_filters", "filter_rgb", "contrast_factor"]
