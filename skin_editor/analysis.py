# skin_editor/analysis.py
from __future__ import annotations

import math
import re
from typing import List, Optional

import numpy as np

from .colour_convert import rgb_to_hsl, rgb_to_hsl_array
from .constants import (
    BRIGHT_BUCKET_WIDTH,
    BRIGHT_BUCKETS,
    GREY_SATURATION,
    HUE_BUCKET_DEGREES,
    HUE_BUCKETS,
    HUE_GRADIENT_OFFSETS,
)
from .core_types import HSLArray, Histogram, PixelBuffer, RGBTuple, U8Mask

"""
Hue / brightness analysis of pixel buffers.

Both average_hue and extract_histogram decide which pixels carry a
meaningful hue through chromatic_mask, so the two stay consistent:
  - fully transparent pixels (alpha == 0) never count
  - near-grey pixels are dropped from hue statistics only
"""

_HEX6 = re.compile(r"^[0-9a-fA-F]{6}$")
_RGB_TRIPLE = re.compile(r"(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")


# ===================
# Pixel selection
# ===================
def visible_mask(buffer: PixelBuffer) -> U8Mask:
    """True where alpha != 0."""
    return buffer.alpha != 0


def chromatic_mask(
    hsl: HSLArray,
    visible: U8Mask,
    *,
    min_saturation: float = GREY_SATURATION,
    inclusive: bool = False,
) -> U8Mask:
    """
    Visible pixels whose saturation clears the grey threshold.

    inclusive=True keeps saturation >= min_saturation (average hue);
    inclusive=False keeps saturation > min_saturation (histogram).
    """
    sat = hsl[..., 1]
    keep = sat >= min_saturation if inclusive else sat > min_saturation
    return visible & keep


# ===================
# Statistics
# ===================
def average_hue(buffer: PixelBuffer) -> float:
    """
    Arithmetic mean hue (degrees) of visible, saturated pixels; 0 if none.

    This is a plain mean, not a circular one: reds straddling 0/360 average
    towards cyan.
    """
    hsl = rgb_to_hsl_array(buffer.rgb)
    mask = chromatic_mask(hsl, visible_mask(buffer), inclusive=True)
    count = int(np.count_nonzero(mask))
    if count == 0:
        return 0.0
    return float(hsl[..., 0][mask].sum() / count)


def extract_histogram(buffer: PixelBuffer) -> Histogram:
    """
    Bucket visible pixels by hue (36 x 10 deg) and lightness (30 buckets).

    Greys (saturation <= 10) are left out of the hue buckets but still
    counted for brightness.
    """
    hsl = rgb_to_hsl_array(buffer.rgb)
    visible = visible_mask(buffer)
    chromatic = chromatic_mask(hsl, visible)

    hue_idx = np.floor(hsl[..., 0][chromatic] / HUE_BUCKET_DEGREES).astype(np.int64)
    hue_idx %= HUE_BUCKETS
    bright_idx = np.floor(hsl[..., 2][visible] / BRIGHT_BUCKET_WIDTH).astype(np.int64)
    bright_idx = np.minimum(bright_idx, BRIGHT_BUCKETS - 1)

    return Histogram(
        hue_buckets=np.bincount(hue_idx, minlength=HUE_BUCKETS),
        bright_buckets=np.bincount(bright_idx, minlength=BRIGHT_BUCKETS),
    )


def hue_gradient_stops(center_hue: float) -> List[float]:
    """Hues for a slider gradient spanning -180..180 around center_hue."""
    return [(center_hue + off) % 360.0 for off in HUE_GRADIENT_OFFSETS]


# ===================
# Colour text input
# ===================
def parse_colour_text(text: str) -> Optional[RGBTuple]:
    """
    Parse 'rrggbb' / '#rrggbb' or an 'r, g, b' triple.
    Returns None when nothing usable is found.
    """
    s = text.strip()
    if s.startswith("#"):
        s = s[1:]
    if _HEX6.match(s):
        return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
    m = _RGB_TRIPLE.search(s)
    if m is None:
        return None
    rgb = (int(m.group(1)), int(m.group(2)), int(m.group(3)))
    if any(v > 255 for v in rgb):
        return None
    return rgb


def colorize_hue_from_text(text: str) -> Optional[int]:
    """Hue (rounded degrees) of a typed colour, for the colorize target."""
    rgb = parse_colour_text(text)
    if rgb is None:
        return None
    h, _s, _l = rgb_to_hsl(*rgb)
    return int(math.floor(h + 0.5))


__all__ = [
    "visible_mask",
    "chromatic_mask",
    "average_hue",
    "extract_histogram",
    "hue_gradient_stops",
    "parse_colour_text",
    "colorize_hue_from_text",
]
