# skin_editor/preview.py
from __future__ import annotations

"""
Static previews: histogram bar charts and the flat head strip.

Histograms draw the current counts as filled bars and an optional reference
as white outlines, both scaled by the larger maximum so they compare
directly.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .colour_convert import hsl_to_rgb
from .constants import (
    BRIGHT_BUCKETS,
    HEAD_STRIP_ROWS,
    HUE_BUCKET_DEGREES,
    HUE_BUCKETS,
)
from .core_types import Histogram, PixelBuffer, RGBTuple

_REFERENCE_OUTLINE = (255, 255, 255, 204)


def _render_bars(
    counts: Sequence[int],
    colours: List[RGBTuple],
    ref_counts: Optional[Sequence[int]],
    size: Tuple[int, int],
) -> Image.Image:
    width, height = size
    im = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(im)
    n = len(counts)
    bar_w = width / float(n)

    peak = max(list(counts) + (list(ref_counts) if ref_counts is not None else [0]))
    if peak <= 0:
        return im

    def _bar(i: int, count: int) -> Tuple[float, float, float, float]:
        x0 = i * bar_w
        top = min(height - (count / peak) * height, height - 1)
        return (x0, top, max(x0, (i + 1) * bar_w - 2), height - 1)

    for i, count in enumerate(counts):
        if count > 0:
            draw.rectangle(_bar(i, int(count)), fill=colours[i] + (255,))

    if ref_counts is not None:
        for i, count in enumerate(ref_counts):
            if count > 0:
                draw.rectangle(_bar(i, int(count)), outline=_REFERENCE_OUTLINE, width=2)
    return im


def render_hue_histogram(
    hist: Histogram,
    reference: Optional[Histogram] = None,
    size: Tuple[int, int] = (360, 80),
) -> Image.Image:
    """Hue buckets, each bar tinted with its bucket-centre hue."""
    colours = [
        hsl_to_rgb(i * HUE_BUCKET_DEGREES + HUE_BUCKET_DEGREES / 2.0, 100.0, 50.0)
        for i in range(HUE_BUCKETS)
    ]
    ref = reference.hue_buckets.tolist() if reference is not None else None
    return _render_bars(hist.hue_buckets.tolist(), colours, ref, size)


def render_brightness_histogram(
    hist: Histogram,
    reference: Optional[Histogram] = None,
    size: Tuple[int, int] = (360, 80),
) -> Image.Image:
    """Lightness buckets, each bar drawn in its bucket-centre grey."""
    step = 100.0 / BRIGHT_BUCKETS
    colours = [hsl_to_rgb(0.0, 0.0, i * step + step / 2.0) for i in range(BRIGHT_BUCKETS)]
    ref = reference.bright_buckets.tolist() if reference is not None else None
    return _render_bars(hist.bright_buckets.tolist(), colours, ref, size)


def render_head_strip(buffer: PixelBuffer, scale: int = 4) -> Image.Image:
    """Top 16 rows (the head band) enlarged with nearest-neighbour."""
    if scale < 1:
        raise ValueError("scale must be >= 1")
    rows = min(HEAD_STRIP_ROWS, buffer.height)
    strip = np.ascontiguousarray(buffer.data[:rows])
    im = Image.fromarray(strip)
    return im.resize(
        (buffer.width * scale, rows * scale), resample=Image.Resampling.NEAREST
    )


__all__ = [
    "render_hue_histogram",
    "render_brightness_histogram",
    "render_head_strip",
]
