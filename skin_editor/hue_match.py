# skin_editor/hue_match.py
from __future__ import annotations

"""
Hue-shift search: find the rotation of the hue circle that makes a source
image's hue distribution look most like a reference.

Exports:
  hue_shift_scores(src_hist, ref_hist)              -> [(shift_deg, score), ...]
  find_best_hue_shift_histograms(src_hist, ref_hist) -> int degrees
  find_best_hue_shift(source, reference)             -> int degrees in [-180, 170]
"""

from typing import List, Tuple

import numpy as np

from .analysis import extract_histogram
from .constants import (
    HUE_BUCKET_DEGREES,
    HUE_SHIFT_MAX_BUCKETS,
    HUE_SHIFT_MIN_BUCKETS,
)
from .core_types import Histogram, PixelBuffer


def hue_shift_scores(
    src_hist: Histogram, ref_hist: Histogram
) -> List[Tuple[int, float]]:
    """
    Sum-of-squared-differences score for every candidate shift.

    Each hue histogram is normalised by its own total first. Returns an
    empty list when either histogram has no hue samples.
    """
    if src_hist.hue_total == 0 or ref_hist.hue_total == 0:
        return []
    src_norm = src_hist.normalised_hue()
    ref_norm = ref_hist.normalised_hue()

    scores: List[Tuple[int, float]] = []
    for shift in range(HUE_SHIFT_MIN_BUCKETS, HUE_SHIFT_MAX_BUCKETS):
        # bucket i moves to (i + shift) mod 36
        shifted = np.roll(src_norm, shift)
        diff = ref_norm - shifted
        scores.append((int(round(shift * HUE_BUCKET_DEGREES)), float(np.sum(diff * diff))))
    return scores


def find_best_hue_shift_histograms(src_hist: Histogram, ref_hist: Histogram) -> int:
    """Lowest-scoring shift in degrees; ties keep the earliest (most negative)."""
    best_shift = 0
    best_score = float("inf")
    for shift_deg, score in hue_shift_scores(src_hist, ref_hist):
        if score < best_score:
            best_score = score
            best_shift = shift_deg
    return best_shift


def find_best_hue_shift(source: PixelBuffer, reference: PixelBuffer) -> int:
    """
    Best hue shift (degrees, multiple of 10 in [-180, 170]) to apply to
    `source` so its hue histogram matches `reference`. 0 when either image
    has no saturated visible pixels.
    """
    return find_best_hue_shift_histograms(
        extract_histogram(source), extract_histogram(reference)
    )


__all__ = [
    "hue_shift_scores",
    "find_best_hue_shift_histograms",
    "find_best_hue_shift",
]
