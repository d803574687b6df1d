# skin_editor/constants.py
"""
Global layout and tunables used across the project.

- Skin atlas geometry (SKIN_SIZE, FACE_SIZE, FACE_COORDS, OUTER_LAYER_REGION)
- Histogram bucketing (HUE_*, BRIGHT_*)
- Filter thresholds and slider ranges (SLIDER_RANGES)
"""
from __future__ import annotations

from typing import Dict, Tuple

# =========================
# Skin atlas layout
# =========================
SKIN_SIZE: int = 64
FACE_SIZE: int = 8

# face name -> (inner_x, inner_y, outer_x, outer_y)
FACE_COORDS: Dict[str, Tuple[int, int, int, int]] = {
    "top": (8, 0, 40, 0),
    "bottom": (16, 0, 48, 0),
    "right": (0, 8, 32, 8),
    "front": (8, 8, 40, 8),
    "left": (16, 8, 48, 8),
    "back": (24, 8, 56, 8),
}
FACE_NAMES: Tuple[str, ...] = tuple(FACE_COORDS)

# Outer (hat) layer head band: x0, y0, x1, y1 (half-open)
OUTER_LAYER_REGION: Tuple[int, int, int, int] = (32, 0, 64, 16)

# Rows shown in the flat head preview
HEAD_STRIP_ROWS: int = 16

# =========================
# Histogram bucketing
# =========================
HUE_BUCKETS: int = 36
HUE_BUCKET_DEGREES: float = 360.0 / HUE_BUCKETS
BRIGHT_BUCKETS: int = 30
BRIGHT_BUCKET_WIDTH: float = 100.0 / BRIGHT_BUCKETS

# Saturation (percent) at or below which a hue is meaningless
GREY_SATURATION: float = 10.0

# Hue matching searches bucket offsets in [-18, 18)
HUE_SHIFT_MIN_BUCKETS: int = -(HUE_BUCKETS // 2)
HUE_SHIFT_MAX_BUCKETS: int = HUE_BUCKETS // 2

# =========================
# Filters
# =========================
# Colorize leaves pixels with saturation <= this alone
COLORIZE_MIN_SATURATION: float = 5.0
CONTRAST_LIMIT: int = 255
DEFAULT_HUE_RANGE: int = 30

# Editor sliders: name -> (min, max, default). Amounts are percentages.
SLIDER_RANGES: Dict[str, Tuple[int, int, int]] = {
    "hue": (-180, 180, 0),
    "saturation": (-100, 100, 0),
    "lightness": (-100, 100, 0),
    "contrast": (-CONTRAST_LIMIT, CONTRAST_LIMIT, 0),
    "colorize_hue": (0, 360, 0),
    "colorize_amount": (0, 100, 0),
    "target_hue": (0, 360, 0),
    "hue_range": (0, 180, DEFAULT_HUE_RANGE),
    "grey_amount": (0, 100, 0),
}

# Hue slider gradient: offsets from the centre hue
HUE_GRADIENT_OFFSETS: Tuple[int, ...] = (-180, -120, -60, 0, 60, 120, 180)
