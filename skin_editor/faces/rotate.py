# skin_editor/faces/rotate.py
from __future__ import annotations

import numpy as np

from ..core_types import PixelBuffer
from .atlas import require_face_dimensions

"""
Quarter and half turns of a single 8x8 face. Inputs are never mutated.

With (x, y) as (column, row):
  90 CW : src(x, y) -> dst(7 - y, x)
  90 CCW: src(x, y) -> dst(y, 7 - x)
  180   : src(x, y) -> dst(7 - x, 7 - y)
"""


def _turn(face: PixelBuffer, quarter_turns_ccw: int) -> PixelBuffer:
    require_face_dimensions(face)
    return PixelBuffer(
        np.ascontiguousarray(np.rot90(face.data, k=quarter_turns_ccw, axes=(0, 1)))
    )


def rotate_face_90_cw(face: PixelBuffer) -> PixelBuffer:
    return _turn(face, -1)


def rotate_face_90_ccw(face: PixelBuffer) -> PixelBuffer:
    return _turn(face, 1)


def rotate_face_180(face: PixelBuffer) -> PixelBuffer:
    return _turn(face, 2)


__all__ = ["rotate_face_90_cw", "rotate_face_90_ccw", "rotate_face_180"]
