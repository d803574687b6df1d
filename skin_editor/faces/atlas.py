# skin_editor/faces/atlas.py
from __future__ import annotations

"""
Head face regions of the 64x64 skin atlas.

Each face is an 8x8 block; every face has an inner (base skin) and an outer
(hat/overlay) block. FACE_COORDS is a read-only module constant.

In-place mutators: place_face, clear_outer_layer.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from ..constants import (
    FACE_COORDS as _FACE_COORDS,
    FACE_NAMES,
    FACE_SIZE,
    OUTER_LAYER_REGION,
    SKIN_SIZE,
)
from ..core_types import PixelBuffer
from ..errors import BoundsError, InvalidDimensionError

FACE_COORDS: Mapping[str, Tuple[int, int, int, int]] = MappingProxyType(
    dict(_FACE_COORDS)
)


def inner_origin(name: str) -> Tuple[int, int]:
    x, y, _ox, _oy = FACE_COORDS[name]
    return x, y


def outer_origin(name: str) -> Tuple[int, int]:
    _x, _y, ox, oy = FACE_COORDS[name]
    return ox, oy


def require_skin_dimensions(buffer: PixelBuffer) -> None:
    """Raise InvalidDimensionError unless buffer is 64x64."""
    if buffer.width != SKIN_SIZE or buffer.height != SKIN_SIZE:
        raise InvalidDimensionError(buffer.width, buffer.height, (SKIN_SIZE, SKIN_SIZE))


def require_face_dimensions(face: PixelBuffer) -> None:
    """Raise InvalidDimensionError unless face is 8x8."""
    if face.width != FACE_SIZE or face.height != FACE_SIZE:
        raise InvalidDimensionError(face.width, face.height, (FACE_SIZE, FACE_SIZE))


def _check_region(buffer: PixelBuffer, x: int, y: int) -> None:
    if (
        x < 0
        or y < 0
        or x + FACE_SIZE > buffer.width
        or y + FACE_SIZE > buffer.height
    ):
        raise BoundsError(x, y, buffer.width, buffer.height, what="8x8 region at")


def extract_face(buffer: PixelBuffer, x: int, y: int) -> PixelBuffer:
    """Copy the 8x8 block whose top-left corner is (x, y). 64x64 only."""
    require_skin_dimensions(buffer)
    _check_region(buffer, x, y)
    return PixelBuffer(buffer.data[y : y + FACE_SIZE, x : x + FACE_SIZE].copy())


def place_face(buffer: PixelBuffer, x: int, y: int, face: PixelBuffer) -> None:
    """Write an 8x8 face into buffer at (x, y). Mutates buffer; 64x64 only."""
    require_skin_dimensions(buffer)
    require_face_dimensions(face)
    _check_region(buffer, x, y)
    buffer.data[y : y + FACE_SIZE, x : x + FACE_SIZE] = face.data


def clear_outer_layer(buffer: PixelBuffer) -> None:
    """
    Make the whole outer-layer head band (x 32..63, y 0..15) transparent.
    RGB is left as is. Mutates buffer.
    """
    require_skin_dimensions(buffer)
    x0, y0, x1, y1 = OUTER_LAYER_REGION
    buffer.data[y0:y1, x0:x1, 3] = 0


__all__ = [
    "FACE_COORDS",
    "FACE_NAMES",
    "inner_origin",
    "outer_origin",
    "require_skin_dimensions",
    "require_face_dimensions",
    "extract_face",
    "place_face",
    "clear_outer_layer",
]
