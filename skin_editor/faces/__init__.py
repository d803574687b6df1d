# skin_editor/faces/__init__.py
"""
Face atlas API.

Provides:
  extract_face(buffer, x, y) -> PixelBuffer
  place_face(buffer, x, y, face)            mutates buffer
  clear_outer_layer(buffer)                 mutates buffer
  rotate_face_90_cw / rotate_face_90_ccw / rotate_face_180
  rotate_head_in_buffer(buffer, direction)  mutates buffer
  rotate_head(buffer, direction) -> PixelBuffer

Notes:
  - Atlas and head operations expect a 64x64 buffer and raise
    InvalidDimensionError before touching anything otherwise.
  - Face rotations expect 8x8 buffers and return new ones.
"""

from .atlas import (
    FACE_COORDS,
    FACE_NAMES,
    clear_outer_layer,
    extract_face,
    place_face,
    require_skin_dimensions,
)
from .head import (
    DIRECTIONS,
    inverse_direction,
    rotate_head,
    rotate_head_in_buffer,
)
from .rotate import rotate_face_90_ccw, rotate_face_90_cw, rotate_face_180

__all__ = [
    "FACE_COORDS",
    "FACE_NAMES",
    "clear_outer_layer",
    "extract_face",
    "place_face",
    "require_skin_dimensions",
    "DIRECTIONS",
    "inverse_direction",
    "rotate_head",
    "rotate_head_in_buffer",
    "rotate_face_90_cw",
    "rotate_face_90_ccw",
    "rotate_face_180",
]
