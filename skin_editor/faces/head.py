# skin_editor/faces/head.py
from __future__ import annotations

"""
Logical head rotation: remap all six faces (both layers) so the head appears
turned up, down, left or right.

Exports:
  DIRECTIONS
  inverse_direction(direction)
  read_head_faces(buffer)         -> {name: (inner, outer)}
  write_head_faces(buffer, faces)
  rotate_head_in_buffer(buffer, direction)   mutates buffer
  rotate_head(buffer, direction)             returns a rotated copy

Notes:
  - Every face is read before any is written, so one call never reads a
    block it has already overwritten.
  - Four turns in one direction, or a turn followed by its inverse,
    restore the original bytes.
"""

from typing import Callable, Dict, Mapping, Tuple

from ..core_types import PixelBuffer
from .atlas import (
    FACE_NAMES,
    extract_face,
    inner_origin,
    outer_origin,
    place_face,
    require_skin_dimensions,
)
from .rotate import rotate_face_90_ccw, rotate_face_90_cw, rotate_face_180

FaceLayers = Tuple[PixelBuffer, PixelBuffer]  # (inner, outer)
FaceTransform = Callable[[PixelBuffer], PixelBuffer]

DIRECTIONS: Tuple[str, ...] = ("up", "down", "left", "right")
_INVERSE: Dict[str, str] = {"up": "down", "down": "up", "left": "right", "right": "left"}


def _keep(face: PixelBuffer) -> PixelBuffer:
    return face


# direction -> new face -> (old face, transform applied to both layers)
_TRANSITIONS: Dict[str, Dict[str, Tuple[str, FaceTransform]]] = {
    "up": {
        "top": ("front", rotate_face_180),
        "back": ("top", rotate_face_180),
        "bottom": ("back", rotate_face_180),
        "front": ("bottom", rotate_face_180),
        "left": ("left", rotate_face_90_cw),
        "right": ("right", rotate_face_90_ccw),
    },
    "down": {
        "bottom": ("front", rotate_face_180),
        "back": ("bottom", rotate_face_180),
        "top": ("back", rotate_face_180),
        "front": ("top", rotate_face_180),
        "left": ("left", rotate_face_90_ccw),
        "right": ("right", rotate_face_90_cw),
    },
    "left": {
        "left": ("front", _keep),
        "back": ("left", _keep),
        "right": ("back", _keep),
        "front": ("right", _keep),
        "top": ("top", rotate_face_90_cw),
        "bottom": ("bottom", rotate_face_90_ccw),
    },
    "right": {
        "right": ("front", _keep),
        "back": ("right", _keep),
        "left": ("back", _keep),
        "front": ("left", _keep),
        "top": ("top", rotate_face_90_ccw),
        "bottom": ("bottom", rotate_face_90_cw),
    },
}


def inverse_direction(direction: str) -> str:
    """The turn that undoes `direction`."""
    try:
        return _INVERSE[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None


def read_head_faces(buffer: PixelBuffer) -> Dict[str, FaceLayers]:
    """Copy out the inner and outer block of every head face."""
    require_skin_dimensions(buffer)
    faces: Dict[str, FaceLayers] = {}
    for name in FACE_NAMES:
        faces[name] = (
            extract_face(buffer, *inner_origin(name)),
            extract_face(buffer, *outer_origin(name)),
        )
    return faces


def write_head_faces(buffer: PixelBuffer, faces: Mapping[str, FaceLayers]) -> None:
    """Place every face's inner and outer block back into buffer."""
    require_skin_dimensions(buffer)
    for name in FACE_NAMES:
        inner, outer = faces[name]
        place_face(buffer, *inner_origin(name), inner)
        place_face(buffer, *outer_origin(name), outer)


def rotate_head_in_buffer(buffer: PixelBuffer, direction: str) -> None:
    """Turn the head in `direction`. Mutates buffer; 64x64 only."""
    if direction not in _TRANSITIONS:
        raise ValueError(f"invalid direction {direction!r}; expected one of {DIRECTIONS}")
    require_skin_dimensions(buffer)

    old = read_head_faces(buffer)
    new: Dict[str, FaceLayers] = {}
    for name, (source, transform) in _TRANSITIONS[direction].items():
        inner, outer = old[source]
        new[name] = (transform(inner), transform(outer))
    write_head_faces(buffer, new)


def rotate_head(buffer: PixelBuffer, direction: str) -> PixelBuffer:
    """Non-mutating rotate_head_in_buffer."""
    out = buffer.clone()
    rotate_head_in_buffer(out, direction)
    return out


__all__ = [
    "FaceLayers",
    "DIRECTIONS",
    "inverse_direction",
    "read_head_faces",
    "write_head_faces",
    "rotate_head_in_buffer",
    "rotate_head",
]
