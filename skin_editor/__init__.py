# skin_editor/__init__.py
"""
skin_editor package.

Purpose:
  Colour adjustment, hue analysis and head re-orientation for 64x64 skin
  textures held as RGBA pixel buffers. See skin_editor.cli for the command line.

Public API:
  PixelBuffer     : RGBA buffer value object (get/set/clone).
  FilterSettings  : adjustment parameters for apply_filters.
  colour_convert  : RGB <-> HSL (scalar and vectorised).
  analysis        : average_hue, extract_histogram.
  hue_match       : find_best_hue_shift.
  faces           : face atlas, face rotations, head rotation.
  filters         : apply_filters.
  image_io        : Pillow load/save helpers.

Quick start:
  from skin_editor import PixelBuffer, FilterSettings, apply_filters
  from skin_editor.faces import rotate_head_in_buffer
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import analysis
from . import hue_match
from . import faces
from . import filters
from . import image_io

from .core_types import FilterSettings, Histogram, PixelBuffer  # noqa: E402,F401
from .errors import BoundsError, InvalidDimensionError  # noqa: E402,F401
from .colour_convert import hsl_to_rgb, rgb_to_hsl  # noqa: E402,F401
from .analysis import average_hue, extract_histogram  # noqa: E402,F401
from .hue_match import find_best_hue_shift  # noqa: E402,F401
from .filters import apply_filters  # noqa: E402,F401
from .faces import (  # noqa: E402,F401
    clear_outer_layer,
    extract_face,
    place_face,
    rotate_face_90_ccw,
    rotate_face_90_cw,
    rotate_face_180,
    rotate_head_in_buffer,
)

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "analysis",
    "hue_match",
    "faces",
    "filters",
    "image_io",
    "PixelBuffer",
    "FilterSettings",
    "Histogram",
    "BoundsError",
    "InvalidDimensionError",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "average_hue",
    "extract_histogram",
    "find_best_hue_shift",
    "apply_filters",
    "extract_face",
    "place_face",
    "clear_outer_layer",
    "rotate_face_90_cw",
    "rotate_face_90_ccw",
    "rotate_face_180",
    "rotate_head_in_buffer",
]
