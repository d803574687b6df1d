# skin_editor/image_io.py
from __future__ import annotations

import base64
import binascii
import io
import json
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import PixelBuffer

"""
Image I/O helpers (RGBA in sRGB) and texture token decoding.

Decoded images keep their native size; callers check for 64x64 before using
atlas or head operations. Nothing here fetches over the network.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]

_DATA_URI_PREFIX = "data:"


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def pixel_buffer_from_image(im: Image.Image) -> PixelBuffer:
    """Wrap a Pillow image as an RGBA PixelBuffer (copied)."""
    rgba = _convert_to_srgb_rgba(im)
    return PixelBuffer(np.array(rgba, dtype=np.uint8))


def pixel_buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer.data.copy())


def load_pixel_buffer(path: Path) -> PixelBuffer:
    with Image.open(path) as im:
        im.load()
        return pixel_buffer_from_image(im)


def load_pixel_buffer_from_bytes(raw: bytes) -> PixelBuffer:
    with Image.open(io.BytesIO(raw)) as im:
        im.load()
        return pixel_buffer_from_image(im)


def load_pixel_buffer_from_base64(text: str) -> PixelBuffer:
    """Decode a 'data:image/...;base64,' URI or bare base64 image bytes."""
    payload = text.strip()
    if payload.startswith(_DATA_URI_PREFIX):
        _header, sep, payload = payload.partition(",")
        if not sep:
            raise ValueError("malformed data URI")
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 image data: {e}") from e
    try:
        return load_pixel_buffer_from_bytes(raw)
    except UnidentifiedImageError as e:
        raise ValueError("base64 data is not a readable image") from e


def save_pixel_buffer(path: Path, buffer: PixelBuffer) -> Path:
    """Write buffer as PNG; a non-.png suffix is replaced. Returns the path used."""
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    pixel_buffer_to_image(buffer).save(path, format="PNG")
    return path


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


def texture_url_from_value(value: str) -> str:
    """
    Skin URL from a base64 texture property value, i.e. the decoded JSON's
    textures.SKIN.url.
    """
    try:
        data = json.loads(base64.b64decode(value.strip(), validate=True))
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"not a texture value: {e}") from e
    url = None
    textures = data.get("textures") if isinstance(data, dict) else None
    skin = textures.get("SKIN") if isinstance(textures, dict) else None
    if isinstance(skin, dict):
        url = skin.get("url")
    if not isinstance(url, str) or not url:
        raise ValueError("texture value has no textures.SKIN.url")
    return url


__all__ = [
    "pixel_buffer_from_image",
    "pixel_buffer_to_image",
    "load_pixel_buffer",
    "load_pixel_buffer_from_bytes",
    "load_pixel_buffer_from_base64",
    "save_pixel_buffer",
    "is_image_file",
    "texture_url_from_value",
]
