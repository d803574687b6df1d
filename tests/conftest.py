"""Shared fixtures and buffer builders."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from skin_editor.core_types import PixelBuffer


def solid(width: int, height: int, rgba: tuple[int, int, int, int]) -> PixelBuffer:
    return PixelBuffer.filled(width, height, rgba)


def coordinate_pattern(width: int, height: int) -> PixelBuffer:
    """Every pixel encodes its own position: (x, y, x ^ y, 255)."""
    ys, xs = np.mgrid[0:height, 0:width]
    data = np.stack(
        [xs, ys, np.bitwise_xor(xs, ys), np.full_like(xs, 255)], axis=-1
    ).astype(np.uint8)
    return PixelBuffer(data)


def random_buffer(width: int, height: int, seed: int = 7) -> PixelBuffer:
    """Random colours with roughly a quarter of the pixels fully transparent."""
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    data[..., 3] = np.where(rng.random((height, width)) < 0.25, 0, data[..., 3])
    return PixelBuffer(data)


@pytest.fixture
def random_skin() -> PixelBuffer:
    return random_buffer(64, 64)


@pytest.fixture
def patterned_skin() -> PixelBuffer:
    return coordinate_pattern(64, 64)


@pytest.fixture
def red_skin() -> PixelBuffer:
    return solid(64, 64, (255, 0, 0, 255))


@pytest.fixture
def skin_png(tmp_path: Path) -> Path:
    path = tmp_path / "steve.png"
    Image.fromarray(random_buffer(64, 64, seed=3).data).save(path)
    return path
