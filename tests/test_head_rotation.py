"""Tests for whole-head rotation."""

from __future__ import annotations

import numpy as np
import pytest

from conftest import random_buffer
from skin_editor.core_types import PixelBuffer
from skin_editor.errors import InvalidDimensionError
from skin_editor.faces import (
    DIRECTIONS,
    FACE_COORDS,
    extract_face,
    inverse_direction,
    rotate_face_90_ccw,
    rotate_face_90_cw,
    rotate_face_180,
    rotate_head,
    rotate_head_in_buffer,
)


def _layers(buf: PixelBuffer, name: str) -> tuple[PixelBuffer, PixelBuffer]:
    ix, iy, ox, oy = FACE_COORDS[name]
    return extract_face(buf, ix, iy), extract_face(buf, ox, oy)


def _face_mask() -> np.ndarray:
    mask = np.zeros((64, 64), dtype=bool)
    for ix, iy, ox, oy in FACE_COORDS.values():
        mask[iy : iy + 8, ix : ix + 8] = True
        mask[oy : oy + 8, ox : ox + 8] = True
    return mask


class TestTransitions:
    def test_left(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, "left")
        for new, old in [("left", "front"), ("back", "left"), ("right", "back"), ("front", "right")]:
            assert _layers(random_skin, new) == _layers(before, old)
        for layer_new, layer_old in zip(_layers(random_skin, "top"), _layers(before, "top")):
            assert layer_new == rotate_face_90_cw(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "bottom"), _layers(before, "bottom")):
            assert layer_new == rotate_face_90_ccw(layer_old)

    def test_right(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, "right")
        for new, old in [("right", "front"), ("back", "right"), ("left", "back"), ("front", "left")]:
            assert _layers(random_skin, new) == _layers(before, old)
        for layer_new, layer_old in zip(_layers(random_skin, "top"), _layers(before, "top")):
            assert layer_new == rotate_face_90_ccw(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "bottom"), _layers(before, "bottom")):
            assert layer_new == rotate_face_90_cw(layer_old)

    def test_up(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, "up")
        for new, old in [("top", "front"), ("back", "top"), ("bottom", "back"), ("front", "bottom")]:
            for layer_new, layer_old in zip(_layers(random_skin, new), _layers(before, old)):
                assert layer_new == rotate_face_180(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "left"), _layers(before, "left")):
            assert layer_new == rotate_face_90_cw(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "right"), _layers(before, "right")):
            assert layer_new == rotate_face_90_ccw(layer_old)

    def test_down(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, "down")
        for new, old in [("bottom", "front"), ("back", "bottom"), ("top", "back"), ("front", "top")]:
            for layer_new, layer_old in zip(_layers(random_skin, new), _layers(before, old)):
                assert layer_new == rotate_face_180(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "left"), _layers(before, "left")):
            assert layer_new == rotate_face_90_ccw(layer_old)
        for layer_new, layer_old in zip(_layers(random_skin, "right"), _layers(before, "right")):
            assert layer_new == rotate_face_90_cw(layer_old)

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_pixels_outside_head_faces_untouched(self, random_skin: PixelBuffer, direction: str) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, direction)
        outside = ~_face_mask()
        np.testing.assert_array_equal(random_skin.data[outside], before.data[outside])


class TestClosure:
    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_four_turns_restore_original(self, random_skin: PixelBuffer, direction: str) -> None:
        before = random_skin.clone()
        for _ in range(4):
            rotate_head_in_buffer(random_skin, direction)
        assert random_skin == before

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_inverse_undoes_turn(self, random_skin: PixelBuffer, direction: str) -> None:
        before = random_skin.clone()
        rotate_head_in_buffer(random_skin, direction)
        assert random_skin != before
        rotate_head_in_buffer(random_skin, inverse_direction(direction))
        assert random_skin == before

    def test_up_up_down_down(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        for direction in ("up", "up", "down", "down"):
            rotate_head_in_buffer(random_skin, direction)
        assert random_skin == before


class TestErrors:
    def test_invalid_direction_leaves_buffer(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        with pytest.raises(ValueError):
            rotate_head_in_buffer(random_skin, "sideways")
        assert random_skin == before

    def test_wrong_size_rejected_before_mutation(self) -> None:
        buf = random_buffer(64, 32)
        before = buf.clone()
        with pytest.raises(InvalidDimensionError):
            rotate_head_in_buffer(buf, "left")
        assert buf == before

    def test_inverse_direction_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            inverse_direction("forward")


class TestRotateHeadCopy:
    def test_returns_rotated_copy(self, random_skin: PixelBuffer) -> None:
        before = random_skin.clone()
        out = rotate_head(random_skin, "up")
        assert random_skin == before
        expected = before.clone()
        rotate_head_in_buffer(expected, "up")
        assert out == expected
        assert not np.shares_memory(out.data, random_skin.data)
