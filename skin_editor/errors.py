# skin_editor/errors.py
from __future__ import annotations

"""
Error kinds raised by buffer, atlas and rotation operations.

Zero-count histograms are not errors; analysis functions return 0 instead.
"""


class BoundsError(IndexError):
    """A coordinate or 8x8 region lies outside the buffer."""

    def __init__(self, x: int, y: int, width: int, height: int, what: str = "pixel"):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"{what} ({x}, {y}) outside {width}x{height} buffer")


class InvalidDimensionError(ValueError):
    """A buffer does not have the size an operation requires."""

    def __init__(self, width: int, height: int, expected: tuple[int, int]):
        self.width = width
        self.height = height
        self.expected = expected
        super().__init__(
            f"expected {expected[0]}x{expected[1]} buffer, got {width}x{height}"
        )


__all__ = ["BoundsError", "InvalidDimensionError"]
