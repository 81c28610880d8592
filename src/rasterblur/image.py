"""
RGBA8 image buffer used as input and output of every blur filter.

The buffer is a thin wrapper around a flat, row-major ``uint8`` array with
four interleaved channels per pixel (R, G, B, A). Filters never resize, so
an output buffer always has the dimensions of its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from rasterblur.constants import CHANNELS


@dataclass(frozen=True, eq=False)
class ImageBuffer:
    """
    Width/height-tagged raster of interleaved RGBA8 samples.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: Flat uint8 array of length width * height * 4 (row-major)

    Example:
        >>> img = ImageBuffer(2, 1, bytes([255, 0, 0, 255, 0, 0, 255, 255]))
        >>> img.pixel(1, 0)
        (0, 0, 255, 255)
    """

    width: int
    height: int
    pixels: np.ndarray = field(repr=False)

    def __post_init__(self):
        """Validate dimensions and normalize pixel storage."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Image dimensions must be non-negative, got {self.width}x{self.height}"
            )

        pixels = self.pixels
        if isinstance(pixels, (bytes, bytearray, memoryview)):
            pixels = np.frombuffer(pixels, dtype=np.uint8)
        pixels = np.ascontiguousarray(pixels, dtype=np.uint8).reshape(-1)

        expected = self.width * self.height * CHANNELS
        if pixels.shape[0] != expected:
            raise ValueError(
                f"pixels length {pixels.shape[0]} doesn't match "
                f"{self.width}x{self.height}x{CHANNELS} = {expected}"
            )

        # Frozen dataclass: bypass __setattr__ for the normalized array
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_array(cls, array: np.ndarray) -> ImageBuffer:
        """
        Wrap an RGBA array of shape [H, W, 4].

        Args:
            array: uint8-compatible array [H, W, 4]

        Returns:
            ImageBuffer sharing memory with ``array`` when it is already
            contiguous uint8
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(f"Expected array (H, W, 4), got shape {array.shape}")
        height, width = array.shape[0], array.shape[1]
        return cls(width, height, array)

    @classmethod
    def blank(
        cls, width: int, height: int, color: tuple[int, int, int, int] = (0, 0, 0, 0)
    ) -> ImageBuffer:
        """Create an image filled with a single RGBA color."""
        array = np.empty((height, width, CHANNELS), dtype=np.uint8)
        array[:, :] = np.asarray(color, dtype=np.uint8)
        return cls.from_array(array)

    @property
    def array(self) -> np.ndarray:
        """View of the pixels as [H, W, 4]."""
        return self.pixels.reshape(self.height, self.width, CHANNELS)

    @property
    def shape(self) -> tuple[int, int]:
        """(width, height) of the image."""
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA value at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        idx = (y * self.width + x) * CHANNELS
        r, g, b, a = self.pixels[idx : idx + CHANNELS]
        return (int(r), int(g), int(b), int(a))

    def copy(self) -> ImageBuffer:
        """Return a deep copy with its own pixel storage."""
        return ImageBuffer(self.width, self.height, self.pixels.copy())

    def to_bytes(self) -> bytes:
        """Serialize pixels to raw RGBA bytes."""
        return self.pixels.tobytes()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        """Number of pixels."""
        return self.width * self.height
