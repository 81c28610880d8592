"""
Tests for the RGBA8 ImageBuffer.
"""

import numpy as np
import pytest

from rasterblur import ImageBuffer


@pytest.fixture
def gradient_image():
    """4x3 image with distinct values per pixel."""
    array = np.arange(3 * 4 * 4, dtype=np.uint8).reshape(3, 4, 4)
    return ImageBuffer.from_array(array)


class TestConstruction:
    """Test ImageBuffer construction and normalization."""

    def test_from_bytes(self):
        """Test construction from raw RGBA bytes."""
        img = ImageBuffer(2, 1, bytes([255, 0, 0, 255, 0, 0, 255, 255]))

        assert img.width == 2
        assert img.height == 1
        assert img.pixels.dtype == np.uint8
        assert img.pixels.shape == (8,)
        assert img.pixel(0, 0) == (255, 0, 0, 255)
        assert img.pixel(1, 0) == (0, 0, 255, 255)

    def test_from_bytearray(self):
        """Test construction from a bytearray."""
        img = ImageBuffer(1, 1, bytearray([1, 2, 3, 4]))
        assert img.pixel(0, 0) == (1, 2, 3, 4)

    def test_from_array(self, gradient_image):
        """Test from_array wraps an [H, W, 4] array."""
        assert gradient_image.shape == (4, 3)
        assert gradient_image.array.shape == (3, 4, 4)
        assert gradient_image.pixel(1, 0) == (4, 5, 6, 7)
        assert gradient_image.pixel(0, 1) == (16, 17, 18, 19)

    def test_from_array_wrong_shape(self):
        """Test from_array rejects arrays without 4 channels."""
        with pytest.raises(ValueError, match="Expected array"):
            ImageBuffer.from_array(np.zeros((2, 2, 3), dtype=np.uint8))

        with pytest.raises(ValueError, match="Expected array"):
            ImageBuffer.from_array(np.zeros(16, dtype=np.uint8))

    def test_length_mismatch(self):
        """Test that a pixel length not equal to w*h*4 is rejected."""
        with pytest.raises(ValueError, match="doesn't match"):
            ImageBuffer(2, 2, bytes(15))

    def test_negative_dimensions(self):
        """Test that negative dimensions are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            ImageBuffer(-1, 2, bytes(0))

    def test_empty_image(self):
        """Test that a 0x0 image is valid."""
        img = ImageBuffer(0, 0, b"")
        assert len(img) == 0
        assert img.array.shape == (0, 0, 4)

    def test_blank(self):
        """Test blank fills every pixel with the color."""
        img = ImageBuffer.blank(3, 2, (10, 20, 30, 40))

        assert img.shape == (3, 2)
        for y in range(2):
            for x in range(3):
                assert img.pixel(x, y) == (10, 20, 30, 40)

    def test_frozen(self, gradient_image):
        """Test that fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            gradient_image.width = 10


class TestAccessors:
    """Test pixel access, copying and serialization."""

    def test_pixel_out_of_range(self, gradient_image):
        """Test that pixel() raises for coordinates outside the image."""
        with pytest.raises(IndexError):
            gradient_image.pixel(4, 0)
        with pytest.raises(IndexError):
            gradient_image.pixel(0, -1)

    def test_copy_is_independent(self, gradient_image):
        """Test that copy() owns its storage."""
        clone = gradient_image.copy()

        assert clone == gradient_image
        assert not np.shares_memory(clone.pixels, gradient_image.pixels)

        clone.pixels[0] = 200
        assert gradient_image.pixels[0] == 0

    def test_to_bytes_roundtrip(self, gradient_image):
        """Test to_bytes output rebuilds the same image."""
        data = gradient_image.to_bytes()

        assert isinstance(data, bytes)
        assert len(data) == 4 * 3 * 4
        assert ImageBuffer(4, 3, data) == gradient_image

    def test_equality(self):
        """Test equality compares dimensions and pixels."""
        a = ImageBuffer.blank(2, 2, (1, 1, 1, 1))
        b = ImageBuffer.blank(2, 2, (1, 1, 1, 1))
        c = ImageBuffer.blank(2, 2, (1, 1, 1, 2))
        d = ImageBuffer.blank(4, 1, (1, 1, 1, 1))

        assert a == b
        assert a != c
        assert a != d
        assert a != "not an image"

    def test_len(self, gradient_image):
        """Test len() is the pixel count."""
        assert len(gradient_image) == 12
