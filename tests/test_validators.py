"""
Tests for validation decorators.
"""

import pytest

from rasterblur.validators import validate_choices, validate_number, validate_range


class Target:
    """Minimal class with decorated methods."""

    @validate_range(0.0, 1.0, "position")
    def place(self, position=0.5):
        return position

    @validate_range(0.0, 255.0, "threshold", 2)
    def cut(self, level=1, threshold=255):
        return threshold

    @validate_number("size")
    def grow(self, size=1):
        return size

    @validate_choices({"a", "b"}, "mode")
    def pick(self, mode="a"):
        return mode


class TestValidateRange:
    """Test range checking."""

    def test_inside(self):
        """Test boundaries are inclusive."""
        target = Target()
        assert target.place(0.0) == 0.0
        assert target.place(position=1.0) == 1.0

    def test_missing_uses_default(self):
        """Test omitted arguments fall through to the function default."""
        assert Target().place() == 0.5

    def test_outside(self):
        """Test values outside the range raise ValueError."""
        with pytest.raises(ValueError, match=r"position=1.5 is outside valid range"):
            Target().place(1.5)

    def test_threshold_suggestion(self):
        """Test threshold errors suggest how to disable the boost."""
        with pytest.raises(ValueError, match="255 to disable"):
            Target().cut(1, 400)

    def test_wrong_type(self):
        """Test non-numbers and bools raise TypeError."""
        with pytest.raises(TypeError, match="must be a number"):
            Target().place("0.5")
        with pytest.raises(TypeError, match="must be a number"):
            Target().place(True)

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the method name."""
        assert Target.place.__name__ == "place"


class TestValidateNumber:
    """Test number checking."""

    def test_accepts_int_and_float(self):
        """Test ints and floats pass through."""
        assert Target().grow(3) == 3
        assert Target().grow(size=2.5) == 2.5

    def test_rejects_other(self):
        """Test strings, None and bools raise TypeError."""
        for value in ("3", None, False):
            with pytest.raises(TypeError):
                Target().grow(value)


class TestValidateChoices:
    """Test choice checking."""

    def test_valid(self):
        """Test listed choices pass through."""
        assert Target().pick("b") == "b"

    def test_invalid(self):
        """Test unlisted choices list the valid options."""
        with pytest.raises(ValueError, match="Valid options are: a, b"):
            Target().pick(mode="c")
