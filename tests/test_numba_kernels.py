"""
Tests for Numba-optimized blur kernels.

Exercises the JIT kernels directly on small hand-checked inputs.
"""

import numpy as np
import pytest

from rasterblur import utils
from rasterblur.blur import kernels
from rasterblur.blur.weights import box_kernel
from rasterblur.numba_ops import get_numba_status, warmup_kernels


def _row(*values):
    """Build a 1xN image whose RGB channels equal the values and alpha is 255."""
    array = np.zeros((1, len(values), 4), dtype=np.uint8)
    for x, value in enumerate(values):
        array[0, x, :3] = value
        array[0, x, 3] = 255
    return array


class TestStoreU8:
    """Test the channel store conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0),
            (0.5, 0),
            (1.5, 2),
            (2.5, 2),
            (3.5, 4),
            (127.4, 127),
            (127.6, 128),
            (254.5, 254),
            (254.9, 255),
            (-3.0, 0),
            (300.0, 255),
        ],
    )
    def test_clamp_and_round_half_even(self, value, expected):
        """Test clamping to [0, 255] with round-half-to-even."""
        assert kernels.store_u8(value) == expected

    def test_nan_stores_zero(self):
        """Test NaN stores as 0."""
        assert kernels.store_u8(float("nan")) == 0

    @pytest.mark.parametrize("value,expected", [(2.5, 3), (-2.5, -2), (0.49, 0), (-0.51, -1)])
    def test_round_half_up(self, value, expected):
        """Test coordinate rounding sends halves towards +infinity."""
        assert kernels.round_half_up(value) == expected

    @pytest.mark.parametrize("value", [-3.5, -1.5, -0.5, 0.5, 1.5, 7.499999999999999, 12.5, 254.5])
    def test_round_half_up_matches_python_helper(self, value):
        """Test the compiled and pure-Python rounding helpers agree."""
        assert kernels.round_half_up(value) == utils.round_half_up(value)


class TestSeparablePasses:
    """Test the 1D convolution passes."""

    def test_convolve_horizontal(self):
        """Test a radius-1 flat kernel with clamp-to-edge sampling."""
        src = _row(0, 0, 90)
        out = np.empty_like(src)

        kernels.convolve_pass_numba(src, box_kernel(1), True, out)

        np.testing.assert_array_equal(out[0, :, 0], [0, 30, 60])
        np.testing.assert_array_equal(out[0, :, 3], [255, 255, 255])

    def test_convolve_vertical(self):
        """Test the vertical pass is the transpose of the horizontal pass."""
        src = _row(0, 0, 90).transpose(1, 0, 2).copy()
        out = np.empty_like(src)

        kernels.convolve_pass_numba(src, box_kernel(1), False, out)

        np.testing.assert_array_equal(out[:, 0, 0], [0, 30, 60])

    def test_box_pass_matches_mean(self):
        """Test the box pass divides the tap sum by the tap count."""
        src = _row(0, 30, 60, 90, 120)
        out = np.empty_like(src)

        kernels.box_pass_numba(src, 1, True, out)

        # Edges reuse the border pixel: (0+0+30)/3 = 10, (90+120+120)/3 = 110
        np.testing.assert_array_equal(out[0, :, 0], [10, 30, 60, 90, 110])


class TestMotionKernel:
    """Test the line-sampling kernel."""

    def test_border_taps_dropped(self):
        """Test out-of-range taps are excluded from the average."""
        src = _row(0, 0, 90)
        out = np.empty_like(src)

        kernels.motion_blur_numba(src, 1.0, 0.0, 1, out)

        # x=0 averages 2 taps, x=1 averages 3, x=2 averages 2
        np.testing.assert_array_equal(out[0, :, 0], [0, 30, 45])

    def test_vertical_direction_on_single_row(self):
        """Test a vertical direction on a one-row image leaves it unchanged."""
        src = _row(10, 50, 200)
        out = np.empty_like(src)

        kernels.motion_blur_numba(src, 0.0, 1.0, 4, out)

        np.testing.assert_array_equal(out, src)


class TestRadialKernel:
    """Test the spin/zoom kernel."""

    @pytest.mark.parametrize("spin", [True, False])
    def test_zero_amount_is_identity(self, spin):
        """Test amount 0 resamples every pixel at its own position."""
        rng = np.random.default_rng(3)
        src = rng.integers(0, 256, (6, 7, 4), dtype=np.uint8)
        out = np.empty_like(src)

        kernels.radial_blur_numba(src, 3.5, 3.0, 0.0, 16, spin, out)

        np.testing.assert_array_equal(out, src)


class TestBokehKernel:
    """Test the iris convolution kernel."""

    def test_threshold_255_disables_boost(self):
        """Test weights are untouched when the threshold is 255."""
        src = _row(0, 255, 0)
        dx = np.array([-1, 0, 1], dtype=np.int32)
        dy = np.zeros(3, dtype=np.int32)
        weights = np.full(3, 1.0 / 3.0)
        out = np.empty_like(src)

        kernels.bokeh_blur_numba(src, dx, dy, weights, 500.0, 255.0, out)

        assert out[0, 1, 0] == 85

    def test_bright_taps_boosted(self):
        """Test taps above the threshold pull the average up."""
        src = _row(0, 255, 0)
        dx = np.array([-1, 0, 1], dtype=np.int32)
        dy = np.zeros(3, dtype=np.int32)
        weights = np.full(3, 1.0 / 3.0)
        out = np.empty_like(src)

        kernels.bokeh_blur_numba(src, dx, dy, weights, 200.0, 0.0, out)

        # Center tap weight triples: 255 * 3 / 5
        assert out[0, 1, 0] == 153
        assert out[0, 1, 3] == 255


class TestSurfaceKernel:
    """Test the edge-preserving kernel."""

    def test_uniform_image_unchanged(self):
        """Test a flat image is a fixed point."""
        src = np.full((5, 5, 4), 77, dtype=np.uint8)
        out = np.empty_like(src)

        kernels.surface_blur_numba(src, 2, 15.0, out)

        np.testing.assert_array_equal(out, src)

    def test_zero_threshold_counts_exact_matches(self):
        """Test threshold 0 averages only identical colors."""
        src = _row(0, 255, 0, 255)
        out = np.empty_like(src)

        kernels.surface_blur_numba(src, 1, 0.0, out)

        np.testing.assert_array_equal(out, src)


class TestTiltShiftBlend:
    """Test the focus band compositing kernel."""

    def test_inside_band_keeps_sharp(self):
        """Test pixels inside the band copy the sharp image."""
        sharp = np.full((4, 4, 4), 10, dtype=np.uint8)
        blurred = np.full((4, 4, 4), 200, dtype=np.uint8)
        out = np.empty_like(sharp)

        kernels.tilt_shift_blend_numba(sharp, blurred, 2.0, 10.0, 1.0, 0.0, out)

        np.testing.assert_array_equal(out, sharp)

    def test_outside_band_uses_blurred_rgb_and_sharp_alpha(self):
        """Test pixels beyond the transition take blurred RGB but keep alpha."""
        sharp = np.full((4, 4, 4), 10, dtype=np.uint8)
        blurred = np.full((4, 4, 4), 200, dtype=np.uint8)
        out = np.empty_like(sharp)

        kernels.tilt_shift_blend_numba(sharp, blurred, -100.0, 0.5, 1.0, 0.0, out)

        np.testing.assert_array_equal(out[:, :, :3], 200)
        np.testing.assert_array_equal(out[:, :, 3], 10)


class TestNumbaOps:
    """Test runtime helpers."""

    def test_status(self):
        """Test status reports version and threads."""
        status = get_numba_status()

        assert "version" in status
        assert status["num_threads"] >= 1
        assert "threading_layer" in status

    def test_warmup(self):
        """Test warmup compiles every kernel and reports elapsed time."""
        elapsed = warmup_kernels()
        assert elapsed >= 0.0
