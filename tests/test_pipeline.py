"""Tests for the Blur pipeline (chaining blur filters)."""

import numpy as np
import pytest

from rasterblur import (
    Blur,
    BlurStage,
    GaussianBlurSettings,
    ImageBuffer,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
    apply_gaussian_blur,
    apply_motion_blur,
    apply_surface_blur,
    apply_tilt_shift,
)


@pytest.fixture
def sample_image():
    """24x16 image with random RGBA content."""
    rng = np.random.default_rng(42)
    return ImageBuffer.from_array(rng.integers(0, 256, (16, 24, 4), dtype=np.uint8))


class TestPipeline:
    """Test Blur pipeline functionality."""

    def test_empty_pipeline(self, sample_image):
        """Test empty pipeline returns an unchanged copy."""
        pipeline = Blur()

        result = pipeline(sample_image)

        assert len(pipeline) == 0
        assert result == sample_image
        assert result is not sample_image
        assert not np.shares_memory(result.pixels, sample_image.pixels)

    def test_single_stage_matches_function(self, sample_image):
        """Test one stage gives the same result as the entry point."""
        result = Blur().gaussian(3)(sample_image)
        expected = apply_gaussian_blur(sample_image, GaussianBlurSettings(radius=3))

        assert result == expected

    def test_chained_stages_run_in_order(self, sample_image):
        """Test stages feed into each other in insertion order."""
        pipeline = Blur().surface(radius=2, threshold=20).motion(angle=45, distance=4).tilt_shift(
            blur=5, focus_y=0.4
        )

        result = pipeline.apply(sample_image)

        expected = apply_surface_blur(sample_image, SurfaceBlurSettings(radius=2, threshold=20))
        expected = apply_motion_blur(expected, MotionBlurSettings(angle=45, distance=4))
        expected = apply_tilt_shift(expected, TiltShiftSettings(blur=5, focus_y=0.4))
        assert result == expected

    def test_order_matters(self, sample_image):
        """Test swapping stages changes the result."""
        a = Blur().motion(angle=0, distance=5).radial(amount=60)(sample_image)
        b = Blur().radial(amount=60).motion(angle=0, distance=5)(sample_image)
        assert a != b

    def test_input_not_modified(self, sample_image):
        """Test the pipeline does not mutate its input."""
        before = sample_image.copy()
        Blur().box(2).lens(radius=3)(sample_image)
        assert sample_image == before

    def test_operations_recorded(self):
        """Test builder methods record settings values."""
        pipeline = Blur().gaussian(2).radial(amount=30, method="zoom", quality="draft")

        assert pipeline.operations == (
            GaussianBlurSettings(radius=2),
            RadialBlurSettings(amount=30, method="zoom", quality="draft"),
        )

    def test_add_settings(self, sample_image):
        """Test add() accepts prepared settings."""
        pipeline = Blur().add(GaussianBlurSettings(radius=2))

        assert len(pipeline) == 1
        assert pipeline(sample_image) == apply_gaussian_blur(
            sample_image, GaussianBlurSettings(radius=2)
        )

    def test_add_rejects_unknown(self):
        """Test add() rejects values that are not blur settings."""
        with pytest.raises(TypeError, match="Unknown blur settings type"):
            Blur().add("gaussian")

    def test_reset(self):
        """Test reset clears all stages."""
        pipeline = Blur().gaussian(2).box(1)
        assert pipeline.reset() is pipeline
        assert len(pipeline) == 0

    def test_copy_independent(self):
        """Test copies do not share the stage list."""
        base = Blur().gaussian(3)
        variant = base.copy().motion(angle=90)

        assert len(base) == 1
        assert len(variant) == 2

    def test_repr(self):
        """Test pipeline string representation."""
        assert repr(Blur()) == "Blur(empty)"
        assert repr(Blur().gaussian(2).tilt_shift()) == "Blur(GaussianBlur, TiltShift)"

    def test_is_blur_stage(self):
        """Test the pipeline satisfies the BlurStage protocol."""
        assert isinstance(Blur(), BlurStage)


class TestPipelineValidation:
    """Test builder argument validation."""

    def test_invalid_method(self):
        """Test unknown radial methods are rejected by the builder."""
        with pytest.raises(ValueError, match="method"):
            Blur().radial(amount=10, method="twirl")

    def test_invalid_quality(self):
        """Test unknown radial qualities are rejected by the builder."""
        with pytest.raises(ValueError, match="quality"):
            Blur().radial(quality="ultra")

    def test_center_out_of_range(self):
        """Test radial centers must lie in [0, 1]."""
        with pytest.raises(ValueError, match="center_x"):
            Blur().radial(center_x=1.5)
        with pytest.raises(ValueError, match="center_y"):
            Blur().radial(10, "spin", "best", 0.5, -0.1)

    def test_focus_out_of_range(self):
        """Test tilt-shift focus must lie in [0, 1]."""
        with pytest.raises(ValueError, match="focus_y"):
            Blur().tilt_shift(focus_y=2.0)

    def test_threshold_out_of_range(self):
        """Test highlight threshold must lie in [0, 255]."""
        with pytest.raises(ValueError, match="highlight_threshold"):
            Blur().lens(highlight_threshold=300)

    def test_non_numeric(self):
        """Test non-numeric arguments raise TypeError."""
        with pytest.raises(TypeError, match="radius"):
            Blur().gaussian("5")
        with pytest.raises(TypeError, match="distance"):
            Blur().motion(0, None)
        with pytest.raises(TypeError, match="radius"):
            Blur().box(True)

    def test_failed_validation_adds_nothing(self):
        """Test a rejected stage leaves the pipeline unchanged."""
        pipeline = Blur().gaussian(2)
        with pytest.raises(ValueError):
            pipeline.radial(method="twirl")
        assert len(pipeline) == 1
