"""
Blur: Composable blur pipeline.

This module provides a fluent API for chaining blur filters. Each stage
receives the output of the previous one; the input image is never modified.

Key Features:
- Semantic method names (gaussian, motion, radial, lens, tilt_shift)
- Method chaining for intuitive pipeline construction
- Builder arguments validated up front
- Stages stored as immutable settings values, dispatched through apply_blur
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Self

from rasterblur.blur.api import BLUR_FUNCTIONS, apply_blur
from rasterblur.blur.config import (
    BlurSettings,
    BoxBlurSettings,
    GaussianBlurSettings,
    LensBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
)
from rasterblur.constants import (
    CHANNEL_MAX,
    DEFAULT_BOX_RADIUS,
    DEFAULT_FOCUS_HEIGHT,
    DEFAULT_FOCUS_Y,
    DEFAULT_GAUSSIAN_RADIUS,
    DEFAULT_HIGHLIGHT_BRIGHTNESS,
    DEFAULT_HIGHLIGHT_THRESHOLD,
    DEFAULT_IRIS_CURVATURE,
    DEFAULT_IRIS_ROTATION,
    DEFAULT_IRIS_SHAPE,
    DEFAULT_LENS_RADIUS,
    DEFAULT_MOTION_ANGLE,
    DEFAULT_MOTION_DISTANCE,
    DEFAULT_RADIAL_AMOUNT,
    DEFAULT_RADIAL_CENTER,
    DEFAULT_RADIAL_METHOD,
    DEFAULT_RADIAL_QUALITY,
    DEFAULT_SURFACE_RADIUS,
    DEFAULT_SURFACE_THRESHOLD,
    DEFAULT_TILT_ANGLE,
    DEFAULT_TILT_BLUR,
    DEFAULT_TRANSITION_SIZE,
    RADIAL_METHODS,
    RADIAL_QUALITY_SAMPLES,
)
from rasterblur.image import ImageBuffer
from rasterblur.validators import validate_choices, validate_number, validate_range

logger = logging.getLogger(__name__)


class Blur:
    """
    Composable blur pipeline for RGBA images.

    Supported Operations:
    - gaussian: Separable Gaussian blur
    - box: Separable box blur
    - motion: Directional motion blur
    - radial: Spin or zoom blur around a center
    - lens: Bokeh blur with a polygonal iris
    - surface: Edge-preserving surface blur
    - tilt_shift: Focus-band depth-of-field effect
    - add: Append any prepared settings value

    Example:
        >>> pipeline = (Blur()
        ...     .surface(radius=3, threshold=20)
        ...     .tilt_shift(blur=12, focus_y=0.6)
        ... )
        >>> result = pipeline(image)
    """

    __slots__ = ("_operations",)

    def __init__(self):
        """Initialize an empty blur pipeline."""
        self._operations: list[BlurSettings] = []
        logger.info("[Blur] Pipeline initialized")

    # ========================================================================
    # Builder Methods
    # ========================================================================

    @validate_number("radius")
    def gaussian(self, radius: float = DEFAULT_GAUSSIAN_RADIUS) -> Self:
        """
        Add a Gaussian blur stage.

        Args:
            radius: Kernel half-width in pixels (rounded, clamped >= 1)

        Returns:
            Self for method chaining
        """
        return self.add(GaussianBlurSettings(radius=radius))

    @validate_number("radius")
    def box(self, radius: float = DEFAULT_BOX_RADIUS) -> Self:
        """Add a box blur stage."""
        return self.add(BoxBlurSettings(radius=radius))

    @validate_number("angle")
    @validate_number("distance", 2)
    def motion(
        self, angle: float = DEFAULT_MOTION_ANGLE, distance: float = DEFAULT_MOTION_DISTANCE
    ) -> Self:
        """
        Add a motion blur stage.

        Args:
            angle: Direction of motion in degrees
            distance: Sample half-span in pixels

        Returns:
            Self for method chaining

        Example:
            >>> Blur().motion(angle=30, distance=12)
        """
        return self.add(MotionBlurSettings(angle=angle, distance=distance))

    @validate_number("amount")
    @validate_choices(RADIAL_METHODS, "method", 2)
    @validate_choices(set(RADIAL_QUALITY_SAMPLES), "quality", 3)
    @validate_range(0.0, 1.0, "center_x", 4)
    @validate_range(0.0, 1.0, "center_y", 5)
    def radial(
        self,
        amount: float = DEFAULT_RADIAL_AMOUNT,
        method: str = DEFAULT_RADIAL_METHOD,
        quality: str = DEFAULT_RADIAL_QUALITY,
        center_x: float = DEFAULT_RADIAL_CENTER,
        center_y: float = DEFAULT_RADIAL_CENTER,
    ) -> Self:
        """
        Add a radial (spin or zoom) blur stage.

        Args:
            amount: Blur strength (0 = no change)
            method: "spin" or "zoom"
            quality: "draft", "better" or "best"
            center_x: Horizontal center as a fraction of the width
            center_y: Vertical center as a fraction of the height

        Returns:
            Self for method chaining

        Raises:
            ValueError: If method/quality are unknown or the center is outside [0, 1]
        """
        return self.add(
            RadialBlurSettings(
                amount=amount,
                method=method,
                quality=quality,
                center_x=center_x,
                center_y=center_y,
            )
        )

    @validate_number("radius")
    @validate_number("iris_shape", 2)
    @validate_number("iris_rotation", 3)
    @validate_number("highlight_brightness", 5)
    @validate_range(0.0, CHANNEL_MAX, "highlight_threshold", 6)
    def lens(
        self,
        radius: float = DEFAULT_LENS_RADIUS,
        iris_shape: float = DEFAULT_IRIS_SHAPE,
        iris_rotation: float = DEFAULT_IRIS_ROTATION,
        iris_curvature: float = DEFAULT_IRIS_CURVATURE,
        highlight_brightness: float = DEFAULT_HIGHLIGHT_BRIGHTNESS,
        highlight_threshold: float = DEFAULT_HIGHLIGHT_THRESHOLD,
    ) -> Self:
        """
        Add a lens (bokeh) blur stage.

        Args:
            radius: Iris radius in pixels
            iris_shape: Number of iris blades
            iris_rotation: Iris rotation in degrees
            iris_curvature: Blade curvature (no numerical effect)
            highlight_brightness: Highlight boost in percent
            highlight_threshold: Luminance above which taps are boosted (0-255)

        Returns:
            Self for method chaining
        """
        return self.add(
            LensBlurSettings(
                radius=radius,
                iris_shape=iris_shape,
                iris_rotation=iris_rotation,
                iris_curvature=iris_curvature,
                highlight_brightness=highlight_brightness,
                highlight_threshold=highlight_threshold,
            )
        )

    @validate_number("radius")
    @validate_number("threshold", 2)
    def surface(
        self, radius: float = DEFAULT_SURFACE_RADIUS, threshold: float = DEFAULT_SURFACE_THRESHOLD
    ) -> Self:
        """Add an edge-preserving surface blur stage."""
        return self.add(SurfaceBlurSettings(radius=radius, threshold=threshold))

    @validate_number("blur")
    @validate_range(0.0, 1.0, "focus_y", 2)
    @validate_number("focus_height", 3)
    @validate_number("transition_size", 4)
    @validate_number("angle", 5)
    def tilt_shift(
        self,
        blur: float = DEFAULT_TILT_BLUR,
        focus_y: float = DEFAULT_FOCUS_Y,
        focus_height: float = DEFAULT_FOCUS_HEIGHT,
        transition_size: float = DEFAULT_TRANSITION_SIZE,
        angle: float = DEFAULT_TILT_ANGLE,
    ) -> Self:
        """
        Add a tilt-shift stage.

        Args:
            blur: Gaussian radius outside the focus band
            focus_y: Band center as a fraction of the height
            focus_height: Band height as a fraction of the height
            transition_size: Ramp height as a fraction of the height
            angle: Band tilt in degrees

        Returns:
            Self for method chaining
        """
        return self.add(
            TiltShiftSettings(
                blur=blur,
                focus_y=focus_y,
                focus_height=focus_height,
                transition_size=transition_size,
                angle=angle,
            )
        )

    def add(self, settings: BlurSettings) -> Self:
        """
        Append a prepared settings value as a stage.

        Args:
            settings: Any blur settings instance

        Returns:
            Self for method chaining

        Raises:
            TypeError: If settings is not a known blur settings type
        """
        if type(settings) not in BLUR_FUNCTIONS:
            raise TypeError(f"Unknown blur settings type: {type(settings).__name__}")
        self._operations.append(settings)
        logger.debug("[Blur] Stage added: %s", settings)
        return self

    # ========================================================================
    # Execution
    # ========================================================================

    @property
    def operations(self) -> tuple[BlurSettings, ...]:
        """Stages in execution order."""
        return tuple(self._operations)

    def apply(self, image: ImageBuffer) -> ImageBuffer:
        """
        Run every stage in order.

        Args:
            image: Input image (not modified)

        Returns:
            New image; a copy of the input when the pipeline is empty
        """
        if not self._operations:
            return image.copy()

        result = image
        for settings in self._operations:
            logger.debug("[Blur] Applying %s", type(settings).__name__)
            result = apply_blur(result, settings)

        logger.info(
            "[Blur] Completed %d stages on %dx%d image",
            len(self._operations),
            image.width,
            image.height,
        )
        return result

    def __call__(self, image: ImageBuffer) -> ImageBuffer:
        """Apply the pipeline when called as a function."""
        return self.apply(image)

    def reset(self) -> Self:
        """
        Remove all stages.

        Returns:
            Self for chaining
        """
        self._operations.clear()
        logger.debug("[Blur] Reset")
        return self

    def copy(self) -> Self:
        """
        Create an independent copy of this pipeline.

        Example:
            >>> base = Blur().gaussian(3)
            >>> variant = base.copy().motion(angle=90)  # base is unchanged
        """
        return deepcopy(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        new = type(self)()
        # Settings are frozen, so sharing them is safe
        new._operations = list(self._operations)
        return new

    def __len__(self) -> int:
        """Number of stages in the pipeline."""
        return len(self._operations)

    def __repr__(self) -> str:
        """String representation of the pipeline."""
        if not self._operations:
            return "Blur(empty)"
        names = ", ".join(type(op).__name__.removesuffix("Settings") for op in self._operations)
        return f"Blur({names})"
