"""
Blur settings for every filter type.

Each filter takes one plain, immutable settings value. The field defaults are
the baseline configuration and are also exposed as named constants
(``DEFAULT_GAUSSIAN_BLUR`` and friends) for callers that need a preset.

Settings are not validated here: out-of-range radii and side counts are
clamped by the filter entry points, and unrecognized ``method``/``quality``
strings fall back to a default behaviour.
"""

from dataclasses import dataclass
from typing import Literal, Union

from rasterblur.constants import (
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
)

RadialMethod = Literal["spin", "zoom"]
RadialQuality = Literal["draft", "better", "best"]


@dataclass(frozen=True)
class GaussianBlurSettings:
    """
    Attributes:
        radius: Kernel half-width in pixels (rounded, clamped >= 1)
    """

    radius: float = DEFAULT_GAUSSIAN_RADIUS


@dataclass(frozen=True)
class BoxBlurSettings:
    """
    Attributes:
        radius: Kernel half-width in pixels (rounded, clamped >= 1)
    """

    radius: float = DEFAULT_BOX_RADIUS


@dataclass(frozen=True)
class MotionBlurSettings:
    """
    Attributes:
        angle: Direction of motion in degrees
        distance: Sample half-span in pixels (rounded, clamped >= 1)
    """

    angle: float = DEFAULT_MOTION_ANGLE
    distance: float = DEFAULT_MOTION_DISTANCE


@dataclass(frozen=True)
class RadialBlurSettings:
    """
    Attributes:
        amount: Strength, 100 = one radian of spin or 100% zoom spread
        method: "spin" rotates around the center, anything else zooms
        quality: "draft" (8 taps), "better" (16) or "best" (32)
        center_x: Horizontal center as a fraction of the width (0 to 1)
        center_y: Vertical center as a fraction of the height (0 to 1)
    """

    amount: float = DEFAULT_RADIAL_AMOUNT
    method: RadialMethod = DEFAULT_RADIAL_METHOD
    quality: RadialQuality = DEFAULT_RADIAL_QUALITY
    center_x: float = DEFAULT_RADIAL_CENTER
    center_y: float = DEFAULT_RADIAL_CENTER


@dataclass(frozen=True)
class LensBlurSettings:
    """
    Attributes:
        radius: Iris radius in pixels (rounded, clamped >= 1)
        iris_shape: Number of iris blades (rounded, clamped >= 3)
        iris_rotation: Iris rotation in degrees
        iris_curvature: Blade curvature (accepted for compatibility, not used)
        highlight_brightness: Highlight boost in percent
        highlight_threshold: Luminance (0-255) above which taps are boosted;
            255 disables the boost
    """

    radius: float = DEFAULT_LENS_RADIUS
    iris_shape: float = DEFAULT_IRIS_SHAPE
    iris_rotation: float = DEFAULT_IRIS_ROTATION
    iris_curvature: float = DEFAULT_IRIS_CURVATURE
    highlight_brightness: float = DEFAULT_HIGHLIGHT_BRIGHTNESS
    highlight_threshold: float = DEFAULT_HIGHLIGHT_THRESHOLD


@dataclass(frozen=True)
class SurfaceBlurSettings:
    """
    Attributes:
        radius: Neighbourhood half-width in pixels (rounded, clamped >= 1)
        threshold: Per-channel color difference at which neighbours stop
            contributing
    """

    radius: float = DEFAULT_SURFACE_RADIUS
    threshold: float = DEFAULT_SURFACE_THRESHOLD


@dataclass(frozen=True)
class TiltShiftSettings:
    """
    Attributes:
        blur: Gaussian radius used outside the focus band
        focus_y: Center of the focus band as a fraction of the height
        focus_height: Height of the sharp band as a fraction of the height
        transition_size: Height of the sharp-to-blurred ramp as a fraction
            of the height
        angle: Tilt of the focus band in degrees
    """

    blur: float = DEFAULT_TILT_BLUR
    focus_y: float = DEFAULT_FOCUS_Y
    focus_height: float = DEFAULT_FOCUS_HEIGHT
    transition_size: float = DEFAULT_TRANSITION_SIZE
    angle: float = DEFAULT_TILT_ANGLE


BlurSettings = Union[
    GaussianBlurSettings,
    BoxBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    LensBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
]

# Baseline configurations
DEFAULT_GAUSSIAN_BLUR = GaussianBlurSettings()
DEFAULT_BOX_BLUR = BoxBlurSettings()
DEFAULT_MOTION_BLUR = MotionBlurSettings()
DEFAULT_RADIAL_BLUR = RadialBlurSettings()
DEFAULT_LENS_BLUR = LensBlurSettings()
DEFAULT_SURFACE_BLUR = SurfaceBlurSettings()
DEFAULT_TILT_SHIFT = TiltShiftSettings()


# Default UI slider ranges for building interfaces
UI_RANGES = {
    "radius": {"min": 1, "max": 100, "step": 1, "default": DEFAULT_GAUSSIAN_RADIUS},
    "motion_angle": {"min": -180.0, "max": 180.0, "step": 1.0, "default": DEFAULT_MOTION_ANGLE},
    "motion_distance": {"min": 1.0, "max": 200.0, "step": 1.0, "default": DEFAULT_MOTION_DISTANCE},
    "radial_amount": {"min": 0.0, "max": 100.0, "step": 1.0, "default": DEFAULT_RADIAL_AMOUNT},
    "radial_center": {"min": 0.0, "max": 1.0, "step": 0.01, "default": DEFAULT_RADIAL_CENTER},
    "lens_radius": {"min": 1, "max": 100, "step": 1, "default": DEFAULT_LENS_RADIUS},
    "iris_shape": {"min": 3, "max": 8, "step": 1, "default": DEFAULT_IRIS_SHAPE},
    "iris_rotation": {"min": 0.0, "max": 360.0, "step": 1.0, "default": DEFAULT_IRIS_ROTATION},
    "highlight_brightness": {
        "min": 0.0,
        "max": 100.0,
        "step": 1.0,
        "default": DEFAULT_HIGHLIGHT_BRIGHTNESS,
    },
    "highlight_threshold": {
        "min": 0.0,
        "max": 255.0,
        "step": 1.0,
        "default": DEFAULT_HIGHLIGHT_THRESHOLD,
    },
    "surface_radius": {"min": 1, "max": 100, "step": 1, "default": DEFAULT_SURFACE_RADIUS},
    "surface_threshold": {"min": 2.0, "max": 255.0, "step": 1.0, "default": DEFAULT_SURFACE_THRESHOLD},
    "tilt_blur": {"min": 1, "max": 100, "step": 1, "default": DEFAULT_TILT_BLUR},
    "focus_y": {"min": 0.0, "max": 1.0, "step": 0.01, "default": DEFAULT_FOCUS_Y},
    "focus_height": {"min": 0.0, "max": 1.0, "step": 0.01, "default": DEFAULT_FOCUS_HEIGHT},
    "transition_size": {"min": 0.0, "max": 1.0, "step": 0.01, "default": DEFAULT_TRANSITION_SIZE},
    "tilt_angle": {"min": -90.0, "max": 90.0, "step": 1.0, "default": DEFAULT_TILT_ANGLE},
}
