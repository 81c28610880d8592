"""
Blur filter API.

One entry point per filter type, each a pure function
``(ImageBuffer, settings) -> ImageBuffer``. Parameters are sanitized by
clamping, never rejected. The returned buffer is always a new allocation and
the input buffer is never modified.

CPU-optimized using NumPy and Numba for maximum performance.
"""

import logging
import math
from collections.abc import Callable
from typing import Any

import numpy as np

from rasterblur.blur.config import (
    DEFAULT_BOX_BLUR,
    DEFAULT_GAUSSIAN_BLUR,
    DEFAULT_LENS_BLUR,
    DEFAULT_MOTION_BLUR,
    DEFAULT_RADIAL_BLUR,
    DEFAULT_SURFACE_BLUR,
    DEFAULT_TILT_SHIFT,
    BlurSettings,
    BoxBlurSettings,
    GaussianBlurSettings,
    LensBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
)

# Import Numba kernels at module level - Numba is required
from rasterblur.blur.kernels import (
    bokeh_blur_numba,
    box_pass_numba,
    convolve_pass_numba,
    motion_blur_numba,
    radial_blur_numba,
    surface_blur_numba,
    tilt_shift_blend_numba,
)
from rasterblur.blur.weights import bokeh_kernel, gaussian_kernel
from rasterblur.constants import RADIAL_FALLBACK_SAMPLES, RADIAL_QUALITY_SAMPLES
from rasterblur.image import ImageBuffer
from rasterblur.utils import sanitize_radius, sanitize_sides

logger = logging.getLogger(__name__)


def _validate_image(image: Any, name: str) -> np.ndarray:
    """Check the input type and return its [H, W, 4] view."""
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"{name} expects an ImageBuffer, got {type(image).__name__}")
    return image.array


def _wrap(array: np.ndarray) -> ImageBuffer:
    return ImageBuffer.from_array(array)


# ============================================================================
# Gaussian / Box Blur (separable)
# ============================================================================


def _separable_pass(src: np.ndarray, weights: np.ndarray, horizontal: bool) -> np.ndarray:
    """Run one weighted pass into a fresh buffer."""
    out = np.empty_like(src)
    convolve_pass_numba(src, weights, horizontal, out)
    return out


def _box_pass(src: np.ndarray, radius: int, horizontal: bool) -> np.ndarray:
    """Run one box pass into a fresh buffer."""
    out = np.empty_like(src)
    box_pass_numba(src, radius, horizontal, out)
    return out


def apply_gaussian_blur(
    image: ImageBuffer, settings: GaussianBlurSettings | None = None
) -> ImageBuffer:
    """
    Apply a separable Gaussian blur.

    The radius is rounded and clamped to >= 1; sigma is radius / 3. The
    horizontal pass result is stored as RGBA8 and then blurred vertically.
    Out-of-range taps reuse the nearest edge pixel.

    Args:
        image: Input image
        settings: Gaussian settings (DEFAULT_GAUSSIAN_BLUR if None)

    Returns:
        New blurred image with the same dimensions

    Example:
        >>> blurred = apply_gaussian_blur(image, GaussianBlurSettings(radius=3))
    """
    settings = DEFAULT_GAUSSIAN_BLUR if settings is None else settings
    src = _validate_image(image, "apply_gaussian_blur")

    radius = sanitize_radius(settings.radius)
    weights = gaussian_kernel(radius)

    horizontal = _separable_pass(src, weights, True)
    result = _separable_pass(horizontal, weights, False)

    logger.debug(f"Gaussian blur: {image.width}x{image.height}, radius={radius}")
    return _wrap(result)


def apply_box_blur(
    image: ImageBuffer, settings: BoxBlurSettings | float | None = None
) -> ImageBuffer:
    """
    Apply a separable box (mean) blur.

    Each pass sums 2r+1 clamp-to-edge taps and divides by the tap count.

    Args:
        image: Input image
        settings: Box settings, or a bare radius (DEFAULT_BOX_BLUR if None)

    Returns:
        New blurred image with the same dimensions

    Example:
        >>> blurred = apply_box_blur(image, 2)
        >>> blurred = apply_box_blur(image, BoxBlurSettings(radius=2))
    """
    if settings is None:
        settings = DEFAULT_BOX_BLUR
    elif isinstance(settings, (int, float)):
        settings = BoxBlurSettings(radius=settings)
    src = _validate_image(image, "apply_box_blur")

    radius = sanitize_radius(settings.radius)

    horizontal = _box_pass(src, radius, True)
    result = _box_pass(horizontal, radius, False)

    logger.debug(f"Box blur: {image.width}x{image.height}, radius={radius}")
    return _wrap(result)


# ============================================================================
# Motion Blur
# ============================================================================


def apply_motion_blur(
    image: ImageBuffer, settings: MotionBlurSettings | None = None
) -> ImageBuffer:
    """
    Apply a directional motion blur.

    Each output pixel averages the taps round(p + dir * i) for
    i in [-samples, samples], where samples = max(1, round(distance)).
    Taps that land outside the image are dropped and the average uses only
    the taps that landed inside, so borders are blurred less.

    Args:
        image: Input image
        settings: Motion settings (DEFAULT_MOTION_BLUR if None)

    Returns:
        New blurred image with the same dimensions
    """
    settings = DEFAULT_MOTION_BLUR if settings is None else settings
    src = _validate_image(image, "apply_motion_blur")

    angle_rad = math.radians(settings.angle)
    samples = sanitize_radius(settings.distance)

    out = np.empty_like(src)
    motion_blur_numba(src, math.cos(angle_rad), math.sin(angle_rad), samples, out)

    logger.debug(
        f"Motion blur: {image.width}x{image.height}, angle={settings.angle}, samples={samples}"
    )
    return _wrap(out)


# ============================================================================
# Radial Blur
# ============================================================================


def radial_sample_count(quality: str) -> int:
    """
    Map a quality name to its tap count.

    Unrecognized names fall back to the "better" count.

    Example:
        >>> radial_sample_count("draft"), radial_sample_count("best")
        (8, 32)
    """
    samples = RADIAL_QUALITY_SAMPLES.get(quality)
    if samples is None:
        logger.warning(
            f"Unrecognized radial blur quality {quality!r}, using {RADIAL_FALLBACK_SAMPLES} samples"
        )
        return RADIAL_FALLBACK_SAMPLES
    return samples


def apply_radial_blur(
    image: ImageBuffer, settings: RadialBlurSettings | None = None
) -> ImageBuffer:
    """
    Apply a radial spin or zoom blur.

    For each pixel the polar offset from the center is resampled at
    t = (i / n - 0.5) * amount / 100 for i in [0, n): spin rotates the
    angle by t, zoom scales the radius by (1 + t). Sample coordinates are
    clamped to the image. Any method other than "spin" zooms.

    Args:
        image: Input image
        settings: Radial settings (DEFAULT_RADIAL_BLUR if None)

    Returns:
        New blurred image with the same dimensions

    Note:
        amount=0 reproduces the input exactly.
    """
    settings = DEFAULT_RADIAL_BLUR if settings is None else settings
    src = _validate_image(image, "apply_radial_blur")

    center_x = image.width * settings.center_x
    center_y = image.height * settings.center_y
    samples = radial_sample_count(settings.quality)
    spin = settings.method == "spin"
    if not spin and settings.method != "zoom":
        logger.warning(f"Unrecognized radial blur method {settings.method!r}, using zoom")

    out = np.empty_like(src)
    radial_blur_numba(
        src,
        center_x,
        center_y,
        settings.amount / 100.0,
        samples,
        spin,
        out,
    )

    logger.debug(
        f"Radial blur: {image.width}x{image.height}, method={'spin' if spin else 'zoom'}, "
        f"samples={samples}, center=({center_x:.1f}, {center_y:.1f})"
    )
    return _wrap(out)


# ============================================================================
# Lens Blur
# ============================================================================


def apply_lens_blur(image: ImageBuffer, settings: LensBlurSettings | None = None) -> ImageBuffer:
    """
    Apply a lens (bokeh) blur with a polygonal iris.

    Builds a regular-polygon kernel of max(3, round(iris_shape)) sides
    rotated by iris_rotation, then convolves with clamp-to-edge sampling.
    Taps brighter than highlight_threshold get extra weight scaled by
    highlight_brightness.

    Args:
        image: Input image
        settings: Lens settings (DEFAULT_LENS_BLUR if None)

    Returns:
        New blurred image with the same dimensions

    Note:
        iris_curvature is accepted but has no numerical effect.
    """
    settings = DEFAULT_LENS_BLUR if settings is None else settings
    src = _validate_image(image, "apply_lens_blur")

    radius = sanitize_radius(settings.radius)
    sides = sanitize_sides(settings.iris_shape)
    kernel = bokeh_kernel(radius, sides, settings.iris_rotation)

    out = np.empty_like(src)
    bokeh_blur_numba(
        src,
        kernel.dx,
        kernel.dy,
        kernel.weights,
        float(settings.highlight_brightness),
        float(settings.highlight_threshold),
        out,
    )

    logger.debug(
        f"Lens blur: {image.width}x{image.height}, radius={radius}, sides={sides}, "
        f"taps={len(kernel)}"
    )
    return _wrap(out)


# ============================================================================
# Surface Blur
# ============================================================================


def apply_surface_blur(
    image: ImageBuffer, settings: SurfaceBlurSettings | None = None
) -> ImageBuffer:
    """
    Apply an edge-preserving surface blur.

    Neighbours within the radius are weighted by color similarity to the
    center pixel and by inverse distance. Neighbours whose summed RGB
    difference reaches 3 * threshold do not contribute. With threshold 0 only
    identical colors are averaged.

    Args:
        image: Input image
        settings: Surface settings (DEFAULT_SURFACE_BLUR if None)

    Returns:
        New blurred image with the same dimensions
    """
    settings = DEFAULT_SURFACE_BLUR if settings is None else settings
    src = _validate_image(image, "apply_surface_blur")

    radius = sanitize_radius(settings.radius)

    out = np.empty_like(src)
    surface_blur_numba(src, radius, float(settings.threshold), out)

    logger.debug(
        f"Surface blur: {image.width}x{image.height}, radius={radius}, "
        f"threshold={settings.threshold}"
    )
    return _wrap(out)


# ============================================================================
# Tilt-Shift
# ============================================================================


def apply_tilt_shift(image: ImageBuffer, settings: TiltShiftSettings | None = None) -> ImageBuffer:
    """
    Apply a tilt-shift (miniature) depth-of-field effect.

    Blurs the whole image with a Gaussian of radius ``blur`` and blends it
    over the original by distance from a (possibly tilted) horizontal focus
    band: sharp inside the band, quadratic ease across the transition,
    fully blurred beyond. Alpha is always taken from the original.

    Args:
        image: Input image
        settings: Tilt-shift settings (DEFAULT_TILT_SHIFT if None)

    Returns:
        New composited image with the same dimensions
    """
    settings = DEFAULT_TILT_SHIFT if settings is None else settings
    src = _validate_image(image, "apply_tilt_shift")

    blurred = apply_gaussian_blur(image, GaussianBlurSettings(radius=settings.blur))

    height = image.height
    focus_center = height * settings.focus_y
    focus_half_height = height * settings.focus_height / 2.0
    transition = height * settings.transition_size
    tan_angle = math.tan(math.radians(settings.angle))

    out = np.empty_like(src)
    tilt_shift_blend_numba(
        src,
        blurred.array,
        focus_center,
        focus_half_height,
        transition,
        tan_angle,
        out,
    )

    logger.debug(
        f"Tilt-shift: {image.width}x{height}, focus={focus_center:.1f}+/-{focus_half_height:.1f}, "
        f"transition={transition:.1f}"
    )
    return _wrap(out)


# ============================================================================
# Dispatch
# ============================================================================

BLUR_FUNCTIONS: dict[type, Callable[[ImageBuffer, Any], ImageBuffer]] = {
    GaussianBlurSettings: apply_gaussian_blur,
    BoxBlurSettings: apply_box_blur,
    MotionBlurSettings: apply_motion_blur,
    RadialBlurSettings: apply_radial_blur,
    LensBlurSettings: apply_lens_blur,
    SurfaceBlurSettings: apply_surface_blur,
    TiltShiftSettings: apply_tilt_shift,
}


def apply_blur(image: ImageBuffer, settings: BlurSettings) -> ImageBuffer:
    """
    Apply the filter selected by the type of ``settings``.

    Args:
        image: Input image
        settings: Any blur settings instance

    Returns:
        New filtered image

    Raises:
        TypeError: If settings is not a known blur settings type

    Example:
        >>> result = apply_blur(image, MotionBlurSettings(angle=45, distance=8))
    """
    func = BLUR_FUNCTIONS.get(type(settings))
    if func is None:
        valid = ", ".join(cls.__name__ for cls in BLUR_FUNCTIONS)
        raise TypeError(
            f"Unknown blur settings type: {type(settings).__name__}. Valid types: {valid}"
        )
    return func(image, settings)
