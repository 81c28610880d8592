"""
rasterblur - Raster Blur Filters

CPU-optimized blur and convolution filters for RGBA8 images.

Features:
- Gaussian and box blur via separable two-pass convolution
- Motion blur along an arbitrary angle
- Radial spin and zoom blur around a movable center
- Lens blur with polygonal iris and highlight boost (bokeh)
- Edge-preserving surface blur
- Tilt-shift compositing of sharp and blurred images
- Numba kernels parallelized over rows, deterministic for any thread count
- Unified Blur pipeline for chaining filters

Example - Individual Filters:
    >>> from rasterblur import ImageBuffer, apply_gaussian_blur, GaussianBlurSettings
    >>>
    >>> image = ImageBuffer(width, height, rgba_bytes)
    >>> blurred = apply_gaussian_blur(image, GaussianBlurSettings(radius=4))

Example - Dispatch by Settings:
    >>> from rasterblur import apply_blur, LensBlurSettings
    >>>
    >>> bokeh = apply_blur(image, LensBlurSettings(radius=8, iris_shape=5))

Example - Pipeline:
    >>> from rasterblur import Blur
    >>>
    >>> result = (
    ...     Blur()
    ...     .surface(radius=3, threshold=20)
    ...     .tilt_shift(blur=12, focus_y=0.6, angle=10)
    ... )(image)
"""

__version__ = "0.1.0"

# Filter entry points and settings
from rasterblur.blur.api import (
    BLUR_FUNCTIONS,
    apply_blur,
    apply_box_blur,
    apply_gaussian_blur,
    apply_lens_blur,
    apply_motion_blur,
    apply_radial_blur,
    apply_surface_blur,
    apply_tilt_shift,
)
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

# Pipeline
from rasterblur.blur.pipeline import Blur

# Kernel construction
from rasterblur.blur.weights import BokehKernel, bokeh_kernel, box_kernel, gaussian_kernel

# Data structures
from rasterblur.image import ImageBuffer

# Runtime helpers
from rasterblur.numba_ops import get_numba_status, warmup_kernels

# Protocols
from rasterblur.protocols import BlurStage

__all__ = [
    # Version
    "__version__",
    # Data structures
    "ImageBuffer",
    # Pipeline
    "Blur",
    "BlurStage",
    # Entry points
    "apply_blur",
    "apply_gaussian_blur",
    "apply_box_blur",
    "apply_motion_blur",
    "apply_radial_blur",
    "apply_lens_blur",
    "apply_surface_blur",
    "apply_tilt_shift",
    "BLUR_FUNCTIONS",
    # Settings
    "BlurSettings",
    "GaussianBlurSettings",
    "BoxBlurSettings",
    "MotionBlurSettings",
    "RadialBlurSettings",
    "LensBlurSettings",
    "SurfaceBlurSettings",
    "TiltShiftSettings",
    "DEFAULT_GAUSSIAN_BLUR",
    "DEFAULT_BOX_BLUR",
    "DEFAULT_MOTION_BLUR",
    "DEFAULT_RADIAL_BLUR",
    "DEFAULT_LENS_BLUR",
    "DEFAULT_SURFACE_BLUR",
    "DEFAULT_TILT_SHIFT",
    # Kernel construction
    "gaussian_kernel",
    "box_kernel",
    "bokeh_kernel",
    "BokehKernel",
    # Runtime
    "get_numba_status",
    "warmup_kernels",
]
