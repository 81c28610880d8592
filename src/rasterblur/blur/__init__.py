"""
RGBA blur filters.

Provides Gaussian, box, motion, radial, lens (bokeh), surface and tilt-shift
blurs as pure functions over ImageBuffer values.

Features:
- Separable two-pass Gaussian and box blur (clamp-to-edge)
- Line-sampled motion blur (out-of-range taps dropped)
- Spin/zoom radial blur (out-of-range taps clamped)
- Polygonal iris lens blur with highlight boost
- Edge-preserving surface blur
- Tilt-shift focus band compositing
- Chainable pipeline interface for composing filters

Example:
    >>> from rasterblur.blur import Blur, apply_gaussian_blur, GaussianBlurSettings
    >>>
    >>> soft = apply_gaussian_blur(image, GaussianBlurSettings(radius=4))
    >>> mini = Blur().tilt_shift(blur=10, focus_y=0.6)(image)
"""

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
    radial_sample_count,
)
from rasterblur.blur.config import (
    DEFAULT_BOX_BLUR,
    DEFAULT_GAUSSIAN_BLUR,
    DEFAULT_LENS_BLUR,
    DEFAULT_MOTION_BLUR,
    DEFAULT_RADIAL_BLUR,
    DEFAULT_SURFACE_BLUR,
    DEFAULT_TILT_SHIFT,
    UI_RANGES,
    BlurSettings,
    BoxBlurSettings,
    GaussianBlurSettings,
    LensBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
)
from rasterblur.blur.pipeline import Blur
from rasterblur.blur.weights import BokehKernel, bokeh_kernel, box_kernel, gaussian_kernel

__all__ = [
    # Pipeline interface
    "Blur",
    # Entry points
    "apply_blur",
    "apply_gaussian_blur",
    "apply_box_blur",
    "apply_motion_blur",
    "apply_radial_blur",
    "apply_lens_blur",
    "apply_surface_blur",
    "apply_tilt_shift",
    "radial_sample_count",
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
    "UI_RANGES",
    # Kernels
    "BokehKernel",
    "bokeh_kernel",
    "box_kernel",
    "gaussian_kernel",
]
