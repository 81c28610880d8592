"""
Constants and default values for rasterblur filters.

Centralizes magic numbers and configuration defaults for better maintainability.
"""

from __future__ import annotations

# =============================================================================
# Image Layout
# =============================================================================

CHANNELS = 4  # R, G, B, A interleaved
CHANNEL_MAX = 255.0

# =============================================================================
# Parameter Sanitation
# =============================================================================

MIN_RADIUS = 1  # Radii and sample spans are clamped to at least 1
MIN_IRIS_SIDES = 3  # Smallest polygon an iris can describe

# =============================================================================
# Gaussian / Box Blur
# =============================================================================

DEFAULT_GAUSSIAN_RADIUS = 5
DEFAULT_BOX_RADIUS = 5
GAUSSIAN_SIGMA_DIVISOR = 3.0  # sigma = radius / 3

# =============================================================================
# Motion Blur
# =============================================================================

DEFAULT_MOTION_ANGLE = 0.0  # Degrees
DEFAULT_MOTION_DISTANCE = 10.0

# =============================================================================
# Radial Blur
# =============================================================================

DEFAULT_RADIAL_AMOUNT = 10.0
DEFAULT_RADIAL_METHOD = "spin"
DEFAULT_RADIAL_QUALITY = "better"
DEFAULT_RADIAL_CENTER = 0.5

RADIAL_METHODS = {"spin", "zoom"}
RADIAL_QUALITY_SAMPLES = {"draft": 8, "better": 16, "best": 32}
RADIAL_FALLBACK_SAMPLES = 16  # Unrecognized quality strings

# =============================================================================
# Lens Blur
# =============================================================================

DEFAULT_LENS_RADIUS = 15
DEFAULT_IRIS_SHAPE = 6
DEFAULT_IRIS_ROTATION = 0.0
DEFAULT_IRIS_CURVATURE = 0.0
DEFAULT_HIGHLIGHT_BRIGHTNESS = 0.0
DEFAULT_HIGHLIGHT_THRESHOLD = 255.0  # 255 disables the highlight boost

POLYGON_COS_EPSILON = 0.001  # Below this the polygon radius falls back to the circle

# Rec. 601 luma weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

# =============================================================================
# Surface Blur
# =============================================================================

DEFAULT_SURFACE_RADIUS = 5
DEFAULT_SURFACE_THRESHOLD = 15.0

# =============================================================================
# Tilt-Shift
# =============================================================================

DEFAULT_TILT_BLUR = 15
DEFAULT_FOCUS_Y = 0.5
DEFAULT_FOCUS_HEIGHT = 0.2
DEFAULT_TRANSITION_SIZE = 0.1
DEFAULT_TILT_ANGLE = 0.0
