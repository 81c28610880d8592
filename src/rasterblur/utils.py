"""
Utility functions for parameter sanitation.

Filter parameters are never rejected by the entry points; they are rounded
and clamped into the range the kernels expect.
"""

import math

from rasterblur.constants import MIN_IRIS_SIDES, MIN_RADIUS


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded towards +infinity.

    Python's built-in ``round`` uses banker's rounding; pixel coordinates and
    radii use this rule instead so that 2.5 -> 3 and -2.5 -> -2. The numba
    kernels use the compiled twin ``rasterblur.blur.kernels.round_half_up``.

    Example:
        >>> round_half_up(2.5), round_half_up(-2.5), round_half_up(0.49)
        (3, -2, 0)
    """
    return math.floor(value + 0.5)


def sanitize_radius(value: float) -> int:
    """
    Clamp a radius or sample span to an integer >= 1.

    Example:
        >>> sanitize_radius(0.2), sanitize_radius(4.5)
        (1, 5)
    """
    return max(MIN_RADIUS, round_half_up(value))


def sanitize_sides(value: float) -> int:
    """Clamp an iris side count to an integer >= 3."""
    return max(MIN_IRIS_SIDES, round_half_up(value))
