"""
Kernel construction for the convolution filters.

Builds normalized 1D weights for the separable Gaussian and box blurs, and
the 2D polygonal iris kernel used by the lens (bokeh) blur.
"""

import math
from dataclasses import dataclass

import numpy as np

from rasterblur.constants import GAUSSIAN_SIGMA_DIVISOR, POLYGON_COS_EPSILON


def gaussian_kernel(radius: int) -> np.ndarray:
    """
    Build a normalized 1D Gaussian kernel.

    Uses ``sigma = radius / 3`` so the kernel covers three standard
    deviations on each side. The radius is expected to be already clamped
    to >= 1 by the caller.

    Args:
        radius: Kernel half-width in pixels

    Returns:
        float64 weights [2 * radius + 1], symmetric, summing to 1.0

    Example:
        >>> w = gaussian_kernel(2)
        >>> w.shape, round(float(w.sum()), 12)
        ((5,), 1.0)
    """
    sigma = radius / GAUSSIAN_SIGMA_DIVISOR
    two_sigma_sq = 2.0 * sigma * sigma

    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    weights = np.exp(-(offsets * offsets) / two_sigma_sq)
    return weights / weights.sum()


def box_kernel(radius: int) -> np.ndarray:
    """Build a flat 1D kernel of ``2 * radius + 1`` equal weights."""
    size = 2 * radius + 1
    return np.full(size, 1.0 / size, dtype=np.float64)


@dataclass(frozen=True, eq=False)
class BokehKernel:
    """
    Polygonal iris kernel as parallel arrays of taps.

    Attributes:
        dx: Horizontal tap offsets [K] (int32)
        dy: Vertical tap offsets [K] (int32)
        weights: Tap weights [K] (float64), uniform 1/K
        radius: Iris radius the kernel was built for
        sides: Polygon side count the kernel was built for
    """

    dx: np.ndarray
    dy: np.ndarray
    weights: np.ndarray
    radius: int
    sides: int

    def __len__(self) -> int:
        return int(self.weights.shape[0])

    def taps(self) -> list[tuple[int, int, float]]:
        """Return the kernel as a list of (dx, dy, weight) tuples."""
        return [
            (int(x), int(y), float(w))
            for x, y, w in zip(self.dx, self.dy, self.weights, strict=True)
        ]


def bokeh_kernel(radius: int, sides: int, rotation: float) -> BokehKernel:
    """
    Build a regular-polygon iris kernel.

    Every integer offset within the (2r+1)^2 square is rotated by the iris
    rotation and kept when its distance from the origin lies inside the
    polygon's radius at that angle. Kept offsets share a uniform weight.
    If no offset passes, the kernel degrades to the single center tap.

    Args:
        radius: Iris radius in pixels (already clamped >= 1)
        sides: Number of polygon sides (already clamped >= 3)
        rotation: Iris rotation in degrees

    Returns:
        BokehKernel with at least one tap
    """
    rot_rad = math.radians(rotation)
    cos_r = math.cos(rot_rad)
    sin_r = math.sin(rot_rad)

    ys, xs = np.mgrid[-radius : radius + 1, -radius : radius + 1]
    ys = ys.ravel()
    xs = xs.ravel()

    rx = xs * cos_r - ys * sin_r
    ry = xs * sin_r + ys * cos_r

    angle = np.arctan2(ry, rx)
    angle_step = 2.0 * math.pi / sides
    # np.fmod keeps the sign of the dividend (negative angles stay negative)
    cos_value = np.cos(np.fmod(angle, angle_step) - angle_step / 2.0)

    polygon_radius = np.full(cos_value.shape, float(radius))
    usable = np.abs(cos_value) > POLYGON_COS_EPSILON
    polygon_radius[usable] = radius / cos_value[usable]

    dist = np.sqrt(rx * rx + ry * ry)
    inside = dist <= np.abs(polygon_radius)

    if not inside.any():
        return BokehKernel(
            dx=np.zeros(1, dtype=np.int32),
            dy=np.zeros(1, dtype=np.int32),
            weights=np.ones(1, dtype=np.float64),
            radius=radius,
            sides=sides,
        )

    count = int(inside.sum())
    return BokehKernel(
        dx=xs[inside].astype(np.int32),
        dy=ys[inside].astype(np.int32),
        weights=np.full(count, 1.0 / count, dtype=np.float64),
        radius=radius,
        sides=sides,
    )
