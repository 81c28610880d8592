"""
Numba-optimized kernels for blur operations.

Provides JIT-compiled per-pixel kernels. Every kernel is parallelized over
rows with prange and writes each output pixel from exactly one iteration,
so results do not depend on the number of threads.

Kernels that derive sample coordinates or blend factors are compiled
without fastmath: their float expressions are evaluated exactly as written,
with no fused multiply-add.

All kernels read RGBA8 images [H, W, 4] and write into a pre-allocated
uint8 output of the same shape. Channel values are stored with clamping
to [0, 255] and round-half-to-even.
"""

import math

import numpy as np
from numba import njit, prange

from rasterblur.constants import LUMA_B, LUMA_G, LUMA_R

# ============================================================================
# Scalar Helpers
# ============================================================================


@njit(cache=True, nogil=True)
def store_u8(value: float) -> int:
    """
    Convert an accumulated channel value to its stored byte.

    Clamps to [0, 255] and rounds exact halves to the nearest even integer.
    NaN stores as 0.
    """
    if not value > 0.0:
        return 0
    if value >= 255.0:
        return 255
    base = math.floor(value)
    frac = value - base
    if frac > 0.5 or (frac == 0.5 and base % 2 == 1):
        base += 1
    return base


@njit(cache=True, nogil=True)
def round_half_up(value: float) -> int:
    """Round to nearest integer, halves towards +infinity (see rasterblur.utils.round_half_up)."""
    return math.floor(value + 0.5)


# ============================================================================
# Separable Convolution (Gaussian, Box)
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def convolve_pass_numba(
    src: np.ndarray,
    weights: np.ndarray,
    horizontal: bool,
    out: np.ndarray,
) -> None:
    """
    One 1D weighted pass with clamp-to-edge sampling.

    Args:
        src: Input image [H, W, 4] uint8
        weights: Kernel weights [2r + 1]
        horizontal: True to convolve along x, False along y
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    radius = (weights.shape[0] - 1) // 2
    step_x = 1 if horizontal else 0
    step_y = 0 if horizontal else 1

    for y in prange(height):
        for x in range(width):
            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0

            for k in range(-radius, radius + 1):
                sx = min(max(x + k * step_x, 0), width - 1)
                sy = min(max(y + k * step_y, 0), height - 1)

                w = weights[k + radius]
                r += src[sy, sx, 0] * w
                g += src[sy, sx, 1] * w
                b += src[sy, sx, 2] * w
                a += src[sy, sx, 3] * w

            out[y, x, 0] = store_u8(r)
            out[y, x, 1] = store_u8(g)
            out[y, x, 2] = store_u8(b)
            out[y, x, 3] = store_u8(a)


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def box_pass_numba(
    src: np.ndarray,
    radius: int,
    horizontal: bool,
    out: np.ndarray,
) -> None:
    """
    One 1D box pass: plain sum of 2r+1 clamped taps divided by the tap count.

    Args:
        src: Input image [H, W, 4] uint8
        radius: Kernel half-width
        horizontal: True to average along x, False along y
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    size = 2 * radius + 1
    step_x = 1 if horizontal else 0
    step_y = 0 if horizontal else 1

    for y in prange(height):
        for x in range(width):
            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0

            for k in range(-radius, radius + 1):
                sx = min(max(x + k * step_x, 0), width - 1)
                sy = min(max(y + k * step_y, 0), height - 1)

                r += src[sy, sx, 0]
                g += src[sy, sx, 1]
                b += src[sy, sx, 2]
                a += src[sy, sx, 3]

            out[y, x, 0] = store_u8(r / size)
            out[y, x, 1] = store_u8(g / size)
            out[y, x, 2] = store_u8(b / size)
            out[y, x, 3] = store_u8(a / size)


# ============================================================================
# Motion Blur
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def motion_blur_numba(
    src: np.ndarray,
    dir_x: float,
    dir_y: float,
    samples: int,
    out: np.ndarray,
) -> None:
    """
    Average taps along a line through each pixel.

    Taps falling outside the image are dropped (not clamped), so border
    pixels average over fewer samples than interior pixels.

    Args:
        src: Input image [H, W, 4] uint8
        dir_x: Unit direction x component (cos angle)
        dir_y: Unit direction y component (sin angle)
        samples: Half-span of the line in taps
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]

    for y in prange(height):
        for x in range(width):
            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0
            count = 0

            for i in range(-samples, samples + 1):
                sx = round_half_up(x + dir_x * i)
                sy = round_half_up(y + dir_y * i)

                if sx >= 0 and sx < width and sy >= 0 and sy < height:
                    r += src[sy, sx, 0]
                    g += src[sy, sx, 1]
                    b += src[sy, sx, 2]
                    a += src[sy, sx, 3]
                    count += 1

            # i == 0 always lands on (x, y), so count >= 1
            out[y, x, 0] = store_u8(r / count)
            out[y, x, 1] = store_u8(g / count)
            out[y, x, 2] = store_u8(b / count)
            out[y, x, 3] = store_u8(a / count)


# ============================================================================
# Radial Blur
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def radial_blur_numba(
    src: np.ndarray,
    center_x: float,
    center_y: float,
    amount: float,
    samples: int,
    spin: bool,
    out: np.ndarray,
) -> None:
    """
    Spin or zoom resampling around a center point.

    Sample coordinates are rounded and clamped to the image bounds.

    Args:
        src: Input image [H, W, 4] uint8
        center_x: Center x in pixels
        center_y: Center y in pixels
        amount: Strength as a fraction (settings amount / 100)
        samples: Number of taps per pixel
        spin: True for angular (spin) blur, False for radial scale (zoom)
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]

    for y in prange(height):
        for x in range(width):
            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0

            dx = x - center_x
            dy = y - center_y
            dist = math.sqrt(dx * dx + dy * dy)
            angle = math.atan2(dy, dx)

            for i in range(samples):
                t = (i / samples - 0.5) * amount

                if spin:
                    new_angle = angle + t
                    sx = round_half_up(center_x + math.cos(new_angle) * dist)
                    sy = round_half_up(center_y + math.sin(new_angle) * dist)
                else:
                    scale = 1.0 + t
                    sx = round_half_up(center_x + dx * scale)
                    sy = round_half_up(center_y + dy * scale)

                sx = min(max(sx, 0), width - 1)
                sy = min(max(sy, 0), height - 1)

                r += src[sy, sx, 0]
                g += src[sy, sx, 1]
                b += src[sy, sx, 2]
                a += src[sy, sx, 3]

            out[y, x, 0] = store_u8(r / samples)
            out[y, x, 1] = store_u8(g / samples)
            out[y, x, 2] = store_u8(b / samples)
            out[y, x, 3] = store_u8(a / samples)


# ============================================================================
# Lens (Bokeh) Blur
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def bokeh_blur_numba(
    src: np.ndarray,
    tap_dx: np.ndarray,
    tap_dy: np.ndarray,
    tap_weights: np.ndarray,
    highlight_brightness: float,
    highlight_threshold: float,
    out: np.ndarray,
) -> None:
    """
    Convolve with an iris kernel, boosting bright taps.

    A tap whose luminance exceeds the threshold (only when the threshold is
    below 255) has its weight multiplied by
    1 + (brightness / 100) * (lum - threshold) / (255 - threshold).
    The boost applies to all four channels, alpha included.

    Args:
        src: Input image [H, W, 4] uint8
        tap_dx: Tap x offsets [K]
        tap_dy: Tap y offsets [K]
        tap_weights: Base tap weights [K]
        highlight_brightness: Boost strength in percent
        highlight_threshold: Luminance threshold (0-255)
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    n_taps = tap_weights.shape[0]

    boost_enabled = highlight_threshold < 255.0
    boost_scale = 0.0
    if boost_enabled:
        boost_scale = (highlight_brightness / 100.0) / (255.0 - highlight_threshold)

    for y in prange(height):
        for x in range(width):
            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0
            total = 0.0

            for j in range(n_taps):
                sx = min(max(x + tap_dx[j], 0), width - 1)
                sy = min(max(y + tap_dy[j], 0), height - 1)

                sr = float(src[sy, sx, 0])
                sg = float(src[sy, sx, 1])
                sb = float(src[sy, sx, 2])
                sa = float(src[sy, sx, 3])

                weight = tap_weights[j]
                if boost_enabled:
                    lum = sr * LUMA_R + sg * LUMA_G + sb * LUMA_B
                    if lum > highlight_threshold:
                        weight *= 1.0 + boost_scale * (lum - highlight_threshold)

                r += sr * weight
                g += sg * weight
                b += sb * weight
                a += sa * weight
                total += weight

            if total > 0.0:
                out[y, x, 0] = store_u8(r / total)
                out[y, x, 1] = store_u8(g / total)
                out[y, x, 2] = store_u8(b / total)
                out[y, x, 3] = store_u8(a / total)
            else:
                out[y, x, 0] = src[y, x, 0]
                out[y, x, 1] = src[y, x, 1]
                out[y, x, 2] = src[y, x, 2]
                out[y, x, 3] = src[y, x, 3]


# ============================================================================
# Surface Blur
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def surface_blur_numba(
    src: np.ndarray,
    radius: int,
    threshold: float,
    out: np.ndarray,
) -> None:
    """
    Edge-preserving average weighted by color similarity and distance.

    color_weight = max(0, 1 - diff / (3 * threshold)) where diff is the sum
    of absolute RGB differences to the center pixel; spatial_weight =
    1 / (1 + distance). With threshold == 0 only identical colors count; a
    negative threshold makes the color weight grow with the difference.

    Args:
        src: Input image [H, W, 4] uint8
        radius: Neighbourhood half-width
        threshold: Color difference threshold
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]

    exact_match = threshold == 0.0
    diff_scale = 3.0 * threshold

    for y in prange(height):
        for x in range(width):
            cr = float(src[y, x, 0])
            cg = float(src[y, x, 1])
            cb = float(src[y, x, 2])

            r = 0.0
            g = 0.0
            b = 0.0
            a = 0.0
            total = 0.0

            for ky in range(-radius, radius + 1):
                sy = min(max(y + ky, 0), height - 1)
                for kx in range(-radius, radius + 1):
                    sx = min(max(x + kx, 0), width - 1)

                    sr = float(src[sy, sx, 0])
                    sg = float(src[sy, sx, 1])
                    sb = float(src[sy, sx, 2])

                    diff = abs(sr - cr) + abs(sg - cg) + abs(sb - cb)

                    if exact_match:
                        color_weight = 1.0 if diff == 0.0 else 0.0
                    else:
                        color_weight = max(0.0, 1.0 - diff / diff_scale)

                    spatial_weight = 1.0 / (1.0 + math.sqrt(kx * kx + ky * ky))
                    weight = color_weight * spatial_weight

                    r += sr * weight
                    g += sg * weight
                    b += sb * weight
                    a += src[sy, sx, 3] * weight
                    total += weight

            # The center tap always has color_weight 1, so total > 0
            out[y, x, 0] = store_u8(r / total)
            out[y, x, 1] = store_u8(g / total)
            out[y, x, 2] = store_u8(b / total)
            out[y, x, 3] = store_u8(a / total)


# ============================================================================
# Tilt-Shift Compositing
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def tilt_shift_blend_numba(
    sharp: np.ndarray,
    blurred: np.ndarray,
    focus_center: float,
    focus_half_height: float,
    transition: float,
    tan_angle: float,
    out: np.ndarray,
) -> None:
    """
    Blend a sharp and a blurred image by distance from a tilted focus band.

    Blend factor is 0 inside the band, eases in quadratically across the
    transition and is 1 beyond it. Alpha is copied from the sharp image.

    Args:
        sharp: Original image [H, W, 4] uint8
        blurred: Fully blurred image [H, W, 4] uint8
        focus_center: Band center in pixels (y)
        focus_half_height: Half the band height in pixels
        transition: Transition height in pixels
        tan_angle: Tangent of the band tilt
        out: Output image [H, W, 4] uint8 (modified in-place)
    """
    height = sharp.shape[0]
    width = sharp.shape[1]
    center_x = width / 2.0

    for y in prange(height):
        for x in range(width):
            adjusted_y = y + tan_angle * (x - center_x)
            dist = abs(adjusted_y - focus_center)

            if dist < focus_half_height:
                amount = 0.0
            elif dist < focus_half_height + transition:
                amount = (dist - focus_half_height) / transition
                amount = amount * amount
            else:
                amount = 1.0

            keep = 1.0 - amount
            for c in range(3):
                out[y, x, c] = store_u8(sharp[y, x, c] * keep + blurred[y, x, c] * amount)
            out[y, x, 3] = sharp[y, x, 3]
