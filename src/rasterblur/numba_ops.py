"""
Numba runtime helpers.

Reports the JIT configuration and pre-compiles every blur kernel so that the
first real call does not pay the compilation cost.
"""

import logging
import time

import numba
import numpy as np

from rasterblur.blur.kernels import (
    bokeh_blur_numba,
    box_pass_numba,
    convolve_pass_numba,
    motion_blur_numba,
    radial_blur_numba,
    surface_blur_numba,
    tilt_shift_blend_numba,
)
from rasterblur.blur.weights import box_kernel

logger = logging.getLogger(__name__)


def get_numba_status() -> dict:
    """
    Get information about the Numba configuration.

    Returns:
        Dictionary with version, thread count and threading layer
    """
    return {
        "version": numba.__version__,
        "num_threads": numba.config.NUMBA_NUM_THREADS,
        "threading_layer": numba.config.THREADING_LAYER,
    }


def warmup_kernels() -> float:
    """
    Warm up Numba JIT compilation for all blur kernels.

    Call this once at startup to avoid first-call compilation overhead.

    Returns:
        Seconds spent compiling
    """
    start = time.perf_counter()

    src = np.zeros((4, 4, 4), dtype=np.uint8)
    out = np.empty_like(src)
    weights = box_kernel(1)
    taps = np.zeros(1, dtype=np.int32)
    tap_weights = np.ones(1, dtype=np.float64)

    # Trigger JIT compilation with the argument types the API passes
    convolve_pass_numba(src, weights, True, out)
    box_pass_numba(src, 1, True, out)
    motion_blur_numba(src, 1.0, 0.0, 1, out)
    radial_blur_numba(src, 2.0, 2.0, 0.1, 8, True, out)
    bokeh_blur_numba(src, taps, taps, tap_weights, 0.0, 255.0, out)
    surface_blur_numba(src, 1, 15.0, out)
    tilt_shift_blend_numba(src, src, 2.0, 0.4, 0.4, 0.0, out)

    elapsed = time.perf_counter() - start
    logger.info(f"Warmed up blur kernels in {elapsed:.2f}s")
    return elapsed
