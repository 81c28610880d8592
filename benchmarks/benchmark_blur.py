"""
Benchmark blur filter performance.

Times every filter on a range of image sizes.
"""

import logging
import time

import numpy as np

from rasterblur import (
    BoxBlurSettings,
    GaussianBlurSettings,
    ImageBuffer,
    LensBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    TiltShiftSettings,
    apply_blur,
    get_numba_status,
    warmup_kernels,
)

# Suppress logging for cleaner output
logging.getLogger("rasterblur").setLevel(logging.WARNING)

FILTERS = [
    ("Gaussian r=5", GaussianBlurSettings(radius=5)),
    ("Gaussian r=25", GaussianBlurSettings(radius=25)),
    ("Box r=5", BoxBlurSettings(radius=5)),
    ("Motion d=10", MotionBlurSettings(angle=30, distance=10)),
    ("Radial spin best", RadialBlurSettings(amount=20, method="spin", quality="best")),
    ("Radial zoom draft", RadialBlurSettings(amount=20, method="zoom", quality="draft")),
    ("Lens r=8", LensBlurSettings(radius=8)),
    ("Lens r=8 boost", LensBlurSettings(radius=8, highlight_brightness=50, highlight_threshold=200)),
    ("Surface r=5", SurfaceBlurSettings(radius=5)),
    ("Tilt-shift", TiltShiftSettings()),
]


def generate_image(width: int, height: int) -> ImageBuffer:
    """Generate a random RGBA image."""
    rng = np.random.default_rng(42)
    return ImageBuffer.from_array(rng.integers(0, 256, (height, width, 4), dtype=np.uint8))


def benchmark_filter(name: str, settings, image: ImageBuffer, iterations: int) -> float:
    """Benchmark one filter and return the mean time in ms."""
    # Warmup
    for _ in range(2):
        apply_blur(image, settings)

    # Benchmark
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        apply_blur(image, settings)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # Convert to ms

    avg_time = np.mean(times)
    std_time = np.std(times)
    megapixels = image.width * image.height / 1e6

    print(
        f"{name:<20} {avg_time:9.3f} ms +/- {std_time:7.3f} ms  "
        f"{megapixels / (avg_time / 1000):8.1f} MP/sec"
    )
    return float(avg_time)


def benchmark_all_filters(width: int = 1024, height: int = 768, iterations: int = 10):
    """Benchmark every filter on one image size."""
    print("\n" + "=" * 80)
    print(f"ALL FILTERS ({width}x{height}, {iterations} iterations)")
    print("=" * 80)

    image = generate_image(width, height)
    for name, settings in FILTERS:
        benchmark_filter(name, settings, image, iterations)


def benchmark_size_scaling():
    """Benchmark Gaussian blur across image sizes."""
    print("\n" + "=" * 80)
    print("IMAGE SIZE SCALING (Gaussian r=5)")
    print("=" * 80)

    settings = GaussianBlurSettings(radius=5)
    for width, height in [(256, 256), (512, 512), (1024, 1024), (2048, 2048), (4096, 4096)]:
        image = generate_image(width, height)
        benchmark_filter(f"{width}x{height}", settings, image, iterations=5)


def main():
    """Run all benchmarks."""
    print("=" * 80)
    print("RASTERBLUR PERFORMANCE BENCHMARKS")
    print("=" * 80)

    status = get_numba_status()
    print(f"Numba {status['version']}, {status['num_threads']} threads")
    print(f"JIT warmup: {warmup_kernels():.2f}s")

    benchmark_all_filters()
    benchmark_size_scaling()

    print("\n" + "=" * 80)
    print("ALL BENCHMARKS COMPLETED")
    print("=" * 80)


if __name__ == "__main__":
    main()
