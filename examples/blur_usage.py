"""
Example: Raster blur usage.

Demonstrates how to use the rasterblur filters for:
- Individual filters with settings values
- Dispatch by settings type
- Highlight boost in lens blur
- Edge-preserving surface blur
- Chained pipelines
"""

import logging

import numpy as np

from rasterblur import (
    Blur,
    GaussianBlurSettings,
    ImageBuffer,
    LensBlurSettings,
    MotionBlurSettings,
    RadialBlurSettings,
    SurfaceBlurSettings,
    apply_blur,
    apply_gaussian_blur,
    apply_lens_blur,
    apply_surface_blur,
    warmup_kernels,
)

# Configure logging to see filter details
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def generate_sample_image(width: int = 256, height: int = 192) -> ImageBuffer:
    """Generate a test image: gradient background, a few bright dots, a hard edge."""
    rng = np.random.default_rng(42)

    array = np.zeros((height, width, 4), dtype=np.uint8)
    array[:, :, 0] = np.linspace(0, 255, width, dtype=np.uint8)[np.newaxis, :]
    array[:, :, 1] = np.linspace(0, 255, height, dtype=np.uint8)[:, np.newaxis]
    array[:, :, 2] = 60
    array[:, :, 3] = 255

    # Bright point lights for the bokeh example
    ys = rng.integers(0, height, 20)
    xs = rng.integers(0, width, 20)
    array[ys, xs, :3] = 250

    # Flat block with a hard edge for the surface example
    array[height // 4 : height // 2, width // 2 :, :3] = (200, 40, 40)

    return ImageBuffer.from_array(array)


def channel_stats(image: ImageBuffer) -> str:
    red = image.array[:, :, 0]
    return f"mean={red.mean():.1f} std={red.std():.1f}"


def example_1_individual_filters():
    """Example 1: Calling filters directly."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Individual Filters")
    print("=" * 70)

    image = generate_sample_image()
    print(f"Original:  {image.width}x{image.height}, {channel_stats(image)}")

    for radius in (1, 5, 15):
        blurred = apply_gaussian_blur(image, GaussianBlurSettings(radius=radius))
        print(f"Gaussian r={radius:<3d} {channel_stats(blurred)}")


def example_2_dispatch():
    """Example 2: One entry point, filter chosen by settings type."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Dispatch by Settings")
    print("=" * 70)

    image = generate_sample_image()
    presets = [
        MotionBlurSettings(angle=30, distance=12),
        RadialBlurSettings(amount=25, method="spin", quality="draft"),
        RadialBlurSettings(amount=25, method="zoom", quality="best", center_x=0.3),
    ]

    for settings in presets:
        result = apply_blur(image, settings)
        print(f"{type(settings).__name__:<22} {channel_stats(result)}")


def example_3_lens_highlights():
    """Example 3: Lens blur with and without highlight boost."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Lens Blur Highlights")
    print("=" * 70)

    image = generate_sample_image()

    plain = apply_lens_blur(image, LensBlurSettings(radius=6, iris_shape=6))
    boosted = apply_lens_blur(
        image,
        LensBlurSettings(
            radius=6, iris_shape=6, highlight_brightness=80, highlight_threshold=200
        ),
    )

    print(f"No boost:  {channel_stats(plain)}")
    print(f"Boosted:   {channel_stats(boosted)}")


def example_4_surface_blur():
    """Example 4: Surface blur keeps hard edges."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Surface Blur")
    print("=" * 70)

    image = generate_sample_image()
    edge_row = image.height // 4 + 4
    edge_x = image.width // 2

    surface = apply_surface_blur(image, SurfaceBlurSettings(radius=4, threshold=20))
    gaussian = apply_gaussian_blur(image, GaussianBlurSettings(radius=4))

    print(f"Edge pixels (original): {image.pixel(edge_x - 1, edge_row)} {image.pixel(edge_x, edge_row)}")
    print(f"Edge pixels (surface):  {surface.pixel(edge_x - 1, edge_row)} {surface.pixel(edge_x, edge_row)}")
    print(f"Edge pixels (gaussian): {gaussian.pixel(edge_x - 1, edge_row)} {gaussian.pixel(edge_x, edge_row)}")


def example_5_pipeline():
    """Example 5: Chaining filters."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: Pipeline")
    print("=" * 70)

    image = generate_sample_image()

    miniature = Blur().surface(radius=3, threshold=20).tilt_shift(blur=10, focus_y=0.6, angle=8)
    print(f"Pipeline:  {miniature}")

    result = miniature(image)
    print(f"Result:    {channel_stats(result)}")

    # Variants share the base stages without modifying them
    streaked = miniature.copy().motion(angle=0, distance=6)
    print(f"Variant:   {streaked} ({len(streaked)} stages)")
    print(f"Base:      {miniature} ({len(miniature)} stages)")


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("RASTERBLUR EXAMPLES")
    print("=" * 70)

    warmup_kernels()

    example_1_individual_filters()
    example_2_dispatch()
    example_3_lens_highlights()
    example_4_surface_blur()
    example_5_pipeline()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
