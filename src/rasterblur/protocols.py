"""
Protocol definitions for rasterblur pipeline interfaces.

Defines the common interface that pipeline stages implement.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rasterblur.image import ImageBuffer


@runtime_checkable
class BlurStage(Protocol):
    """
    Protocol for anything that turns one image into another.

    The Blur pipeline implements it, so a pipeline can be used wherever a
    single stage is expected.
    """

    def apply(self, image: ImageBuffer) -> ImageBuffer:
        """
        Apply the stage to an image.

        Args:
            image: Input image (not modified)

        Returns:
            New image with the same dimensions
        """
        ...

    def __call__(self, image: ImageBuffer) -> ImageBuffer: ...

    def __len__(self) -> int:
        """Return number of operations in the stage."""
        ...
