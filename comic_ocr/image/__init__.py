"""Image-level utilities (loading, region cropping)."""

from .processing import (
    crop_region,
    load_image,
    roi_to_pixels,
)

__all__ = [
    "crop_region",
    "load_image",
    "roi_to_pixels",
]
