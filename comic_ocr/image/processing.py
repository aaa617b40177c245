"""Image helpers: loading pages and cutting out regions of interest.

Images are numpy arrays in RGB order, shape (height, width, 3).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from comic_ocr.errors import ImageLoadError

if TYPE_CHECKING:
    from comic_ocr.ocr.model import Rect


def load_image(path: str) -> np.ndarray:
    """Load an image file (jpg, png, gif, ...) into an RGB array.

    Doxygen:
    - @param path: Path to the image file.
    - @return: uint8 array of shape (height, width, 3).
    - @throws ImageLoadError: If the file is missing or cannot be decoded.
    """
    if not os.path.exists(path):
        raise ImageLoadError(f"Image file not found: {path}")
    try:
        with Image.open(path) as img:
            # GIFs: first frame only
            rgb = img.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageLoadError(f"Image could not be loaded: {path}: {exc}") from exc
    return np.asarray(rgb, dtype=np.uint8)


def _edge(fraction: float, size: int) -> int:
    # snap float noise so bands sharing an edge land on the same pixel row
    return int(round(round(fraction, 9) * size))


def roi_to_pixels(img_shape: Tuple[int, ...], roi: Rect) -> Tuple[int, int, int, int]:
    """Convert a normalized ROI into a pixel box (x, y, w, h) with top-left origin.

    Doxygen:
    - @param img_shape: Shape of the image array, (height, width, ...).
    - @param roi: Normalized rectangle with bottom-left origin.
    - @return: Tuple (x, y, width, height) clamped to the image.
    """
    height, width = int(img_shape[0]), int(img_shape[1])
    x_start = max(0, _edge(roi.x, width))
    x_end = min(width, _edge(roi.x + roi.width, width))
    y_start = max(0, _edge(1.0 - (roi.y + roi.height), height))
    y_end = min(height, _edge(1.0 - roi.y, height))
    return x_start, y_start, max(0, x_end - x_start), max(0, y_end - y_start)


def crop_region(img: np.ndarray, roi: Rect) -> np.ndarray:
    """Return the part of ``img`` covered by ``roi``."""
    x, y, w, h = roi_to_pixels(img.shape, roi)
    return img[y:y + h, x:x + w]
