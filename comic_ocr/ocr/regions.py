"""Region planning: split a page into horizontal OCR regions."""

from __future__ import annotations

from typing import List, Optional

from comic_ocr.config import SPLIT_ASPECT_RATIO
from comic_ocr.errors import InvalidDimensionsError
from comic_ocr.ocr.model import Rect


def plan_regions(image_width: float, image_height: float, rows: Optional[int] = None) -> List[Rect]:
    """Return the regions of interest for a page in reading order.

    Doxygen:
    - @param image_width: Page width (pixels or any unit).
    - @param image_height: Page height in the same unit.
    - @param rows: Explicit number of horizontal bands; ``None`` or ``<= 1`` picks by aspect ratio.
    - @return: Normalized rectangles, topmost first.
    - @throws InvalidDimensionsError: If either dimension is not positive.
    """
    if image_height <= 0 or image_width <= 0:
        raise InvalidDimensionsError(f"Invalid image dimensions: {image_width}x{image_height}")

    if rows is not None and rows > 1:
        row_height = 1.0 / rows
        return [
            Rect(x=0.0, y=1.0 - (i + 1) / rows, width=1.0, height=row_height)
            for i in range(rows)
        ]

    aspect_ratio = image_width / image_height
    if aspect_ratio < SPLIT_ASPECT_RATIO:
        top_half = Rect(x=0.0, y=0.5, width=1.0, height=0.5)
        bottom_half = Rect(x=0.0, y=0.0, width=1.0, height=0.5)
        return [top_half, bottom_half]
    # Wide strip: read left to right as a single block
    return [Rect(x=0.0, y=0.0, width=1.0, height=1.0)]
