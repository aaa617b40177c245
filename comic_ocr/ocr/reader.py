"""Region OCR on top of pytesseract.

This module provides:
- Building a cleaned DataFrame from pytesseract output.
- Grouping words into text lines in Tesseract's own order.
- Running OCR on one region of interest and yielding text observations.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

import numpy as np
import pandas as pd
import pytesseract

from comic_ocr.config import DEFAULT_LANG
from comic_ocr.errors import RecognitionError
from comic_ocr.image.processing import crop_region
from comic_ocr.ocr.model import Candidate, Rect, TextObservation


LINE_KEYS = ['block_num', 'par_num', 'line_num']


def build_dataframe_from_tesseract(data: Dict[str, Any]) -> pd.DataFrame:
    """Create and clean a DataFrame from pytesseract.image_to_data output.

    Doxygen:
    - @param data: Dict returned by `pytesseract.image_to_data(..., output_type=Output.DICT)`.
    - @return: DataFrame of recognized words with positive confidence and non-blank text.
    """
    df = pd.DataFrame(data)
    if df.empty or 'conf' not in df or 'text' not in df:
        return df.iloc[0:0]
    df['conf'] = pd.to_numeric(df['conf'], errors='coerce').fillna(-1)
    df = df[df['conf'] > 0].copy()
    df['text'] = df['text'].fillna('').astype(str).str.strip()
    return df[df['text'] != '']


def group_words_to_lines(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Group OCR words into lines, keeping Tesseract's line order.

    Doxygen:
    - @param df: DataFrame produced by `build_dataframe_from_tesseract`.
    - @return: List of line dicts with text, pixel bbox (top-left origin) and confidence.
    """
    if df.empty:
        return []
    lines: List[Dict[str, Any]] = []
    for _, g in df.groupby(LINE_KEYS, sort=True):
        g_sorted = g.sort_values('left')
        x = int(g_sorted['left'].min())
        y = int(g_sorted['top'].min())
        lines.append({
            'text': ' '.join(g_sorted['text'].tolist()),
            'x': x,
            'y': y,
            'width': int((g_sorted['left'] + g_sorted['width']).max() - x),
            'height': int((g_sorted['top'] + g_sorted['height']).max() - y),
            'confidence': float(g_sorted['conf'].mean()),
        })
    return lines


def line_to_observation(line: Dict[str, Any], roi: Rect, crop_width: int, crop_height: int) -> TextObservation:
    """Map a pixel line box inside a crop to a normalized full-image observation.

    Doxygen:
    - @param line: Line dict from `group_words_to_lines`.
    - @param roi: Region the crop was taken from.
    - @param crop_width: Crop width in pixels.
    - @param crop_height: Crop height in pixels.
    - @return: Observation with a single candidate and bottom-left-origin bbox.
    """
    fx = line['x'] / crop_width
    fw = line['width'] / crop_width
    # pixel rows grow downwards, normalized y grows upwards
    fy = (crop_height - (line['y'] + line['height'])) / crop_height
    fh = line['height'] / crop_height
    bbox = Rect(
        x=roi.x + fx * roi.width,
        y=roi.y + fy * roi.height,
        width=fw * roi.width,
        height=fh * roi.height,
    )
    confidence = max(0.0, min(1.0, line['confidence'] / 100.0))
    return TextObservation(bbox=bbox, candidates=[Candidate(text=line['text'], confidence=confidence)])


def recognize_region(img: np.ndarray, roi: Rect, lang: str = DEFAULT_LANG) -> Iterator[TextObservation]:
    """Run Tesseract on one region of a page.

    Tesseract runs eagerly so failures surface here; observations are
    then yielded lazily in the engine's line order.

    Doxygen:
    - @param img: Full page image (RGB array).
    - @param roi: Normalized region to recognize.
    - @param lang: Tesseract language(s), e.g. 'eng' or 'eng+jpn'.
    - @return: Iterator of text observations in full-image coordinates.
    - @throws RecognitionError: If Tesseract fails on the region.
    """
    crop = crop_region(img, roi)
    if crop.size == 0:
        return iter(())
    try:
        data = pytesseract.image_to_data(crop, lang=lang, output_type=pytesseract.Output.DICT)
    except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError, RuntimeError) as exc:
        raise RecognitionError(f"Text recognition failed: {exc}") from exc

    lines = group_words_to_lines(build_dataframe_from_tesseract(data))
    crop_height, crop_width = crop.shape[:2]
    return (line_to_observation(line, roi, crop_width, crop_height) for line in lines)
