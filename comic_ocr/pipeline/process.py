"""High-level pipeline: page image → regions → OCR → text file.

This module orchestrates the per-image flow and the batch helpers used
by the CLI (`process_file`, `process_directory`).
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Iterable, Iterator, List, Optional

import numpy as np

from comic_ocr.config import DEFAULT_LANG, IMAGE_EXTENSIONS
from comic_ocr.docs import output_path_for, write_txt
from comic_ocr.errors import (
    ImageLoadError,
    InvalidDimensionsError,
    OutputWriteError,
    RecognitionError,
)
from comic_ocr.image import load_image
from comic_ocr.ocr import (
    Rect,
    TextObservation,
    accept_observation,
    assemble_text,
    plan_regions,
    recognize_region,
)


Recognizer = Callable[..., Iterable[TextObservation]]


def recognize_image_text(
    img: np.ndarray,
    rows: Optional[int] = None,
    lang: str = DEFAULT_LANG,
    recognizer: Recognizer = recognize_region,
    label: str = "",
) -> str:
    """Recognize the text of one page, region by region.

    A region whose recognition fails is reported and contributes no text;
    the remaining regions are still processed in order.

    Doxygen:
    - @param img: Page image (RGB array).
    - @param rows: Explicit number of horizontal bands, or None for automatic.
    - @param lang: Tesseract language(s).
    - @param recognizer: Callable ``(img, roi, lang=...)`` returning observations.
    - @param label: Name used in warnings (usually the image path).
    - @return: Assembled text for the page.
    - @throws InvalidDimensionsError: If the image is empty.
    """
    height, width = img.shape[:2]
    regions: List[Rect] = plan_regions(width, height, rows)

    accepted: List[List[TextObservation]] = []
    for index, roi in enumerate(regions, 1):
        try:
            observations = [obs for obs in recognizer(img, roi, lang=lang) if accept_observation(obs)]
        except RecognitionError as e:
            print(f"Warning: region {index}/{len(regions)} of {label or 'image'} skipped: {e}")
            observations = []
        accepted.append(observations)

    return assemble_text(accepted)


def process_file(
    file_path: str,
    rows: Optional[int] = None,
    lang: str = DEFAULT_LANG,
    recognizer: Recognizer = recognize_region,
) -> Optional[str]:
    """Recognize one image and write ``<name>.txt`` next to it.

    Doxygen:
    - @param file_path: Path to the input image.
    - @param rows: Explicit number of horizontal bands, or None for automatic.
    - @param lang: Tesseract language(s).
    - @param recognizer: Region recognizer (Tesseract by default).
    - @return: Output text path, or None if the file failed (already reported).
    """
    try:
        img = load_image(file_path)
        text = recognize_image_text(img, rows=rows, lang=lang, recognizer=recognizer, label=file_path)
        out_path = write_txt(text, output_path_for(file_path))
    except (ImageLoadError, InvalidDimensionsError, OutputWriteError) as e:
        print(f"Error: {file_path}: {e}")
        return None
    except Exception as e:
        print(f"Error: {file_path}: unexpected failure: {e}")
        return None
    print(f"Text recognition completed. Output saved to {out_path}")
    return out_path


def _is_image_file(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in IMAGE_EXTENSIONS


def iter_image_files(directory: str, recursive: bool = False) -> Iterator[str]:
    """Yield image files under ``directory`` (top level only unless recursive)."""
    if recursive:
        for root, dirs, files in os.walk(directory):
            dirs.sort()
            for name in sorted(files):
                path = os.path.join(root, name)
                if _is_image_file(path) and os.path.isfile(path):
                    yield path
        return

    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if _is_image_file(path) and os.path.isfile(path):
            yield path


def _process_announced(file_path: str, **kwargs) -> Optional[str]:
    print(f"Processing {file_path}...")
    return process_file(file_path, **kwargs)


def process_directory(
    directory: str,
    recursive: bool = False,
    rows: Optional[int] = None,
    lang: str = DEFAULT_LANG,
    jobs: int = 1,
    recognizer: Recognizer = recognize_region,
) -> List[Optional[str]]:
    """Process every image in a directory.

    Files are independent, so with ``jobs > 1`` they run on a thread pool;
    results keep enumeration order either way.

    Doxygen:
    - @param directory: Directory to scan.
    - @param recursive: Descend into subdirectories.
    - @param rows: Explicit number of horizontal bands, or None for automatic.
    - @param lang: Tesseract language(s).
    - @param jobs: Number of images processed concurrently.
    - @param recognizer: Region recognizer (Tesseract by default).
    - @return: Output path per processed image (None for failed images).
    - @throws FileNotFoundError: If ``directory`` is not a directory.
    """
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")

    worker = partial(_process_announced, rows=rows, lang=lang, recognizer=recognizer)
    files = iter_image_files(directory, recursive=recursive)
    if jobs <= 1:
        return [worker(path) for path in files]
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(worker, files))
