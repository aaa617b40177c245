from __future__ import annotations

import os

from comic_ocr.errors import OutputWriteError


def output_path_for(image_path: str) -> str:
    return os.path.splitext(image_path)[0] + ".txt"


def write_txt(text: str, out_path: str) -> str:
    """Write ``text`` as UTF-8, replacing any existing file."""
    try:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write output file {out_path}: {exc}") from exc
    return out_path
