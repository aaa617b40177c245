"""High-level orchestration: per-image recognition and batch processing."""

from .process import (
    iter_image_files,
    process_directory,
    process_file,
    recognize_image_text,
)

__all__ = [
    "iter_image_files",
    "process_directory",
    "process_file",
    "recognize_image_text",
]
