"""
Entry point and facade for the comic page OCR pipeline.

This module exposes a stable API and a command-line interface.

Packages:
- comic_ocr.ocr: Region planning, Tesseract region OCR, filtering and text assembly
- comic_ocr.image: Image loading and region cropping
- comic_ocr.docs: Plain-text output
- comic_ocr.pipeline: High-level orchestration (`process_file`, `process_directory`)
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from comic_ocr.config import DEFAULT_LANG, RunConfig, configure_dependencies

# OCR core
from comic_ocr.ocr import (
    Candidate,
    Rect,
    TextObservation,
    plan_regions,
    recognize_region,
    accept_observation,
    assemble_text,
)

# Image helpers
from comic_ocr.image import load_image, crop_region

# High-level pipeline
from comic_ocr.pipeline import (
    iter_image_files,
    process_directory,
    process_file,
    recognize_image_text,
)

__all__ = [
    # data model
    "Candidate",
    "Rect",
    "TextObservation",
    # core
    "plan_regions",
    "recognize_region",
    "accept_observation",
    "assemble_text",
    # image ops
    "load_image",
    "crop_region",
    # pipeline
    "iter_image_files",
    "process_directory",
    "process_file",
    "recognize_image_text",
    # cli
    "RunConfig",
    "run",
]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints usage and exits with status 1 on bad input."""

    def error(self, message: str) -> None:
        print(f"Error: {message}")
        self.print_help()
        raise SystemExit(1)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="comic-ocr",
        description="Extract text from comic page images into sibling .txt files.",
        allow_abbrev=False,
    )
    parser.add_argument("--file", "-f", type=str, help="Specify a single image file to process")
    parser.add_argument("--directory", "-d", type=str, help="Specify a directory containing images to process")
    parser.add_argument("--recursive", "-r", action="store_true", help="Recursively process images in the directory and its subdirectories")
    parser.add_argument("--rows", "-n", type=_positive_int, help="Number of horizontal rows to split images into (default: auto-detect from aspect ratio)")
    parser.add_argument("--lang", type=str, default=None, help=f"Tesseract languages (default: from config/dependencies.json or {DEFAULT_LANG})")
    parser.add_argument("--jobs", "-j", type=_positive_int, default=1, help="Number of images to process in parallel (default: 1)")
    return parser


def run(config: RunConfig) -> int:
    """Process the file or directory named by ``config``; return an exit status."""
    if config.file:
        out_path = process_file(config.file, rows=config.rows, lang=config.lang)
        return 0 if out_path else 1

    if config.directory:
        try:
            process_directory(
                config.directory,
                recursive=config.recursive,
                rows=config.rows,
                lang=config.lang,
                jobs=config.jobs,
            )
        except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
            print(f"Failed to list contents of directory {config.directory}: {e}")
            return 1
        return 0

    _build_parser().print_help()
    return 0


def _cli(argv: Optional[List[str]] = None) -> None:
    """CLI for batch text extraction.

    -f / --file: Path to a single image
    -d / --directory: Directory of images (.jpg, .jpeg, .png, .gif)
    -r / --recursive: With --directory, descend into subdirectories
    -n / --rows: Explicit number of horizontal rows per image
    --lang: Tesseract languages
    -j / --jobs: Number of images processed in parallel
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = _build_parser()

    if not argv:
        parser.print_help()
        raise SystemExit(0)

    args, unknown = parser.parse_known_args(argv)
    if unknown:
        print(f"Unknown argument: {unknown[0]}")
        parser.print_help()
        raise SystemExit(1)

    configured_lang = configure_dependencies()
    config = RunConfig(
        file=args.file,
        directory=args.directory,
        recursive=bool(args.recursive),
        rows=args.rows,
        lang=args.lang or configured_lang or DEFAULT_LANG,
        jobs=args.jobs,
    )

    status = run(config)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    _cli()
