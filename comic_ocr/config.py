import json
import os
from dataclasses import dataclass
from typing import Optional

import pytesseract


# Pages narrower than this (width / height) are read as two stacked halves.
SPLIT_ASPECT_RATIO = 2.5

# Observation filter thresholds, in normalized image units.
MIN_WIDTH_TO_HEIGHT = 0.4
MIN_LARGE_BOX_SIDE = 0.1

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")

DEFAULT_LANG = "eng"


@dataclass(frozen=True)
class RunConfig:
    """Options for one invocation, built once from the command line."""

    file: Optional[str] = None
    directory: Optional[str] = None
    recursive: bool = False
    rows: Optional[int] = None
    lang: str = DEFAULT_LANG
    jobs: int = 1


def _resolve_path(base: str, relative: str) -> str:
    return os.path.abspath(os.path.join(base, relative))


def configure_dependencies(deps_path: Optional[str] = None) -> Optional[str]:
    """Configure Tesseract from config/dependencies.json.

    Returns the Tesseract language string from the config, if any.
    """
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
    if deps_path is None:
        deps_path = os.path.join(project_root, "config", "dependencies.json")

    lang: Optional[str] = None

    if not os.path.exists(deps_path):
        return lang

    try:
        with open(deps_path, "r", encoding="utf-8") as deps_file:
            deps = json.load(deps_file) or {}

        tess_rel = deps.get("tesseract_path")
        if tess_rel:
            tess_abs = _resolve_path(project_root, tess_rel)
            if os.path.exists(tess_abs):
                pytesseract.pytesseract.tesseract_cmd = tess_abs
            else:
                print(f"Warning: Tesseract path from config does not exist: {tess_abs}")

        lang = deps.get("tesseract_lang") or None

    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load dependencies from {deps_path}: {exc}")

    return lang
