"""OCR (Optical Character Recognition) core.

This package includes region planning, Tesseract-backed region
recognition, observation filtering and text assembly.
"""

from .model import Candidate, Rect, TextObservation
from .regions import plan_regions
from .reader import (
    build_dataframe_from_tesseract,
    group_words_to_lines,
    line_to_observation,
    recognize_region,
)
from .assemble import accept_observation, assemble_text

__all__ = [
    "Candidate",
    "Rect",
    "TextObservation",
    "plan_regions",
    "build_dataframe_from_tesseract",
    "group_words_to_lines",
    "line_to_observation",
    "recognize_region",
    "accept_observation",
    "assemble_text",
]
