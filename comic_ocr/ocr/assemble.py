"""Observation filtering and text assembly."""

from __future__ import annotations

from typing import Iterable

from comic_ocr.config import MIN_LARGE_BOX_SIDE, MIN_WIDTH_TO_HEIGHT
from comic_ocr.ocr.model import TextObservation


SENTENCE_ENDINGS = ('.', '?', '!')


def accept_observation(observation: TextObservation) -> bool:
    """Keep line-like boxes and large boxes; drop small, tall artifacts."""
    w = observation.bbox.width
    h = observation.bbox.height
    return w >= h * MIN_WIDTH_TO_HEIGHT or (w > MIN_LARGE_BOX_SIDE and h > MIN_LARGE_BOX_SIDE)


def assemble_text(per_region: Iterable[Iterable[TextObservation]]) -> str:
    """Join top candidates region by region, one per line.

    Lines ending a sentence are followed by a blank line. Text is used
    as recognized, without trimming.

    Doxygen:
    - @param per_region: Accepted observations for each region, in region order.
    - @return: Assembled text; empty string when nothing was recognized.
    """
    parts = []
    for observations in per_region:
        for observation in observations:
            candidate = observation.top_candidate()
            if candidate is None:
                continue
            parts.append(candidate.text)
            if candidate.text.endswith(SENTENCE_ENDINGS):
                parts.append('\n')
            parts.append('\n')
    return ''.join(parts)
