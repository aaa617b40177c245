from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Rect:
    """Normalized rectangle with the origin at the bottom-left image corner."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Candidate:
    text: str
    confidence: float


@dataclass
class TextObservation:
    bbox: Rect
    candidates: List[Candidate] = field(default_factory=list)

    def top_candidate(self) -> Optional[Candidate]:
        return self.candidates[0] if self.candidates else None
