from __future__ import annotations

from .choice import ChoiceScorer
from .sequence import SequenceScorer
from .standard import StandardScorer

__all__ = [
    "ChoiceScorer",
    "SequenceScorer",
    "StandardScorer",
]
