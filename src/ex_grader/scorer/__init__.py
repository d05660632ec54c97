from __future__ import annotations

from .abc import ScorerProtocol
from .model import ScoreBreakdown, ScoreResult, ScoringMetadata
from .modifiers import difficulty_multiplier, hint_penalty, round_half_up, time_bonus
from .policy import DEFAULT_DIFFICULTY_MULTIPLIERS, ScoringPolicy

__all__ = [
    "DEFAULT_DIFFICULTY_MULTIPLIERS",
    "ScoreBreakdown",
    "ScoreResult",
    "ScorerProtocol",
    "ScoringMetadata",
    "ScoringPolicy",
    "difficulty_multiplier",
    "hint_penalty",
    "round_half_up",
    "time_bonus",
]
