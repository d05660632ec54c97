from __future__ import annotations

from loguru import logger

from .exercise import ExerciseKind
from .registry import ExerciseRegistry, TypeDescriptor, create_registry
from .scorer import ScoreResult, ScoringMetadata, ScoringPolicy
from .session import GradingSession
from .validator import ValidationResult

logger.disable("ex_grader")

__all__ = [
    "ExerciseKind",
    "ExerciseRegistry",
    "GradingSession",
    "ScoreResult",
    "ScoringMetadata",
    "ScoringPolicy",
    "TypeDescriptor",
    "ValidationResult",
    "create_registry",
]
