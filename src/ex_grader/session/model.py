from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ex_grader.scorer import ScoreResult, ScoringMetadata
from ex_grader.validator.model import ResultModel, ValidationResult


class GradedAttempt(ResultModel):
    """One answer graded and scored within a session."""

    exercise_type: str
    validation: ValidationResult
    score: ScoreResult
    metadata: ScoringMetadata
    timestamp: datetime = Field(default_factory=datetime.now)
    error: str | None = None
    """Message of the exception raised by a custom validator or scorer, if any."""

    @property
    def points(self) -> int:
        return self.score.points


class SessionStats(ResultModel):
    total_attempts: int = 0
    correct_answers: int = 0
    accuracy: float = 0.0
    average_points: float = 0.0
    total_points: int = 0
