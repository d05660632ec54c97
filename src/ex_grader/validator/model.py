from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

INVALID_ANSWER_FORMAT = "Invalid answer format"


class ResultModel(BaseModel):
    """Base for grading outputs; serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class SelectionBreakdown(ResultModel):
    correct_count: int
    incorrect_count: int
    missed_count: int


class PlacementBreakdown(ResultModel):
    correct_count: int
    total_count: int


class BlankResult(ResultModel):
    is_correct: bool
    user_answer: str
    correct_answer: str | list[str]


class BlanksBreakdown(ResultModel):
    correct_count: int
    total_count: int
    results: list[BlankResult]


class SequenceBreakdown(ResultModel):
    correct_pairs: int
    total_pairs: int


class TableBreakdown(ResultModel):
    correct_cells: int
    total_cells: int


Breakdown = (
    SelectionBreakdown
    | PlacementBreakdown
    | BlanksBreakdown
    | SequenceBreakdown
    | TableBreakdown
)


class ValidationResult(ResultModel):
    """
    Outcome of grading one answer against one question.

    `is_correct` holds exactly when `score == 1` and `partial` exactly when
    `0 < score < 1`; construction fails otherwise. Use `graded` to derive
    both flags from the score.
    """

    is_correct: bool
    score: float = Field(ge=0.0, le=1.0)
    feedback: str
    partial: bool = False
    breakdown: Breakdown | None = None

    @model_validator(mode="after")
    def _check_flags(self) -> Self:
        if self.is_correct != (self.score == 1):
            raise ValueError(
                f"is_correct={self.is_correct} disagrees with score={self.score}"
            )
        if self.partial != (0 < self.score < 1):
            raise ValueError(
                f"partial={self.partial} disagrees with score={self.score}"
            )
        return self

    @classmethod
    def graded(
        cls,
        score: float,
        feedback: str,
        breakdown: Breakdown | None = None,
    ) -> Self:
        score = min(1.0, max(0.0, score))
        return cls(
            is_correct=score == 1,
            score=score,
            feedback=feedback,
            partial=0 < score < 1,
            breakdown=breakdown,
        )

    @classmethod
    def invalid(cls, feedback: str = INVALID_ANSWER_FORMAT) -> Self:
        """Failed validation for a missing or malformed answer or question."""
        return cls(is_correct=False, score=0.0, feedback=feedback)
