from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from loguru import logger
from pydantic import (
    AliasChoices,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from ex_grader.validator.model import ResultModel


class ScoringMetadata(ResultModel):
    """
    Session context of one answer.

    Parsing is lenient: a value of the wrong type falls back to its default
    instead of failing.
    """

    model_config = ConfigDict(extra="ignore")

    difficulty: str | None = None
    hints_used: float = Field(
        default=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("hints_used", "hintsUsed"),
    )
    """Hints consumed; fractional counts are penalized proportionally."""
    time_to_answer: float | None = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("time_to_answer", "timeToAnswer"),
    )
    """Elapsed milliseconds between showing the question and the answer."""

    @field_validator("difficulty", "hints_used", "time_to_answer", mode="wrap")
    @classmethod
    def _default_on_error(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug("Ignoring unusable {} value {!r}", info.field_name, value)
            return cls.model_fields[info.field_name].get_default()

    @classmethod
    def coerce(cls, value: ScoringMetadata | Mapping[str, Any] | None) -> Self:
        match value:
            case cls():
                return value
            case None:
                return cls()
            case Mapping():
                return cls.model_validate(value)
        logger.debug("Ignoring metadata of type {}", type(value).__name__)
        return cls()


class ScoreBreakdown(ResultModel):
    """
    Contribution of each modifier, in application order.

    `total == (base * time_multiplier + perfect_bonus) * difficulty_multiplier
    * hint_multiplier`, and the awarded points are `total` rounded.
    """

    base: float
    time_bonus: float = 0.0
    time_multiplier: float = 1.0
    perfect_bonus: float = 0.0
    difficulty_multiplier: float = 1.0
    hint_multiplier: float = 1.0
    hint_penalty: float = 0.0
    """Fraction of points removed by hints, `1 - hint_multiplier`."""
    partial_credit: bool = False
    total: float = 0.0


class ScoreResult(ResultModel):
    points: int = Field(ge=0)
    breakdown: ScoreBreakdown

    @classmethod
    def zero(cls) -> Self:
        return cls(points=0, breakdown=ScoreBreakdown(base=0.0))
