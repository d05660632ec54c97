from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from attrs import field, frozen
from loguru import logger

from ex_grader.scorer.model import ScoreBreakdown, ScoreResult, ScoringMetadata
from ex_grader.scorer.modifiers import (
    DEFAULT_POLICY,
    difficulty_multiplier,
    hint_penalty,
    round_half_up,
)
from ex_grader.scorer.policy import ScoringPolicy
from ex_grader.validator import ValidationResult


@frozen
class StandardScorer:
    """
    Points from partial credit, difficulty and hints.

    `points = round((score * base_points * time_multiplier + perfect_bonus)
    * difficulty_multiplier * hint_multiplier)`. This scorer never grants a
    time multiplier or perfect bonus; subclasses override `time_bonus` and
    `perfect_bonus` to add them.
    """

    policy: ScoringPolicy = field(default=DEFAULT_POLICY)

    def __call__(
        self,
        validation: ValidationResult,
        metadata: ScoringMetadata | Mapping[str, Any] | None = None,
    ) -> ScoreResult:
        meta = ScoringMetadata.coerce(metadata)

        base = validation.score * self.policy.base_points
        bonus = self.time_bonus(validation, meta)
        perfect = self.perfect_bonus(validation)
        difficulty = difficulty_multiplier(meta.difficulty, self.policy)
        hints = hint_penalty(meta.hints_used, self.policy)

        total = (base * (1.0 + bonus) + perfect) * difficulty * hints
        points = max(0, round_half_up(total))

        logger.debug(
            "Scored {:.2f} -> {} points (difficulty x{}, hints x{})",
            validation.score,
            points,
            difficulty,
            hints,
        )
        return ScoreResult(
            points=points,
            breakdown=ScoreBreakdown(
                base=base,
                time_bonus=bonus,
                time_multiplier=1.0 + bonus,
                perfect_bonus=perfect,
                difficulty_multiplier=difficulty,
                hint_multiplier=hints,
                hint_penalty=1.0 - hints,
                partial_credit=validation.partial,
                total=total,
            ),
        )

    def time_bonus(self, validation: ValidationResult, meta: ScoringMetadata) -> float:
        return 0.0

    def perfect_bonus(self, validation: ValidationResult) -> float:
        return 0.0
