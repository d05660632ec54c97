from __future__ import annotations

from typing import override

from attrs import frozen

from ex_grader.scorer import modifiers
from ex_grader.scorer.model import ScoringMetadata
from ex_grader.validator import ValidationResult

from .standard import StandardScorer


@frozen
class ChoiceScorer(StandardScorer):
    """Standard scoring plus up to +50% for correct answers given quickly."""

    @override
    def time_bonus(self, validation: ValidationResult, meta: ScoringMetadata) -> float:
        if not validation.is_correct:
            return 0.0
        return modifiers.time_bonus(meta.time_to_answer, self.policy)
