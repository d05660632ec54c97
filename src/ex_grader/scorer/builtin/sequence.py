from __future__ import annotations

from typing import override

from attrs import frozen

from ex_grader.validator import ValidationResult

from .standard import StandardScorer


@frozen
class SequenceScorer(StandardScorer):
    """Standard scoring plus a flat bonus for an exactly ordered sequence."""

    @override
    def perfect_bonus(self, validation: ValidationResult) -> float:
        return self.policy.perfect_sequence_bonus if validation.is_correct else 0.0
