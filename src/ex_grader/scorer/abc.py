from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from ex_grader.validator import ValidationResult

from .model import ScoreResult, ScoringMetadata


class ScorerProtocol(Protocol):
    def __call__(
        self,
        validation: ValidationResult,
        metadata: ScoringMetadata | Mapping[str, Any] | None = None,
    ) -> ScoreResult:
        """
        Convert a validation outcome into points.

        `metadata` may carry `difficulty`, `hints_used` and `time_to_answer`
        (camelCase spellings accepted); anything missing or unusable takes
        its default.
        """
        ...
