from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import loguru
from attrs import define, field
from loguru import logger

from ex_grader.registry import ExerciseRegistry
from ex_grader.scorer import ScorerProtocol, ScoreResult, ScoringMetadata
from ex_grader.validator import ValidationResult, ValidatorProtocol

from .model import GradedAttempt, SessionStats

type Metadata = ScoringMetadata | Mapping[str, Any] | None


@define
class GradingSession:
    """
    Grades a stream of answers to one exercise type and keeps their history.

    The validator and scorer are resolved from the registry once, when the
    session is created; unknown types get the registry's defaults.
    """

    registry: ExerciseRegistry
    exercise_type: str

    _validator: ValidatorProtocol = field(init=False)
    _scorer: ScorerProtocol = field(init=False)
    _history: list[GradedAttempt] = field(init=False, factory=list)
    _logger: loguru.Logger = field(init=False)

    def __attrs_post_init__(self) -> None:
        self._validator = self.registry.get_validator(self.exercise_type)
        self._scorer = self.registry.get_scorer(self.exercise_type)
        self._logger = logger.bind(exercise_type=self.exercise_type)

        if self.registry.get(self.exercise_type) is None:
            self._logger.warning(
                "Unknown exercise type {!r}, grading by deep equality",
                self.exercise_type,
            )

    @property
    def history(self) -> list[GradedAttempt]:
        return list(self._history)

    def grade(
        self, answer: object, question: object, metadata: Metadata = None
    ) -> GradedAttempt:
        """
        Validate and score one answer, and record the attempt.

        An exception raised by a custom validator or scorer is logged and
        recorded as a failed attempt worth no points.
        """
        meta = ScoringMetadata.coerce(metadata)
        try:
            validation = self._validator(answer, question)
            score = self._scorer(validation, meta)
        except Exception as e:
            self._logger.exception("Grading failed")
            attempt = GradedAttempt(
                exercise_type=self.exercise_type,
                validation=ValidationResult.invalid("Validation failed"),
                score=ScoreResult.zero(),
                metadata=meta,
                error=str(e),
            )
        else:
            attempt = GradedAttempt(
                exercise_type=self.exercise_type,
                validation=validation,
                score=score,
                metadata=meta,
            )
            self._logger.debug(
                "Graded attempt {}: score {:.2f}, {} points",
                len(self._history) + 1,
                validation.score,
                score.points,
            )

        self._history.append(attempt)
        return attempt

    def grade_batch(
        self,
        answers: Sequence[object],
        questions: Sequence[object],
        metadata: Metadata = None,
    ) -> list[GradedAttempt]:
        """
        Grade answers pairwise against questions with shared metadata.

        Raises:
            ValueError: if `answers` and `questions` differ in length.
        """
        if len(answers) != len(questions):
            raise ValueError(
                f"Got {len(answers)} answers for {len(questions)} questions"
            )
        return [
            self.grade(answer, question, metadata)
            for answer, question in zip(answers, questions, strict=True)
        ]

    def last(self) -> GradedAttempt | None:
        return self._history[-1] if self._history else None

    def stats(self) -> SessionStats:
        if not self._history:
            return SessionStats()

        total = len(self._history)
        correct = sum(1 for a in self._history if a.validation.is_correct)
        points = sum(a.points for a in self._history)
        return SessionStats(
            total_attempts=total,
            correct_answers=correct,
            accuracy=correct / total,
            average_points=points / total,
            total_points=points,
        )

    def reset(self) -> None:
        self._history.clear()
