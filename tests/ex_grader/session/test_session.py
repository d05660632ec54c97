from __future__ import annotations

import pytest

from ex_grader.registry import ExerciseRegistry, TypeDescriptor, create_registry
from ex_grader.session import GradingSession, SessionStats
from ex_grader.validator import ValidationResult


def exploding_validator(answer: object, question: object) -> ValidationResult:
    raise RuntimeError("boom")


@pytest.fixture
def session() -> GradingSession:
    return GradingSession(registry=create_registry(), exercise_type="checkbox")


class TestGradingSession:
    question = {"correctAnswer": ["a", "b"]}

    def test_grade_records_attempt(self, session):
        attempt = session.grade(["a", "b"], self.question, {"difficulty": "hard"})
        assert attempt.validation.is_correct
        assert attempt.points == 150
        assert attempt.metadata.difficulty == "hard"
        assert attempt.error is None
        assert session.last() is attempt
        assert session.history == [attempt]

    def test_grade_batch(self, session):
        attempts = session.grade_batch(
            [["a", "b"], ["a"], []], [self.question] * 3, {"hintsUsed": 1}
        )
        assert [a.points for a in attempts] == [90, 45, 0]
        assert len(session.history) == 3

    def test_grade_batch_length_mismatch(self, session):
        with pytest.raises(ValueError):
            session.grade_batch([["a"]], [])

    def test_stats(self, session):
        session.grade(["a", "b"], self.question)
        session.grade(["a"], self.question)
        stats = session.stats()
        assert stats == SessionStats(
            total_attempts=2,
            correct_answers=1,
            accuracy=0.5,
            average_points=75.0,
            total_points=150,
        )

    def test_empty_stats_and_reset(self, session):
        assert session.stats() == SessionStats()
        assert session.last() is None

        session.grade(["a"], self.question)
        session.reset()
        assert session.history == []
        assert session.stats().total_attempts == 0

    def test_history_is_a_copy(self, session):
        session.grade(["a"], self.question)
        session.history.clear()
        assert len(session.history) == 1

    def test_unknown_type_uses_deep_equality(self):
        session = GradingSession(registry=create_registry(), exercise_type="zzz")
        assert session.grade({"k": 1}, {"correctAnswer": {"k": 1}}).points == 100

    def test_failing_custom_validator_is_recorded(self):
        registry = ExerciseRegistry()
        registry.register(TypeDescriptor(id="broken", validator=exploding_validator))
        session = GradingSession(registry=registry, exercise_type="broken")

        attempt = session.grade("a", {"correctAnswer": "a"})
        assert attempt.error == "boom"
        assert attempt.points == 0
        assert attempt.validation.feedback == "Validation failed"
        assert session.stats().total_attempts == 1
