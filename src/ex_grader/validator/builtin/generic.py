from __future__ import annotations

from typing import Any

from ex_grader.exercise import GenericQuestion
from ex_grader.validator.factory import validator
from ex_grader.validator.model import ValidationResult
from ex_grader.validator.utils import deep_equal


@validator(GenericQuestion, Any)
def default_validator(answer: Any, question: GenericQuestion) -> ValidationResult:
    """Binary deep-equality check, used for exercise types without their own rule."""
    if deep_equal(answer, question.correct_answer):
        return ValidationResult.graded(1.0, "Correct!")
    return ValidationResult.graded(0.0, "Incorrect")
