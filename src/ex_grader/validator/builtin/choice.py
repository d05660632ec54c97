from __future__ import annotations

from ex_grader.exercise import MultipleChoiceQuestion, SingleAnswerQuestion
from ex_grader.exercise.answer import ChoiceAnswer
from ex_grader.validator.factory import validator
from ex_grader.validator.model import ValidationResult
from ex_grader.validator.utils import same_value


@validator(MultipleChoiceQuestion, ChoiceAnswer)
def multiple_choice_validator(
    answer: ChoiceAnswer, question: MultipleChoiceQuestion
) -> ValidationResult:
    """Exact match of the selected option against the correct one."""
    if same_value(answer, question.correct_answer):
        return ValidationResult.graded(1.0, "Correct!")

    return ValidationResult.graded(
        0.0, f"Incorrect. The correct answer is {question.correct_option_text()}"
    )


def _normalize(value: ChoiceAnswer) -> ChoiceAnswer:
    return value.strip().lower() if isinstance(value, str) else value


@validator(SingleAnswerQuestion, ChoiceAnswer)
def single_answer_validator(
    answer: ChoiceAnswer, question: SingleAnswerQuestion
) -> ValidationResult:
    """Exact match, ignoring case and surrounding whitespace for text answers."""
    correct = question.correct_answer
    if same_value(_normalize(answer), _normalize(correct)):
        return ValidationResult.graded(1.0, "Correct!")

    return ValidationResult.graded(0.0, f'Incorrect. The correct answer is "{correct}"')
