from __future__ import annotations

from ex_grader.exercise import HighlightQuestion, MultipleAnswersQuestion
from ex_grader.exercise.answer import MultiAnswer, SpanAnswer
from ex_grader.validator.factory import validator
from ex_grader.validator.model import SelectionBreakdown, ValidationResult
from ex_grader.validator.utils import contains, unique

INCORRECT_SELECTION_COST = 0.5
"""Credit lost per wrongly highlighted span."""


@validator(MultipleAnswersQuestion, MultiAnswer)
def multiple_answers_validator(
    answer: MultiAnswer, question: MultipleAnswersQuestion
) -> ValidationResult:
    """
    Partial credit for checkbox-style questions.

    Every wrong pick cancels one right pick:
    `score = max(0, (correct - incorrect) / required)`.
    """
    required = unique(question.correct_answer)
    picks = unique(answer)

    correct_count = sum(1 for pick in picks if contains(required, pick))
    incorrect_count = len(picks) - correct_count
    missed_count = sum(1 for item in required if not contains(picks, item))

    score = max(0.0, (correct_count - incorrect_count) / len(required))
    feedback = (
        "Correct!"
        if score == 1
        else f"Partial credit: {correct_count}/{len(required)} correct"
    )
    return ValidationResult.graded(
        score,
        feedback,
        SelectionBreakdown(
            correct_count=correct_count,
            incorrect_count=incorrect_count,
            missed_count=missed_count,
        ),
    )


@validator(
    HighlightQuestion, SpanAnswer, invalid_feedback="Invalid selection format"
)
def highlight_validator(
    answer: SpanAnswer, question: HighlightQuestion
) -> ValidationResult:
    """
    Partial credit for text highlighting.

    A span counts only when both offsets match a correct span; each wrong
    span costs half a correct one.
    """
    expected = unique(question.correct_answer)
    selections = unique(answer)

    correct_count = sum(1 for span in selections if span in expected)
    incorrect_count = len(selections) - correct_count
    missed_count = len(expected) - correct_count

    penalty = INCORRECT_SELECTION_COST * incorrect_count
    score = max(0.0, (correct_count - penalty) / len(expected))
    feedback = (
        "Perfect highlighting!"
        if score == 1
        else f"{correct_count}/{len(expected)} correct selections"
    )
    return ValidationResult.graded(
        score,
        feedback,
        SelectionBreakdown(
            correct_count=correct_count,
            incorrect_count=incorrect_count,
            missed_count=missed_count,
        ),
    )
