from __future__ import annotations

from ex_grader.exercise import BlanksQuestion, FillInBlanksQuestion, GapFillQuestion
from ex_grader.exercise.answer import BlanksAnswer
from ex_grader.validator.factory import validator
from ex_grader.validator.model import BlankResult, BlanksBreakdown, ValidationResult


def _normalize(text: str) -> str:
    return text.strip().lower()


def _accepts(expected: str | list[str], text: str) -> bool:
    alternatives = expected if isinstance(expected, list) else [expected]
    return any(_normalize(alternative) == text for alternative in alternatives)


def grade_blanks(answer: BlanksAnswer, question: BlanksQuestion) -> ValidationResult:
    """
    Grade blanks position by position.

    Comparison ignores case and surrounding whitespace; a blank with a list
    of alternatives accepts any of them. Blanks left out of the submission
    count as empty.
    """
    results: list[BlankResult] = []
    for idx, expected in enumerate(question.correct_answer):
        text = _normalize(answer[idx]) if idx < len(answer) else ""
        results.append(
            BlankResult(
                is_correct=_accepts(expected, text),
                user_answer=text,
                correct_answer=expected,
            )
        )

    correct_count = sum(1 for result in results if result.is_correct)
    total_count = len(results)

    score = correct_count / total_count
    feedback = (
        "All blanks filled correctly!"
        if score == 1
        else f"{correct_count}/{total_count} blanks correct"
    )
    return ValidationResult.graded(
        score,
        feedback,
        BlanksBreakdown(
            correct_count=correct_count, total_count=total_count, results=results
        ),
    )


@validator(FillInBlanksQuestion, BlanksAnswer)
def fill_in_blanks_validator(
    answer: BlanksAnswer, question: FillInBlanksQuestion
) -> ValidationResult:
    return grade_blanks(answer, question)


@validator(GapFillQuestion, BlanksAnswer)
def gap_fill_validator(
    answer: BlanksAnswer, question: GapFillQuestion
) -> ValidationResult:
    return grade_blanks(answer, question)
