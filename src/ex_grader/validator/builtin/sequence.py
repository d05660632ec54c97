from __future__ import annotations

from itertools import pairwise

from ex_grader.exercise import SequencingQuestion
from ex_grader.exercise.answer import SequenceAnswer
from ex_grader.exercise.question import Scalar
from ex_grader.validator.factory import validator
from ex_grader.validator.model import SequenceBreakdown, ValidationResult
from ex_grader.validator.utils import deep_equal, index_of


def _is_adjacent(submitted: SequenceAnswer, current: Scalar, following: Scalar) -> bool:
    position = index_of(submitted, current)
    return position != -1 and index_of(submitted, following) == position + 1


@validator(
    SequencingQuestion, SequenceAnswer, invalid_feedback="Invalid sequence format"
)
def sequencing_validator(
    answer: SequenceAnswer, question: SequencingQuestion
) -> ValidationResult:
    """
    Grade an ordering task.

    An exact match scores 1. Otherwise each neighbouring pair of the correct
    sequence earns credit when the second item directly follows the first in
    the submission. Pairs are counted over the longer of the two sequences,
    so padding a submission with extra items cannot reach full credit.
    """
    expected = question.correct_answer
    if deep_equal(answer, expected):
        return ValidationResult.graded(1.0, "Perfect sequence!")

    total_pairs = max(len(expected), len(answer)) - 1
    correct_pairs = sum(
        1
        for current, following in pairwise(expected)
        if _is_adjacent(answer, current, following)
    )

    score = correct_pairs / total_pairs if total_pairs > 0 else 0.0
    return ValidationResult.graded(
        score,
        f"{correct_pairs}/{total_pairs} adjacent pairs correct",
        SequenceBreakdown(correct_pairs=correct_pairs, total_pairs=total_pairs),
    )
