from __future__ import annotations

from collections.abc import Mapping

from ex_grader.exercise import (
    ClickToChangeQuestion,
    DragAndDropQuestion,
    TableQuestion,
)
from ex_grader.exercise.answer import PlacementAnswer, TableAnswer
from ex_grader.exercise.question import Scalar
from ex_grader.validator.factory import validator
from ex_grader.validator.model import (
    PlacementBreakdown,
    TableBreakdown,
    ValidationResult,
)
from ex_grader.validator.utils import same_value


def _count_matches(
    expected: Mapping[str, Scalar], submitted: Mapping[str, Scalar | None]
) -> int:
    """Number of expected keys whose submitted value matches. Extra keys are ignored."""
    return sum(
        1
        for key, value in expected.items()
        if key in submitted and same_value(submitted[key], value)
    )


@validator(DragAndDropQuestion, PlacementAnswer)
def drag_and_drop_validator(
    answer: PlacementAnswer, question: DragAndDropQuestion
) -> ValidationResult:
    """Fraction of items dropped in their correct position."""
    correct_count = _count_matches(question.correct_answer, answer)
    total_count = len(question.correct_answer)

    score = correct_count / total_count
    feedback = (
        "Perfect!"
        if score == 1
        else f"{correct_count}/{total_count} items in correct position"
    )
    return ValidationResult.graded(
        score,
        feedback,
        PlacementBreakdown(correct_count=correct_count, total_count=total_count),
    )


@validator(ClickToChangeQuestion, PlacementAnswer)
def click_to_change_validator(
    answer: PlacementAnswer, question: ClickToChangeQuestion
) -> ValidationResult:
    """Fraction of toggled elements left in their expected final state."""
    correct_count = _count_matches(question.correct_answer, answer)
    total_count = len(question.correct_answer)

    score = correct_count / total_count
    feedback = (
        "All elements in correct state!"
        if score == 1
        else f"{correct_count}/{total_count} elements correct"
    )
    return ValidationResult.graded(
        score,
        feedback,
        PlacementBreakdown(correct_count=correct_count, total_count=total_count),
    )


@validator(TableQuestion, TableAnswer, invalid_feedback="Invalid table format")
def table_validator(answer: TableAnswer, question: TableQuestion) -> ValidationResult:
    """Fraction of table cells holding the expected value. An empty table scores 0."""
    correct_cells = 0
    total_cells = 0
    for row, columns in question.correct_answer.items():
        total_cells += len(columns)
        correct_cells += _count_matches(columns, answer.get(row, {}))

    score = correct_cells / total_cells if total_cells else 0.0
    feedback = (
        "Table completed correctly!"
        if score == 1
        else f"{correct_cells}/{total_cells} cells correct"
    )
    return ValidationResult.graded(
        score,
        feedback,
        TableBreakdown(correct_cells=correct_cells, total_cells=total_cells),
    )
