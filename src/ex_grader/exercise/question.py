from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Final, Self

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)

from .schema import ExerciseKind

Scalar = bool | int | float | str
"""A single answer value. Union order keeps `True` and `1` distinct."""


def as_list(value: object) -> object:
    """Promote a lone value to a one-element list."""
    if isinstance(value, list | tuple):
        return value
    return [value]


def _correct_answer(*keys: str, **kwargs: Any) -> Any:
    return Field(
        validation_alias=AliasChoices("correct_answer", "correctAnswer", *keys),
        **kwargs,
    )


class Span(BaseModel):
    """A highlighted range of text, as character offsets."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self


class QuestionBase(BaseModel):
    """
    The task definition being graded.

    Only `correct_answer` is interpreted by the validators; any other field
    (prompt text, ids, hints) is kept as an extra.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    kind: ClassVar[ExerciseKind]
    correct_answer: object


class GenericQuestion(QuestionBase):
    """Question of an unknown kind; its correct answer may have any shape."""

    correct_answer: Any = _correct_answer("correct")


class ChoiceQuestion(QuestionBase):
    correct_answer: Scalar = _correct_answer("correct")
    options: list[Any] | dict[str, Any] | None = None

    def correct_option_text(self) -> str:
        """Text of the correct option when `options` holds it, else the raw value."""
        correct = self.correct_answer
        match self.options:
            case list() as options if (
                isinstance(correct, int)
                and not isinstance(correct, bool)
                and 0 <= correct < len(options)
            ):
                return str(options[correct])
            case dict() as options if str(correct) in options:
                return str(options[str(correct)])
        return str(correct)


class MultipleChoiceQuestion(ChoiceQuestion):
    kind: ClassVar = ExerciseKind.MULTIPLE_CHOICE


class SingleAnswerQuestion(ChoiceQuestion):
    kind: ClassVar = ExerciseKind.SINGLE_ANSWER


class MultipleAnswersQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.MULTIPLE_ANSWERS

    correct_answer: Annotated[list[Scalar], BeforeValidator(as_list)] = (
        _correct_answer(min_length=1)
    )


class DragAndDropQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.DRAG_AND_DROP

    correct_answer: dict[str, Scalar] = _correct_answer(
        "correctPositions", min_length=1
    )
    """Item id to the position (drop zone) it belongs in."""


class ClickToChangeQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.CLICK_TO_CHANGE

    correct_answer: dict[str, Scalar] = _correct_answer("finalStates", min_length=1)
    """Element id to its expected final state."""


class BlanksQuestion(QuestionBase):
    correct_answer: list[str | list[str]] = _correct_answer("answers", min_length=1)
    """One entry per blank; a list entry holds accepted alternatives."""


class FillInBlanksQuestion(BlanksQuestion):
    kind: ClassVar = ExerciseKind.FILL_IN_BLANKS


class GapFillQuestion(BlanksQuestion):
    kind: ClassVar = ExerciseKind.GAP_FILL


class HighlightQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.HIGHLIGHT

    correct_answer: list[Span] = _correct_answer("correctSelections", min_length=1)


class SequencingQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.SEQUENCING

    correct_answer: list[Scalar] = _correct_answer("correctSequence", min_length=1)


class TableQuestion(QuestionBase):
    kind: ClassVar = ExerciseKind.TABLE_EXERCISE

    correct_answer: dict[str, dict[str, Scalar]] = _correct_answer("correctTable")
    """Row id to a map of column id to the expected cell value."""


QUESTION_MODELS: Final[Mapping[ExerciseKind, type[QuestionBase]]] = {
    model.kind: model
    for model in (
        MultipleChoiceQuestion,
        MultipleAnswersQuestion,
        SingleAnswerQuestion,
        DragAndDropQuestion,
        FillInBlanksQuestion,
        GapFillQuestion,
        HighlightQuestion,
        ClickToChangeQuestion,
        SequencingQuestion,
        TableQuestion,
    )
}


def parse_question[Q: QuestionBase](model: type[Q], data: object) -> Q:
    """
    Parse raw question data into `model`.

    Accepts a mapping, an instance of `model`, or any object exposing the
    fields as attributes (e.g. a question model of a sibling kind).

    Raises:
        pydantic.ValidationError: if `data` does not have the expected shape.
    """
    return model.model_validate(data, from_attributes=True)


def parse_question_for(kind: ExerciseKind, data: object) -> QuestionBase:
    """Parse raw question data into the model registered for `kind`."""
    return parse_question(QUESTION_MODELS[kind], data)
