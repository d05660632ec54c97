from __future__ import annotations

from .question import (
    QUESTION_MODELS,
    BlanksQuestion,
    ChoiceQuestion,
    ClickToChangeQuestion,
    DragAndDropQuestion,
    FillInBlanksQuestion,
    GapFillQuestion,
    GenericQuestion,
    HighlightQuestion,
    MultipleAnswersQuestion,
    MultipleChoiceQuestion,
    QuestionBase,
    SequencingQuestion,
    SingleAnswerQuestion,
    Span,
    TableQuestion,
    parse_question,
    parse_question_for,
)
from .schema import Difficulty, ExerciseKind

__all__ = [
    "QUESTION_MODELS",
    "BlanksQuestion",
    "ChoiceQuestion",
    "ClickToChangeQuestion",
    "Difficulty",
    "DragAndDropQuestion",
    "ExerciseKind",
    "FillInBlanksQuestion",
    "GapFillQuestion",
    "GenericQuestion",
    "HighlightQuestion",
    "MultipleAnswersQuestion",
    "MultipleChoiceQuestion",
    "QuestionBase",
    "SequencingQuestion",
    "SingleAnswerQuestion",
    "Span",
    "TableQuestion",
    "parse_question",
    "parse_question_for",
]
