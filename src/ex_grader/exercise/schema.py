from __future__ import annotations

from enum import StrEnum


class ExerciseKind(StrEnum):
    """Closed set of built-in exercise formats, valued by canonical type id."""

    MULTIPLE_CHOICE = "multipleChoice"
    MULTIPLE_ANSWERS = "multipleAnswers"
    SINGLE_ANSWER = "singleAnswer"
    DRAG_AND_DROP = "dragAndDrop"
    FILL_IN_BLANKS = "fillInBlanks"
    GAP_FILL = "gapFill"
    HIGHLIGHT = "highlight"
    CLICK_TO_CHANGE = "clickToChange"
    SEQUENCING = "sequencing"
    TABLE_EXERCISE = "tableExercise"

    @classmethod
    def from_id(cls, type_id: str) -> ExerciseKind | None:
        """Exact canonical id lookup, without any alias resolution."""
        try:
            return cls(type_id)
        except ValueError:
            return None


class Difficulty(StrEnum):
    BEGINNER = "beginner"
    EASY = "easy"
    MEDIUM = "medium"
    INTERMEDIATE = "intermediate"
    HARD = "hard"
    ADVANCED = "advanced"
    EXPERT = "expert"
