from __future__ import annotations

from typing import Final

from ex_grader.exercise import ExerciseKind
from ex_grader.scorer.builtin import ChoiceScorer, SequenceScorer, StandardScorer
from ex_grader.validator.builtin import (
    click_to_change_validator,
    drag_and_drop_validator,
    fill_in_blanks_validator,
    gap_fill_validator,
    highlight_validator,
    multiple_answers_validator,
    multiple_choice_validator,
    sequencing_validator,
    single_answer_validator,
    table_validator,
)

from .main import ExerciseRegistry
from .schema import TypeDescriptor

BUILTIN_TYPES: Final[tuple[TypeDescriptor, ...]] = (
    TypeDescriptor(
        id=ExerciseKind.MULTIPLE_CHOICE,
        name="Multiple Choice",
        aliases=("multiple-choice", "multiple_choice", "mc"),
        renderer="MultipleAnswersWithAnExample",
        fallback_renderer="MultipleAnswers",
        validator=multiple_choice_validator,
        scorer=ChoiceScorer(),
        config={
            "allowMultiple": False,
            "shuffleOptions": True,
            "showFeedback": True,
            "timeLimit": None,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.MULTIPLE_ANSWERS,
        name="Multiple Answers",
        aliases=("multiple-answers", "multiple_answers", "checkbox"),
        renderer="MultipleAnswersWithAnExample",
        fallback_renderer="MultipleAnswers",
        validator=multiple_answers_validator,
        scorer=StandardScorer(),
        config={
            "allowMultiple": True,
            "shuffleOptions": True,
            "showFeedback": True,
            "partialCredit": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.SINGLE_ANSWER,
        name="Single Answer",
        aliases=("single-answer", "single_answer", "radio"),
        renderer="SingleAnswerWithAnExample",
        fallback_renderer="MultipleAnswers",
        validator=single_answer_validator,
        scorer=ChoiceScorer(),
        config={
            "allowMultiple": False,
            "caseSensitive": False,
            "trimWhitespace": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.DRAG_AND_DROP,
        name="Drag and Drop",
        aliases=("drag-and-drop", "drag_and_drop", "dnd"),
        renderer="DragAndDropWithAnExample",
        fallback_renderer="DragAndDrop",
        validator=drag_and_drop_validator,
        scorer=StandardScorer(),
        config={
            "allowPartialCredit": True,
            "snapToGrid": False,
            "showDropZones": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.FILL_IN_BLANKS,
        name="Fill in the Blanks",
        aliases=("fill-in-blanks", "fill_in_blanks", "fill-blanks", "cloze-adjacent"),
        renderer="FillInTheBlanksWithAnExample",
        fallback_renderer="FillInTheBlanks",
        validator=fill_in_blanks_validator,
        scorer=StandardScorer(),
        config={
            "caseSensitive": False,
            "allowPartialCredit": True,
            "acceptAlternatives": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.GAP_FILL,
        name="Gap Fill",
        aliases=("gap-fill", "gap_fill", "cloze"),
        renderer="GapFillWithAnExample",
        fallback_renderer="GapFill",
        validator=gap_fill_validator,
        scorer=StandardScorer(),
        config={
            "caseSensitive": False,
            "allowPartialCredit": True,
            "showWordBank": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.HIGHLIGHT,
        name="Highlight",
        aliases=("text-highlight", "text_highlight", "selection"),
        renderer="HighlightWithAnExample",
        fallback_renderer="Highlight",
        validator=highlight_validator,
        scorer=StandardScorer(),
        config={
            "allowMultipleSelections": True,
            "highlightColor": "#ffeb3b",
            "showProgress": True,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.CLICK_TO_CHANGE,
        name="Click to Change",
        aliases=("click-to-change", "click_to_change", "toggle"),
        renderer="ClickToChangeWithAnExample",
        fallback_renderer="ClickToChange",
        validator=click_to_change_validator,
        scorer=StandardScorer(),
        config={
            "allowUndo": True,
            "showChangesCount": True,
            "maxChanges": None,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.SEQUENCING,
        name="Sequencing",
        aliases=("sequence", "ordering", "arrange"),
        renderer="SequencingWithAnExample",
        fallback_renderer="DragAndDrop",
        validator=sequencing_validator,
        scorer=SequenceScorer(),
        config={
            "allowPartialCredit": True,
            "showPositions": False,
        },
    ),
    TypeDescriptor(
        id=ExerciseKind.TABLE_EXERCISE,
        name="Table Exercise",
        aliases=("table", "organize-information", "categorize"),
        renderer="TableWithAnExample",
        fallback_renderer="DragAndDrop",
        validator=table_validator,
        scorer=StandardScorer(),
        config={
            "allowPartialCredit": True,
            "validateColumns": True,
            "validateRows": True,
        },
    ),
)


def create_registry(*extra: TypeDescriptor) -> ExerciseRegistry:
    """
    Build the frozen registry of built-in exercise types.

    This is the single initialization path: build the registry once at
    startup and pass it to whatever grades answers.

    Args:
        *extra: Additional descriptors, registered after the built-ins.

    Raises:
        AliasCollisionError: if an extra descriptor reuses a taken key.
    """
    registry = ExerciseRegistry()
    for descriptor in (*BUILTIN_TYPES, *extra):
        registry.register(descriptor)
    registry.freeze()
    return registry
