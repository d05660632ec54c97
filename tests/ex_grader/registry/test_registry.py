from __future__ import annotations

import pytest

from ex_grader.exercise import ExerciseKind
from ex_grader.registry import (
    BUILTIN_TYPES,
    AliasCollisionError,
    ExerciseRegistry,
    InvalidDescriptorError,
    RegistryFrozenError,
    TypeDescriptor,
    create_registry,
    normalize_type_id,
)
from ex_grader.scorer.builtin import ChoiceScorer, StandardScorer
from ex_grader.validator import ValidationResult
from ex_grader.validator.builtin import default_validator, multiple_choice_validator


@pytest.fixture
def registry() -> ExerciseRegistry:
    return create_registry()


def always_correct(answer: object, question: object) -> ValidationResult:
    return ValidationResult.graded(1.0, "Correct!")


def test_normalize_type_id():
    assert normalize_type_id("Multiple-Choice") == "multiplechoice"
    assert normalize_type_id(" fill_in blanks ") == "fillinblanks"


class TestLookup:
    @pytest.mark.parametrize(
        "type_id",
        ["multipleChoice", "Multiple-Choice", "multiplechoice", "mc", "MULTIPLE_CHOICE"],
    )
    def test_case_punctuation_and_alias_invariance(self, registry, type_id):
        assert registry.get(type_id) is registry.get("multipleChoice")

    @pytest.mark.parametrize(
        ("type_id", "expected"),
        [
            ("checkbox", ExerciseKind.MULTIPLE_ANSWERS),
            ("radio", ExerciseKind.SINGLE_ANSWER),
            ("dnd", ExerciseKind.DRAG_AND_DROP),
            ("fill-blanks", ExerciseKind.FILL_IN_BLANKS),
            ("cloze-adjacent", ExerciseKind.FILL_IN_BLANKS),
            ("cloze", ExerciseKind.GAP_FILL),
            ("selection", ExerciseKind.HIGHLIGHT),
            ("toggle", ExerciseKind.CLICK_TO_CHANGE),
            ("ordering", ExerciseKind.SEQUENCING),
            ("arrange", ExerciseKind.SEQUENCING),
            ("categorize", ExerciseKind.TABLE_EXERCISE),
        ],
    )
    def test_builtin_aliases(self, registry, type_id, expected):
        assert registry.resolve_kind(type_id) is expected

    def test_repeated_lookup_returns_same_object(self, registry):
        assert registry.get("gap-fill") is registry.get("gap-fill")

    @pytest.mark.parametrize("type_id", [None, "", "---", "  ", "zzz"])
    def test_unresolvable(self, registry, type_id):
        assert registry.get(type_id) is None
        assert registry.resolve_kind(type_id) is None

    def test_contains(self, registry):
        assert "Drag And Drop" in registry
        assert "zzz" not in registry


class TestFuzzyLookup:
    """The substring fallback is a heuristic; these cases pin its behavior."""

    @pytest.mark.parametrize(
        ("type_id", "expected"),
        [
            ("choice", ExerciseKind.MULTIPLE_CHOICE),
            ("mcq", ExerciseKind.MULTIPLE_CHOICE),
            ("tables", ExerciseKind.TABLE_EXERCISE),
            ("order", ExerciseKind.SEQUENCING),
            ("gap-fill-exercise", ExerciseKind.GAP_FILL),
            # ambiguous input resolves to the first registered match
            ("answer", ExerciseKind.MULTIPLE_ANSWERS),
            ("fill", ExerciseKind.FILL_IN_BLANKS),
            # a single letter hits the first key containing it
            ("x", ExerciseKind.MULTIPLE_ANSWERS),
        ],
    )
    def test_substring_matches(self, registry, type_id, expected):
        assert registry.resolve_kind(type_id) is expected

    def test_short_key_shadows_longer_one(self):
        registry = ExerciseRegistry()
        table = TypeDescriptor(id="table")
        table_exercise = TypeDescriptor(id="tableExercise")
        registry.register(table)
        registry.register(table_exercise)

        assert registry.get("tableExercise") is table_exercise
        assert registry.get("table-exercise") is table_exercise
        # neither exact nor normalized: the first key in registration order wins
        assert registry.get("tableExercises") is table
        assert registry.get("tab") is table


class TestAccessors:
    def test_validator_and_scorer(self, registry):
        assert registry.get_validator("mc") is multiple_choice_validator
        assert isinstance(registry.get_scorer("radio"), ChoiceScorer)

    def test_unknown_type_gets_defaults(self, registry):
        validate = registry.get_validator("totally-unknown-type")
        assert validate is default_validator
        assert validate([1], {"correctAnswer": [1]}).is_correct
        assert isinstance(registry.get_scorer("totally-unknown-type"), StandardScorer)

    def test_descriptor_without_rules_gets_defaults(self):
        registry = ExerciseRegistry()
        registry.register(TypeDescriptor(id="essay"))
        assert registry.get_validator("essay") is default_validator
        assert isinstance(registry.get_scorer("essay"), StandardScorer)

    def test_renderer_falls_back(self, registry):
        assert registry.get_renderer("table") == "TableWithAnExample"
        registry = ExerciseRegistry()
        registry.register(TypeDescriptor(id="essay", fallback_renderer="TextArea"))
        assert registry.get_renderer("essay") == "TextArea"
        assert registry.get_renderer("unknown") is None

    def test_config_is_a_copy(self, registry):
        config = registry.get_config("cloze")
        assert config["showWordBank"] is True
        config["showWordBank"] = False
        assert registry.get_config("cloze")["showWordBank"] is True

    def test_unknown_config_is_empty(self, registry):
        assert registry.get_config("unknown") == {}

    def test_all_types_are_distinct(self, registry):
        types = registry.get_all_types()
        assert [t.id for t in types] == [d.id for d in BUILTIN_TYPES]
        assert {t.kind for t in types} == set(ExerciseKind)


class TestRegister:
    def test_empty_id(self):
        with pytest.raises(InvalidDescriptorError):
            ExerciseRegistry().register(TypeDescriptor(id=""))

    def test_alias_normalizing_to_nothing(self):
        with pytest.raises(InvalidDescriptorError):
            ExerciseRegistry().register(TypeDescriptor(id="essay", aliases=["--"]))

    def test_alias_collision(self):
        registry = ExerciseRegistry()
        registry.register(TypeDescriptor(id="essay", aliases=["free-text"]))
        with pytest.raises(AliasCollisionError) as exc_info:
            registry.register(TypeDescriptor(id="shortAnswer", aliases=["FreeText"]))
        assert exc_info.value.existing_id == "essay"
        assert registry.get("shortAnswer") is None

    def test_builtin_collision_at_startup(self):
        with pytest.raises(AliasCollisionError):
            create_registry(TypeDescriptor(id="quiz", aliases=["mc"]))

    def test_replace(self):
        registry = ExerciseRegistry()
        old = TypeDescriptor(id="essay", aliases=["free-text", "free_text"])
        new = TypeDescriptor(id="longAnswer", aliases=["free-text"])
        registry.register(old)
        registry.register(new, replace=True)

        assert registry.get("free-text") is new
        assert registry.get("free_text") is new
        assert registry.get("essay") is old

    def test_same_descriptor_twice(self):
        registry = ExerciseRegistry()
        descriptor = TypeDescriptor(id="essay")
        registry.register(descriptor)
        registry.register(descriptor)
        assert registry.get_all_types() == [descriptor]

    def test_string_alias(self):
        descriptor = TypeDescriptor(id="essay", aliases="free-text")
        assert descriptor.aliases == ("free-text",)

    def test_frozen(self, registry):
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(TypeDescriptor(id="essay"))

    def test_extra_descriptors(self):
        registry = create_registry(
            TypeDescriptor(id="trueFalse", aliases=["boolean"], validator=always_correct)
        )
        assert registry.get_validator("true-false") is always_correct
        assert registry.get("boolean").kind is None
        assert registry.frozen

    def test_descriptor_config_is_read_only(self):
        descriptor = TypeDescriptor(id="essay", config={"maxWords": 100})
        with pytest.raises(TypeError):
            descriptor.config["maxWords"] = 5  # type: ignore[index]
