from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from ex_grader.exercise import SequencingQuestion
from ex_grader.validator import ValidationResult, validator
from ex_grader.validator.exceptions import InvalidFormatError
from ex_grader.validator.utils import deep_equal, index_of, same_value, unique


@validator(SequencingQuestion, list[int], invalid_feedback="Bad input")
def length_validator(answer: list[int], question: SequencingQuestion) -> ValidationResult:
    if len(answer) > 10:
        raise InvalidFormatError("too long")
    matched = len(answer) == len(question.correct_answer)
    return ValidationResult.graded(1.0 if matched else 0.0, "ok")


class TestValidatorDecorator:
    def test_receives_parsed_input(self):
        result = length_validator((1, 2), {"correctSequence": ["a", "b"]})
        assert result.is_correct

    def test_unparseable_answer(self):
        result = length_validator(["x"], {"correctSequence": ["a"]})
        assert result == ValidationResult.invalid("Bad input")

    def test_unparseable_question(self):
        assert length_validator([1], None).feedback == "Bad input"

    def test_invalid_format_error_is_reported(self):
        result = length_validator(list(range(11)), {"correctSequence": ["a"]})
        assert result.score == 0
        assert result.feedback == "Bad input"

    def test_keeps_function_name(self):
        assert length_validator.__name__ == "length_validator"


class TestValidationResult:
    def test_graded_derives_flags(self):
        assert ValidationResult.graded(1.0, "").is_correct
        assert ValidationResult.graded(0.5, "").partial
        zero = ValidationResult.graded(0.0, "")
        assert not zero.is_correct and not zero.partial

    def test_graded_clamps(self):
        assert ValidationResult.graded(-0.5, "").score == 0
        assert ValidationResult.graded(1.5, "").score == 1

    def test_inconsistent_flags_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(is_correct=True, score=0.5, feedback="", partial=True)
        with pytest.raises(ValidationError):
            ValidationResult(is_correct=False, score=0.5, feedback="", partial=False)

    def test_serializes_camel_case(self):
        dumped = ValidationResult.graded(1.0, "Correct!").model_dump(by_alias=True)
        assert dumped["isCorrect"] is True


class TestUtils:
    def test_same_value(self):
        assert same_value(1, 1.0)
        assert not same_value(True, 1)
        assert not same_value(0, False)
        assert same_value(False, False)

    def test_deep_equal(self):
        assert deep_equal([1, {"a": (2, 3)}], [1, {"a": [2, 3]}])
        assert not deep_equal([1, 2], [1, 2, 3])
        assert not deep_equal({"a": 1}, [("a", 1)])
        assert not deep_equal([True], [1])

    def test_deep_equal_beyond_recursion_limit(self):
        deep = shallow = []
        for _ in range(sys.getrecursionlimit() * 2):
            deep = [deep]
        assert deep_equal(deep, deep)
        assert not deep_equal(deep, shallow)

    def test_unique_and_index_of(self):
        assert unique([1, True, 1, "1"]) == [1, True, "1"]
        assert index_of(["a", "b"], "b") == 1
        assert index_of(["a"], "z") == -1
