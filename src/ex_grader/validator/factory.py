from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ex_grader.exercise import QuestionBase, parse_question

from .abc import ValidatorProtocol
from .exceptions import InvalidFormatError
from .model import INVALID_ANSWER_FORMAT, ValidationResult


def validator[Q: QuestionBase](
    question_model: type[Q],
    answer_shape: object,
    *,
    invalid_feedback: str = INVALID_ANSWER_FORMAT,
) -> Callable[[Callable[[object, Q], ValidationResult]], ValidatorProtocol]:
    """
    Build a fail-soft validator from a function over parsed inputs.

    The decorated function receives the answer parsed into `answer_shape` and
    the question parsed into `question_model`. Input that does not parse, or
    an `InvalidFormatError` raised by the function, produces a failed
    `ValidationResult` carrying `invalid_feedback`.

    Example:
        >>> @validator(SequencingQuestion, list[str])
        ... def sequence(answer: list[str], question: SequencingQuestion): ...
    """
    adapter = TypeAdapter(answer_shape)

    def decorate(
        func: Callable[[object, Q], ValidationResult],
    ) -> ValidatorProtocol:
        @wraps(func)
        def wrapper(answer: object, question: object) -> ValidationResult:
            try:
                parsed_question = parse_question(question_model, question)
                parsed_answer = adapter.validate_python(answer)
            except ValidationError as e:
                logger.debug(
                    "{} rejected input: {} error(s), first: {}",
                    func.__name__,
                    e.error_count(),
                    e.errors()[0]["msg"],
                )
                return ValidationResult.invalid(invalid_feedback)

            try:
                return func(parsed_answer, parsed_question)
            except InvalidFormatError as e:
                logger.debug("{} rejected input: {}", func.__name__, e)
                return ValidationResult.invalid(invalid_feedback)

        return wrapper

    return decorate
