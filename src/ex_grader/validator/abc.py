from __future__ import annotations

from typing import Protocol

from .model import ValidationResult


class ValidatorProtocol(Protocol):
    def __call__(self, answer: object, question: object) -> ValidationResult:
        """
        Grade a learner's answer against a question.

        `answer` and `question` arrive as submitted (plain mappings, lists and
        scalars, or question models).

        Returns:
            The validation outcome. Implementations must not raise for
            malformed user input; report it as a failed validation instead.
        """
        ...
