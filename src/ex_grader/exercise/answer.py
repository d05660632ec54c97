from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from .question import Scalar, Span, as_list


def _blank_text(value: object) -> object:
    match value:
        case None:
            return ""
        case bool():
            return value
        case int() | float():
            return str(value)
    return value


ChoiceAnswer = Scalar
MultiAnswer = Annotated[list[Scalar], BeforeValidator(as_list)]
PlacementAnswer = dict[str, Scalar | None]
BlanksAnswer = list[Annotated[str, BeforeValidator(_blank_text)]]
SpanAnswer = list[Span]
SequenceAnswer = list[Scalar]
TableAnswer = dict[str, dict[str, Scalar | None]]

