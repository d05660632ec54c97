from __future__ import annotations

from .blanks import fill_in_blanks_validator, gap_fill_validator
from .choice import multiple_choice_validator, single_answer_validator
from .generic import default_validator
from .placement import (
    click_to_change_validator,
    drag_and_drop_validator,
    table_validator,
)
from .selection import highlight_validator, multiple_answers_validator
from .sequence import sequencing_validator

__all__ = [
    "click_to_change_validator",
    "default_validator",
    "drag_and_drop_validator",
    "fill_in_blanks_validator",
    "gap_fill_validator",
    "highlight_validator",
    "multiple_answers_validator",
    "multiple_choice_validator",
    "sequencing_validator",
    "single_answer_validator",
    "table_validator",
]
