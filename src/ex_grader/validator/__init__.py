from __future__ import annotations

from .abc import ValidatorProtocol
from .factory import validator
from .model import (
    BlankResult,
    BlanksBreakdown,
    Breakdown,
    PlacementBreakdown,
    SelectionBreakdown,
    SequenceBreakdown,
    TableBreakdown,
    ValidationResult,
)

__all__ = [
    "BlankResult",
    "BlanksBreakdown",
    "Breakdown",
    "PlacementBreakdown",
    "SelectionBreakdown",
    "SequenceBreakdown",
    "TableBreakdown",
    "ValidationResult",
    "ValidatorProtocol",
    "validator",
]
