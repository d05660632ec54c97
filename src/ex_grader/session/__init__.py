from __future__ import annotations

from .main import GradingSession
from .model import GradedAttempt, SessionStats

__all__ = [
    "GradedAttempt",
    "GradingSession",
    "SessionStats",
]
