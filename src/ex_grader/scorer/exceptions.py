from __future__ import annotations


class ScorerError(Exception):
    """Base exception for the scorer module."""


class PolicyError(ScorerError):
    """Raised when a scoring policy is constructed with out-of-range values."""
