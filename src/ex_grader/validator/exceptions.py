from __future__ import annotations


class ValidatorError(Exception):
    """Base exception for the validator module."""


class InvalidFormatError(ValidatorError):
    """Raised inside a validator when the answer or question has the wrong shape.

    Validators built with `validator(...)` turn this into a failed
    `ValidationResult` instead of propagating it.
    """
