"""Stock answer validators.

A validator is any callable taking the answer and raising
``ValidationError`` to reject it.
"""

from collections.abc import Sized
from typing import Any, Callable

from .errors import ValidationError

Validator = Callable[[Any], None]


def required(answer: Any) -> None:
    """Reject empty answers: None, empty strings and collections, False, 0."""
    if answer is None:
        raise ValidationError("Value is required")
    if isinstance(answer, Sized):
        if len(answer) == 0:
            raise ValidationError("Value is required")
        return
    if not answer:
        raise ValidationError("Value is required")


def _length(answer: Any) -> int:
    if not isinstance(answer, Sized):
        raise ValidationError(f"cannot measure the length of {type(answer).__name__}")
    return len(answer)


def max_length(length: int) -> Validator:
    """Reject answers longer than ``length``."""
    def _validate(answer: Any) -> None:
        if _length(answer) > length:
            raise ValidationError(f"value is too long. Max length is {length}")
    return _validate


def min_length(length: int) -> Validator:
    """Reject answers shorter than ``length``."""
    def _validate(answer: Any) -> None:
        if _length(answer) < length:
            raise ValidationError(f"value is too short. Min length is {length}")
    return _validate


def compose_validators(*validators: Validator) -> Validator:
    """Run several validators as one; the first rejection wins."""
    def _validate(answer: Any) -> None:
        for validator in validators:
            validator(answer)
    return _validate


__all__ = ["Validator", "required", "max_length", "min_length", "compose_validators"]
