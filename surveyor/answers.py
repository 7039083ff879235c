"""Writing answers into the caller's answer sink."""

import dataclasses
import logging
import typing
from collections.abc import MutableMapping
from typing import Any

from .errors import AnswerWriteError

_logging = logging.getLogger(__name__)

# Dataclass field metadata key naming the question a field answers
TAG = "survey"

_TRUE = {"true", "yes", "y", "1", "on"}
_FALSE = {"false", "no", "n", "0", "off", ""}


def _unwrap_optional(hint: Any) -> Any:
    """Return ``int`` for ``int | None`` and ``Optional[int]``, else ``hint``."""
    args = typing.get_args(hint)
    if type(None) in args:
        rest = [arg for arg in args if arg is not type(None)]
        if len(rest) == 1:
            return rest[0]
    return hint


def _convert(value: Any, target_type: Any, name: str) -> Any:
    """Convert string answers into simple typed fields."""
    target_type = _unwrap_optional(target_type)
    if not isinstance(value, str) or target_type not in (int, float, bool):
        return value
    if target_type is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise AnswerWriteError(f"cannot convert {value!r} to bool for field '{name}'")
    try:
        return target_type(value)
    except ValueError as e:
        raise AnswerWriteError(
            f"cannot convert {value!r} to {target_type.__name__} for field '{name}'"
        ) from e


def _is_data_attribute(target: Any, attribute: str) -> bool:
    if attribute.startswith("__"):
        return False
    return not callable(getattr(target, attribute, None))


def _find_field(target: Any, name: str) -> tuple[str, Any]:
    """Return (attribute name, type hint) of the field answering ``name``.

    Plain objects are searched through ``dir()``, so class attributes and
    unset ``__slots__`` entries count as fields. Methods never do.
    """
    try:
        hints = typing.get_type_hints(type(target))
    except (NameError, TypeError):
        hints = {}

    if dataclasses.is_dataclass(target):
        fields = dataclasses.fields(target)
        for f in fields:
            if f.metadata.get(TAG) == name:
                return f.name, hints.get(f.name)
        for f in fields:
            if f.name == name:
                return f.name, hints.get(f.name)
        for f in fields:
            if f.name.lower() == name.lower():
                return f.name, hints.get(f.name)
        raise AnswerWriteError(f"could not find field matching '{name}'")

    attributes = [a for a in dir(target) if _is_data_attribute(target, a)]
    if name in attributes:
        return name, hints.get(name)
    for attribute in attributes:
        if attribute.lower() == name.lower():
            return attribute, hints.get(attribute)
    raise AnswerWriteError(f"could not find field matching '{name}'")


def write_answer(target: Any, name: str, value: Any) -> None:
    """Store ``value`` under ``name`` in ``target``.

    Args:
        target: A mapping, an object with a ``write_answer(name, value)``
            method, or an object (dataclass or plain) with a matching field
        name: The question name
        value: The final answer

    Raises:
        AnswerWriteError: If no matching field exists or the value cannot be
            converted to the field's type
    """
    writer = getattr(target, "write_answer", None)
    if callable(writer):
        writer(name, value)
        return

    if isinstance(target, MutableMapping):
        target[name] = value
        return

    attribute, hint = _find_field(target, name)
    converted = _convert(value, hint, attribute)
    _logging.debug(f"Writing answer for '{name}' into field '{attribute}'")
    try:
        setattr(target, attribute, converted)
    except (AttributeError, TypeError) as e:
        raise AnswerWriteError(f"cannot write field '{attribute}': {e}") from e


__all__ = ["TAG", "write_answer"]
