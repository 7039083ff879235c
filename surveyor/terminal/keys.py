"""Decoded key values produced by the key reader."""

from enum import Enum


class Key(Enum):
    """Named control keys.

    Printable characters are not members: they arrive as one-character strings.
    """
    INTERRUPT = "interrupt"
    END_TRANSMISSION = "end-transmission"
    ENTER = "enter"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    ESCAPE = "escape"
    DELETE_WORD = "delete-word"
    DELETE_LINE = "delete-line"
    DELETE = "delete"
    BACKSPACE = "backspace"


KeyEvent = Key | str


def is_printable(key: KeyEvent) -> bool:
    """Return True for a single character at or above space."""
    return isinstance(key, str) and len(key) == 1 and key >= " "


__all__ = ["Key", "KeyEvent", "is_printable"]
