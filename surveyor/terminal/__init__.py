"""Terminal collaborators: streams, decoded keys and scoped raw mode."""

from contextlib import contextmanager
from typing import Iterator

from .keys import Key, KeyEvent, is_printable
from .reader import KeyReader, decode_key_press
from .stdio import Stdio, default_stdio


@contextmanager
def interactive(stdio: Stdio, hide_cursor: bool = False) -> Iterator[KeyReader]:
    """Put the terminal in raw mode for the duration of a prompt.

    Raw mode and cursor visibility are restored on every exit path.
    """
    with stdio.input.raw_mode():
        if hide_cursor:
            stdio.output.hide_cursor()
            stdio.output.flush()
        try:
            yield stdio.reader
        finally:
            if hide_cursor:
                stdio.output.show_cursor()
                stdio.output.flush()


__all__ = [
    "Key",
    "KeyEvent",
    "is_printable",
    "KeyReader",
    "decode_key_press",
    "Stdio",
    "default_stdio",
    "interactive",
]
