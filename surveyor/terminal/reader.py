"""Blocking key reader on top of prompt_toolkit's VT100 decoder."""

import logging
import select
from collections import deque

from prompt_toolkit.input import Input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from ..errors import TerminalClosedError
from .keys import Key, KeyEvent

_logging = logging.getLogger(__name__)

# How long a lone escape byte waits for the rest of a sequence
ESCAPE_FLUSH_TIMEOUT = 0.05

_KEY_MAP: dict[str, Key] = {
    Keys.ControlC: Key.INTERRUPT,
    Keys.ControlD: Key.END_TRANSMISSION,
    Keys.ControlM: Key.ENTER,
    Keys.ControlJ: Key.ENTER,
    Keys.Up: Key.ARROW_UP,
    Keys.Down: Key.ARROW_DOWN,
    Keys.Left: Key.ARROW_LEFT,
    Keys.Right: Key.ARROW_RIGHT,
    Keys.Escape: Key.ESCAPE,
    Keys.ControlW: Key.DELETE_WORD,
    Keys.ControlU: Key.DELETE_LINE,
    Keys.Delete: Key.DELETE,
    Keys.ControlH: Key.BACKSPACE,
}


def decode_key_press(key_press: KeyPress) -> list[KeyEvent]:
    """Translate one prompt_toolkit key press into zero or more key events."""
    key = key_press.key
    if key in _KEY_MAP:
        return [_KEY_MAP[key]]
    if key == Keys.BracketedPaste:
        return [c for c in key_press.data if c >= " "]
    if not isinstance(key, Keys) and len(key) == 1:
        return [key]
    _logging.debug(f"Ignoring unsupported key: {key!r}")
    return []


class KeyReader:
    """Yields decoded keys from a prompt_toolkit ``Input`` one at a time."""

    def __init__(self, input: Input, flush_timeout: float = ESCAPE_FLUSH_TIMEOUT):
        self._input = input
        self._flush_timeout = flush_timeout
        self._pending: deque[KeyEvent] = deque()

    def read_key(self) -> KeyEvent:
        """Block until the next key is available and return it.

        Raises:
            TerminalClosedError: If the input stream has been closed
        """
        while not self._pending:
            ready, _, _ = select.select([self._input.fileno()], [], [], self._flush_timeout)
            if ready:
                presses = self._input.read_keys()
                if not presses and self._input.closed:
                    raise TerminalClosedError()
            else:
                presses = self._input.flush_keys()
            for key_press in presses:
                self._pending.extend(decode_key_press(key_press))
        return self._pending.popleft()


__all__ = ["KeyReader", "decode_key_press", "ESCAPE_FLUSH_TIMEOUT"]
