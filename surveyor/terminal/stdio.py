"""Terminal stream pairs."""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import TextIO

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.output import Output, create_output

from .reader import KeyReader


@dataclass
class Stdio:
    """The input and output a widget talks to.

    The key reader is shared by every prompt using this Stdio, so keys typed
    ahead of a prompt are not lost between questions.
    """
    input: Input
    output: Output
    _reader: KeyReader | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_files(cls, stdin: TextIO | None = None, stdout: TextIO | None = None) -> "Stdio":
        """Wrap file objects (default: sys.stdin/sys.stdout) for prompting."""
        return cls(input=create_input(stdin=stdin), output=create_output(stdout=stdout))

    @property
    def reader(self) -> KeyReader:
        if self._reader is None:
            self._reader = KeyReader(self.input)
        return self._reader


@lru_cache(maxsize=None)
def default_stdio() -> Stdio:
    """Return the Stdio bound to the process standard streams."""
    return Stdio.from_files()


__all__ = ["Stdio", "default_stdio"]
