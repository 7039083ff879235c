"""Painting prompt frames to the terminal.

Templates are plain functions turning a frozen snapshot into prompt_toolkit
style/text fragments. The renderer remembers how many lines the last frame
used so the next frame can be drawn in its place.
"""

from dataclasses import dataclass
from typing import Any, Callable

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText, StyleAndTextTuples, fragment_list_to_text
from prompt_toolkit.styles import Style

from .terminal import Stdio, default_stdio

QUESTION_ICON = "?"
HELP_ICON = "?"
ERROR_ICON = "X"
SELECT_FOCUS_ICON = ">"

STYLE = Style.from_dict(
    {
        "question-icon": "fg:#00aa00 bold",
        "message": "bold",
        "answer": "fg:#00ffff",
        "hint": "fg:#00ffff",
        "help": "fg:#00ffff",
        "selected": "fg:#00ffff bold",
        "option": "",
        "error": "fg:#ff0000 bold",
    }
)

Template = Callable[[Any], StyleAndTextTuples]


@dataclass(frozen=True)
class ErrorTemplateData:
    error: str


def error_template(data: ErrorTemplateData) -> StyleAndTextTuples:
    return [("class:error", f"{ERROR_ICON} Sorry, your reply was invalid: {data.error}\n")]


class Renderer:
    """Base class for widgets that draw themselves on a terminal."""

    def __init__(self) -> None:
        self._stdio: Stdio | None = None
        self._rendered_lines = 0
        self._error_lines = 0

    def with_stdio(self, stdio: Stdio) -> None:
        self._stdio = stdio

    @property
    def stdio(self) -> Stdio:
        if self._stdio is None:
            self._stdio = default_stdio()
        return self._stdio

    def render(self, template: Template, data: Any) -> None:
        """Replace the previous frame with ``template(data)``."""
        self._erase(self._rendered_lines)
        self._rendered_lines = self._write(template(data))

    def render_final(self, template: Template, data: Any) -> None:
        """Draw a frame that stays on screen. Later frames start below it."""
        self.render(template, data)
        self._rendered_lines = 0
        self._error_lines = 0

    def render_error(self, err: Exception) -> None:
        """Replace the previous frame and error line with an error message.

        The next frame is drawn below the error, which stays visible until the
        next error replaces it.
        """
        self._erase(self._rendered_lines)
        self._rendered_lines = 0
        self._erase(self._error_lines)
        self._error_lines = self._write(error_template(ErrorTemplateData(error=str(err))))

    def _write(self, fragments: StyleAndTextTuples) -> int:
        print_formatted_text(
            FormattedText(fragments), end="", style=STYLE, output=self.stdio.output
        )
        return fragment_list_to_text(fragments).count("\n")

    def _erase(self, lines: int) -> None:
        output = self.stdio.output
        output.write_raw("\r")
        if lines:
            output.cursor_up(lines)
        output.erase_down()
        output.flush()


__all__ = [
    "QUESTION_ICON",
    "HELP_ICON",
    "ERROR_ICON",
    "SELECT_FOCUS_ICON",
    "STYLE",
    "Template",
    "ErrorTemplateData",
    "error_template",
    "Renderer",
]
