"""Free-text line input widget."""

import logging
from dataclasses import dataclass
from typing import Any

from prompt_toolkit.formatted_text import StyleAndTextTuples

from ..config import PromptConfig
from ..errors import InterruptError
from ..render import HELP_ICON, QUESTION_ICON, Renderer
from ..terminal import Key, KeyEvent, interactive, is_printable
from .base import Prompt

_logging = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputTemplateData:
    """Snapshot of an Input widget handed to the template."""
    message: str
    default: str = ""
    help: str = ""
    help_input: str = "?"
    line: str = ""
    answer: str = ""
    show_answer: bool = False
    show_help: bool = False


def input_question_template(data: InputTemplateData) -> StyleAndTextTuples:
    tokens: StyleAndTextTuples = []
    if data.show_help:
        tokens.append(("class:help", f"{HELP_ICON} {data.help}\n"))
    tokens.append(("class:question-icon", f"{QUESTION_ICON} "))
    tokens.append(("class:message", f"{data.message} "))

    if data.show_answer:
        tokens.append(("class:answer", f"{data.answer}\n"))
        return tokens

    if data.help and not data.show_help:
        tokens.append(("class:hint", f"[{data.help_input} for help] "))
    if data.default:
        tokens.append(("class:hint", f"({data.default}) "))
    tokens.append(("", data.line))
    return tokens


class _InputState:
    def __init__(self, line: str = ""):
        self.line = line
        self.showing_help = False


class Input(Renderer, Prompt):
    """Reads one line of text. An empty line answers with ``default``."""

    def __init__(self, message: str, default: str = "", help: str = ""):
        super().__init__()
        self.message = message
        self.default = default
        self.help = help
        self._state = _InputState()

    @property
    def line(self) -> str:
        return self._state.line

    def _snapshot(self, config: PromptConfig) -> InputTemplateData:
        return InputTemplateData(
            message=self.message,
            default=self.default,
            help=self.help,
            help_input=config.help_input,
            line=self._state.line,
            show_help=self._state.showing_help,
        )

    def on_change(self, key: KeyEvent, config: PromptConfig) -> bool:
        """React to one key and redraw. Returns True on Enter."""
        state = self._state
        done = False

        if key is Key.ENTER:
            done = True
        elif key is Key.BACKSPACE or key is Key.DELETE:
            state.line = state.line[:-1]
        elif key is Key.DELETE_WORD:
            trimmed = state.line.rstrip()
            state.line = trimmed[: trimmed.rfind(" ") + 1]
        elif key is Key.DELETE_LINE:
            state.line = ""
        elif key == config.help_input and self.help and not state.line and not state.showing_help:
            state.showing_help = True
        elif is_printable(key):
            state.line += key

        self.render(input_question_template, self._snapshot(config))
        return done

    def _read_line(self, config: PromptConfig, initial: str) -> str:
        self._state = _InputState(initial)
        self.render(input_question_template, self._snapshot(config))

        with interactive(self.stdio) as reader:
            while True:
                key = reader.read_key()
                if key is Key.INTERRUPT:
                    raise InterruptError()
                if key is Key.END_TRANSMISSION:
                    break
                if self.on_change(key, config):
                    break

        return self._state.line or self.default

    def prompt(self, config: PromptConfig) -> str:
        return self._read_line(config, "")

    def prompt_again(self, invalid: Any, err: Exception, config: PromptConfig) -> str:
        """Prompt again with the rejected answer ready for editing."""
        initial = "" if invalid is None else str(invalid)
        return self._read_line(config, initial)

    def cleanup(self, config: PromptConfig, answer: Any) -> None:
        self.render_final(
            input_question_template,
            InputTemplateData(
                message=self.message,
                help=self.help,
                help_input=config.help_input,
                answer=str(answer),
                show_answer=True,
            ),
        )

    def error(self, err: Exception) -> None:
        _logging.debug(f"Input '{self.message}' rejected answer: {err}")
        self.render_error(err)


__all__ = ["Input", "InputTemplateData", "input_question_template"]
