"""Fake terminals and scripted prompts for surveyor tests."""

import io
import re
from typing import Any

from prompt_toolkit.data_structures import Size
from prompt_toolkit.output.vt100 import Vt100_Output

from surveyor.config import PromptConfig
from surveyor.prompts import Prompt
from surveyor.terminal import Stdio

# Raw bytes a VT100 terminal sends for each key
UP = "\x1b[A"
DOWN = "\x1b[B"
ENTER = "\r"
CTRL_C = "\x03"
CTRL_D = "\x04"
CTRL_U = "\x15"
CTRL_W = "\x17"
BACKSPACE = "\x7f"

_ESCAPE_SEQUENCE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


class FakeTerminal:
    """A pipe-backed input and a Vt100_Output writing into a string buffer."""

    def __init__(self, pipe_input):
        self.input = pipe_input
        self.buffer = io.StringIO()
        self.output = Vt100_Output(self.buffer, lambda: Size(rows=40, columns=120), term="xterm")
        self.stdio = Stdio(input=pipe_input, output=self.output)

    def send(self, *keys: str) -> None:
        self.input.send_text("".join(keys))

    @property
    def raw(self) -> str:
        return self.buffer.getvalue()

    @property
    def screen(self) -> str:
        """Everything written so far, without escape sequences or carriage returns."""
        return _ESCAPE_SEQUENCE.sub("", self.raw).replace("\r", "")


class ScriptedPrompt(Prompt):
    """Returns canned answers in order and records how it was driven."""

    def __init__(self, answers: list[Any], fail_cleanup: bool = False):
        self.answers = list(answers)
        self.fail_cleanup = fail_cleanup
        self.prompt_calls = 0
        self.errors: list[Exception] = []
        self.cleaned_up: list[Any] = []

    def prompt(self, config: PromptConfig) -> Any:
        self.prompt_calls += 1
        return self.answers.pop(0)

    def cleanup(self, config: PromptConfig, answer: Any) -> None:
        self.cleaned_up.append(answer)
        if self.fail_cleanup:
            raise RuntimeError("terminal went away")

    def error(self, err: Exception) -> None:
        self.errors.append(err)


class ScriptedAgainPrompt(ScriptedPrompt):
    """A scripted prompt that also supports re-prompting with context."""

    def __init__(self, answers: list[Any]):
        super().__init__(answers)
        self.again_calls: list[tuple[Any, Exception]] = []

    def prompt_again(self, invalid: Any, err: Exception, config: PromptConfig) -> Any:
        self.again_calls.append((invalid, err))
        return self.answers.pop(0)
