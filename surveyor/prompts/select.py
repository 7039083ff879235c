"""Single-choice selection widget with filtering and pagination."""

import logging
from dataclasses import dataclass

from prompt_toolkit.formatted_text import StyleAndTextTuples

from ..config import PromptConfig
from ..errors import ConfigError, InterruptError
from ..paging import FilterFunc, default_filter, paginate
from ..render import HELP_ICON, QUESTION_ICON, SELECT_FOCUS_ICON, Renderer
from ..terminal import Key, KeyEvent, interactive, is_printable
from .base import Prompt

_logging = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectTemplateData:
    """Snapshot of a Select widget handed to the template."""
    message: str
    filter_message: str = ""
    help: str = ""
    help_input: str = "?"
    page_entries: tuple[str, ...] = ()
    selected_index: int = 0
    answer: str = ""
    show_answer: bool = False
    show_help: bool = False


def select_question_template(data: SelectTemplateData) -> StyleAndTextTuples:
    tokens: StyleAndTextTuples = []
    if data.show_help:
        tokens.append(("class:help", f"{HELP_ICON} {data.help}\n"))
    tokens.append(("class:question-icon", f"{QUESTION_ICON} "))
    tokens.append(("class:message", f"{data.message}{data.filter_message}"))

    if data.show_answer:
        tokens.append(("class:answer", f" {data.answer}\n"))
        return tokens

    hint = "[Use arrows to move, type to filter"
    if data.help and not data.show_help:
        hint += f", {data.help_input} for more help"
    tokens.append(("class:hint", f"  {hint}]\n"))

    for i, choice in enumerate(data.page_entries):
        if i == data.selected_index:
            tokens.append(("class:selected", f"{SELECT_FOCUS_ICON} {choice}\n"))
        else:
            tokens.append(("class:option", f"  {choice}\n"))
    return tokens


class _SelectState:
    """Transient interaction state, rebuilt for every prompt."""

    def __init__(self, selected_index: int = 0, vim_mode: bool = False):
        self.filter = ""
        self.selected_index = selected_index
        self.use_default = True
        self.showing_help = False
        self.vim_mode = vim_mode


class Select(Renderer, Prompt):
    """Presents a list of options to pick from with the arrow keys and Enter.

    Typing narrows the list; Escape toggles vim-style ``j``/``k`` navigation.
    The answer is the chosen option string.

    Example:
        color = ask_one(Select("Choose a color:", ["red", "blue", "green"]))
    """

    def __init__(
        self,
        message: str,
        options: list[str],
        default: str | None = None,
        help: str = "",
        page_size: int = 0,
        vim_mode: bool = False,
        filter: FilterFunc | None = None,
    ):
        super().__init__()
        self.message = message
        self.options = list(options)
        self.default = default
        self.help = help
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.filter = filter
        self.filter_message = ""
        self._state = _SelectState(vim_mode=vim_mode)

    @property
    def selected_index(self) -> int:
        return self._state.selected_index

    @property
    def filter_text(self) -> str:
        return self._state.filter

    @property
    def vim_mode_active(self) -> bool:
        return self._state.vim_mode

    def filter_options(self) -> list[str]:
        """Return the options matching the current filter text."""
        if not self._state.filter:
            return self.options
        if self.filter is not None:
            return self.filter(self._state.filter, self.options)
        return default_filter(self._state.filter, self.options)

    def _page_size(self, config: PromptConfig) -> int:
        return self.page_size or config.page_size

    def _snapshot(self, config: PromptConfig, options: list[str]) -> SelectTemplateData:
        page, cursor = paginate(self._page_size(config), options, self._state.selected_index)
        return SelectTemplateData(
            message=self.message,
            filter_message=self.filter_message,
            help=self.help,
            help_input=config.help_input,
            page_entries=tuple(page),
            selected_index=cursor,
            show_help=self._state.showing_help,
        )

    def on_change(self, key: KeyEvent, config: PromptConfig) -> bool:
        """React to one key and redraw.

        Returns:
            True once the user has accepted an option
        """
        state = self._state
        options = self.filter_options()
        old_filter = state.filter
        done = False

        if key is Key.ENTER:
            done = bool(options) and state.selected_index < len(options)
        elif key is Key.ARROW_UP or (state.vim_mode and key == "k" and options):
            if options:
                state.use_default = False
                if state.selected_index == 0:
                    state.selected_index = len(options) - 1
                else:
                    state.selected_index -= 1
        elif key is Key.ARROW_DOWN or (state.vim_mode and key == "j" and options):
            if options:
                state.use_default = False
                if state.selected_index >= len(options) - 1:
                    state.selected_index = 0
                else:
                    state.selected_index += 1
        elif key == config.help_input and self.help:
            state.showing_help = True
        elif key is Key.ESCAPE:
            state.vim_mode = not state.vim_mode
        elif key is Key.DELETE_WORD or key is Key.DELETE_LINE:
            state.filter = ""
        elif key is Key.DELETE or key is Key.BACKSPACE:
            state.filter = state.filter[:-1]
        elif is_printable(key):
            state.filter += key
            state.vim_mode = False
            state.use_default = False

        self.filter_message = f" {state.filter}" if state.filter else ""
        if state.filter != old_filter:
            options = self.filter_options()
            if options and state.selected_index >= len(options):
                state.selected_index = len(options) - 1

        self.render(select_question_template, self._snapshot(config, options))
        return done

    def _default_index(self) -> int:
        if self.default and self.default in self.options:
            return self.options.index(self.default)
        return 0

    def prompt(self, config: PromptConfig) -> str:
        if not self.options:
            raise ConfigError("please provide options to select from")

        self._state = _SelectState(self._default_index(), self.vim_mode)
        self.filter_message = ""
        self.render(select_question_template, self._snapshot(config, self.options))

        with interactive(self.stdio, hide_cursor=True) as reader:
            while True:
                key = reader.read_key()
                if key is Key.INTERRUPT:
                    raise InterruptError()
                if key is Key.END_TRANSMISSION:
                    break
                if self.on_change(key, config):
                    break

        options = self.filter_options()
        self._state.filter = ""
        self.filter_message = ""

        return self._resolve_answer(options)

    def _resolve_answer(self, options: list[str]) -> str:
        state = self._state
        if state.use_default or state.selected_index >= len(options):
            if self.default:
                return self.default
            if options:
                return options[0]
            return ""
        return options[state.selected_index]

    def cleanup(self, config: PromptConfig, answer: str) -> None:
        self.render_final(
            select_question_template,
            SelectTemplateData(
                message=self.message,
                filter_message=self.filter_message,
                help=self.help,
                help_input=config.help_input,
                answer=str(answer),
                show_answer=True,
            ),
        )

    def error(self, err: Exception) -> None:
        _logging.debug(f"Select '{self.message}' rejected answer: {err}")
        self.render_error(err)


__all__ = ["Select", "SelectTemplateData", "select_question_template"]
