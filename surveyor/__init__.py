"""surveyor: interactive terminal surveys.

Ask questions one at a time, re-prompt on invalid answers and collect the
transformed answers into a mapping or an object.
"""

import logging

from .answers import write_answer
from .config import (
    AskOptions,
    PromptConfig,
    load_config,
    options_from_config,
    with_help_input,
    with_page_size,
    with_stdio,
    with_validator,
)
from .errors import (
    AnswerWriteError,
    ConfigError,
    InterruptError,
    SurveyError,
    TerminalClosedError,
    ValidationError,
    format_error,
    format_suggestion,
)
from .paging import default_filter, paginate
from .prompts import Input, Prompt, PromptAgainer, Select, WantsStdio
from .survey import Question, ask, ask_one
from .terminal import Key, Stdio
from .transformers import compose_transformers, title, to_lower, transform_string
from .validators import compose_validators, max_length, min_length, required

_debug_enabled = False


def set_debug(enabled: bool):
    """Enable or disable debug mode globally."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug() -> bool:
    """Check if debug mode is enabled."""
    return _debug_enabled


def setup_logging(debug: bool = False) -> None:
    """Configure logging for command line use."""
    set_debug(debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


__all__ = [
    "ask",
    "ask_one",
    "Question",
    "Prompt",
    "PromptAgainer",
    "WantsStdio",
    "Select",
    "Input",
    "Key",
    "Stdio",
    "AskOptions",
    "PromptConfig",
    "with_stdio",
    "with_validator",
    "with_page_size",
    "with_help_input",
    "load_config",
    "options_from_config",
    "paginate",
    "default_filter",
    "required",
    "min_length",
    "max_length",
    "compose_validators",
    "transform_string",
    "to_lower",
    "title",
    "compose_transformers",
    "write_answer",
    "SurveyError",
    "ConfigError",
    "InterruptError",
    "TerminalClosedError",
    "ValidationError",
    "AnswerWriteError",
    "format_error",
    "format_suggestion",
    "set_debug",
    "is_debug",
    "setup_logging",
]
