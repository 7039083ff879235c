"""Prompt configuration, ask options and config file loading."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

import yaml

from .errors import ConfigError, format_field_error
from .terminal import Stdio

DEFAULT_PAGE_SIZE = 7
DEFAULT_HELP_INPUT = "?"


@dataclass
class PromptConfig:
    """Global configuration handed to every prompt."""
    page_size: int = DEFAULT_PAGE_SIZE
    help_input: str = DEFAULT_HELP_INPUT


@dataclass
class AskOptions:
    """Options for a single ``ask()`` call.

    ``stdio`` of None means the process standard streams, resolved lazily by
    each widget the first time it needs the terminal.
    """
    stdio: Stdio | None = None
    validators: list[Callable[[Any], None]] = field(default_factory=list)
    prompt_config: PromptConfig = field(default_factory=PromptConfig)


AskOpt = Callable[[AskOptions], None]


def build_ask_options(opts: tuple[AskOpt, ...] | list[AskOpt]) -> AskOptions:
    """Fold option functions left to right over a fresh default."""
    options = AskOptions()
    for opt in opts:
        opt(options)
    return options


def with_stdio(stdio: Stdio) -> AskOpt:
    """Use the given terminal streams instead of the process stdin/stdout."""
    def _apply(options: AskOptions) -> None:
        options.stdio = stdio
    return _apply


def with_validator(validator: Callable[[Any], None]) -> AskOpt:
    """Run ``validator`` against every question's answer."""
    def _apply(options: AskOptions) -> None:
        options.validators.append(validator)
    return _apply


def with_page_size(page_size: int) -> AskOpt:
    """Set the default number of options shown per page."""
    def _apply(options: AskOptions) -> None:
        if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
            raise ConfigError(
                format_field_error("PromptConfig", "page_size", "must be a positive integer")
            )
        options.prompt_config.page_size = page_size
    return _apply


def with_help_input(help_input: str) -> AskOpt:
    """Set the key that reveals a prompt's help text."""
    def _apply(options: AskOptions) -> None:
        if not isinstance(help_input, str) or len(help_input) != 1:
            raise ConfigError(
                format_field_error("PromptConfig", "help_input", "must be a single character")
            )
        options.prompt_config.help_input = help_input
    return _apply


_CONFIG_OPTIONS: dict[str, Callable[[Any], AskOpt]] = {
    "page_size": with_page_size,
    "help_input": with_help_input,
}


def validate_config(data: Any) -> dict[str, Any]:
    """Check a parsed config document and return it as a dict.

    Raises:
        ConfigError: If the document is not a mapping, has unknown keys or
            wrongly typed values
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    for key, value in data.items():
        if key not in _CONFIG_OPTIONS:
            known = ", ".join(sorted(_CONFIG_OPTIONS))
            raise ConfigError(f"Unknown config field '{key}'. Known fields: {known}")
        # Fail early with the option's own message
        _CONFIG_OPTIONS[key](value)(AskOptions())

    return dict(data)


def load_config(path: Path) -> dict[str, Any]:
    """Load the YAML config file at ``path``.

    A missing file yields an empty config.

    Raises:
        ConfigError: If the file cannot be read or parsed, or fails validation
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except PermissionError:
        raise ConfigError(f"Permission denied reading config file: {path}")
    except UnicodeDecodeError:
        raise ConfigError(f"Config file is not valid UTF-8: {path}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise ConfigError(
                f"Config syntax error at line {mark.line + 1}, col {mark.column + 1}: {path}"
            ) from e
        raise ConfigError(f"Config syntax error: {path}") from e

    return validate_config(data)


def options_from_config(data: dict[str, Any]) -> list[AskOpt]:
    """Turn a validated config mapping into option functions."""
    return [_CONFIG_OPTIONS[key](value) for key, value in data.items()]


__all__ = [
    "ConfigError",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_HELP_INPUT",
    "PromptConfig",
    "AskOptions",
    "AskOpt",
    "build_ask_options",
    "with_stdio",
    "with_validator",
    "with_page_size",
    "with_help_input",
    "validate_config",
    "load_config",
    "options_from_config",
]
