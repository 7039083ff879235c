"""Shared helpers for commands."""

import logging
import sys
from pathlib import Path
from typing import Any

import click

from surveyor import (
    ConfigError,
    InterruptError,
    Prompt,
    Question,
    SurveyError,
    ask,
    format_error,
    format_suggestion,
    is_debug,
    load_config,
    options_from_config,
)
from surveyor.config import AskOpt
from surveyor.transformers import Transformer

_logging = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130


def load_options(config_path: Path) -> list[AskOpt]:
    """Load ask options from the config file, exiting on errors."""
    try:
        return options_from_config(load_config(config_path))
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)


def stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def run_prompt(
    ctx: click.Context,
    prompt: Prompt,
    *opts: AskOpt,
    transform: Transformer | None = None,
) -> Any:
    """Ask a single prompt on the terminal and return the answer.

    Options from the config file come first so command line flags win.
    Exits with EXIT_CANCELLED on interrupt and EXIT_ERROR on any other
    survey failure.
    """
    if not stdin_is_tty():
        click.echo(
            format_suggestion("stdin is not a terminal", "run surveyor from an interactive shell"),
            err=True,
        )
        sys.exit(EXIT_ERROR)

    config_opts = load_options(ctx.obj["config_path"])
    answers: dict[str, Any] = {}

    try:
        ask([Question(name="answer", prompt=prompt, transform=transform)], answers, *config_opts, *opts)
    except InterruptError:
        click.echo("\nCancelled by user", err=True)
        sys.exit(EXIT_CANCELLED)
    except SurveyError as e:
        if is_debug():
            _logging.exception("Prompt failed")
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)

    return answers["answer"]
