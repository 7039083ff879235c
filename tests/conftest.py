"""Pytest fixtures and utilities for surveyor tests."""

import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from prompt_toolkit.input import create_pipe_input

from surveyor.config import PromptConfig
from tests.helpers import FakeTerminal


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def terminal() -> Generator[FakeTerminal, None, None]:
    """A fake terminal: send keys with ``send()``, read output from ``screen``."""
    with create_pipe_input() as pipe_input:
        yield FakeTerminal(pipe_input)


@pytest.fixture
def prompt_config() -> PromptConfig:
    return PromptConfig()


@pytest.fixture
def mock_tty() -> Generator[None, None, None]:
    """Pretend the CLI runs on an interactive terminal."""
    with patch("surveyor.commands.utils.stdin_is_tty", return_value=True):
        yield


@pytest.fixture
def mock_no_tty() -> Generator[None, None, None]:
    """Pretend stdin is redirected."""
    with patch("surveyor.commands.utils.stdin_is_tty", return_value=False):
        yield


@pytest.fixture
def dummy_stdio():
    """Streams that swallow output, for widgets driven key by key."""
    from prompt_toolkit.input import DummyInput
    from prompt_toolkit.output import DummyOutput

    from surveyor.terminal import Stdio

    return Stdio(input=DummyInput(), output=DummyOutput())
