"""Widget capability interfaces.

Every widget implements ``Prompt``. The driver loop discovers the optional
capabilities (``PromptAgainer``, ``WantsStdio``) with ``isinstance`` checks
against runtime-checkable protocols, so new widget kinds need no changes to
the loop.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..config import PromptConfig
from ..terminal import Stdio


class Prompt(ABC):
    """An interactive widget that asks one question."""

    @abstractmethod
    def prompt(self, config: PromptConfig) -> Any:
        """Interact with the user and return the raw answer."""

    @abstractmethod
    def cleanup(self, config: PromptConfig, answer: Any) -> None:
        """Draw the final, answered state of the widget."""

    @abstractmethod
    def error(self, err: Exception) -> None:
        """Show a validation error before the widget is prompted again."""


@runtime_checkable
class PromptAgainer(Protocol):
    """Widgets that can re-prompt using the rejected answer as context."""

    def prompt_again(self, invalid: Any, err: Exception, config: PromptConfig) -> Any:
        ...


@runtime_checkable
class WantsStdio(Protocol):
    """Widgets that accept the terminal streams chosen by the caller."""

    def with_stdio(self, stdio: Stdio) -> None:
        ...


__all__ = ["Prompt", "PromptAgainer", "WantsStdio"]
