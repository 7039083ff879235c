"""Exceptions and error formatting utilities.

Every exception raised by surveyor derives from ``SurveyError`` so callers can
catch the whole family in one place.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Use present tense: 'must be', 'is required'
- Include actionable hints where helpful
"""


class SurveyError(Exception):
    """Base class for all surveyor errors."""


class ConfigError(SurveyError):
    """Raised when a survey is configured incorrectly.

    Covers a missing answer sink, a widget without options, invalid option
    values and unreadable config files. Detected before any prompting.
    """


class InterruptError(SurveyError):
    """Raised when the user presses the interrupt key (Ctrl+C)."""

    def __init__(self, message: str = "interrupt"):
        super().__init__(message)


class TerminalClosedError(SurveyError):
    """Raised when the key source reaches end of stream."""

    def __init__(self, message: str = "input stream closed"):
        super().__init__(message)


class ValidationError(SurveyError):
    """Raised by validators to reject an answer.

    Never escapes ``ask()``: it triggers another prompt instead.
    """


class AnswerWriteError(SurveyError):
    """Raised when an answer cannot be written into the answer sink."""


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("no options to select from")
        'Error: no options to select from'
    """
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Format a field validation error with structured format.

    Examples:
        >>> format_field_error("Config", "page_size", "must be a positive integer")
        "Config field 'page_size' must be a positive integer"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("stdin is not a terminal", "run surveyor from an interactive shell")
        'Error: stdin is not a terminal. Hint: run surveyor from an interactive shell'
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "SurveyError",
    "ConfigError",
    "InterruptError",
    "TerminalClosedError",
    "ValidationError",
    "AnswerWriteError",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
