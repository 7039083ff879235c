"""The question-answer driver loop."""

import logging
from dataclasses import dataclass
from typing import Any

from .answers import write_answer
from .config import AskOpt, AskOptions, PromptConfig, build_ask_options
from .errors import ConfigError, ValidationError
from .prompts import Prompt, PromptAgainer, WantsStdio
from .transformers import Transformer
from .validators import Validator

_logging = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """One entry of a survey.

    Attributes:
        name: Key (or field name) the answer is written under
        prompt: The widget asking the question
        validate: Optional validator run before the global ones
        transform: Optional transformer applied to the validated answer
    """
    name: str
    prompt: Prompt
    validate: Validator | None = None
    transform: Transformer | None = None


def _first_failure(validators: list[Validator], answer: Any) -> ValidationError | None:
    for validator in validators:
        try:
            validator(answer)
        except ValidationError as e:
            return e
    return None


def _validated_answer(
    prompt: Prompt, answer: Any, validators: list[Validator], config: PromptConfig
) -> Any:
    """Re-prompt until ``answer`` passes every validator in a single pass."""
    while True:
        invalid = _first_failure(validators, answer)
        if invalid is None:
            return answer

        _logging.debug(f"Answer {answer!r} rejected: {invalid}")
        prompt.error(invalid)

        if isinstance(prompt, PromptAgainer):
            answer = prompt.prompt_again(answer, invalid, config)
        else:
            answer = prompt.prompt(config)


def _ask_question(question: Question, response: Any, options: AskOptions) -> None:
    prompt = question.prompt
    config = options.prompt_config

    if options.stdio is not None and isinstance(prompt, WantsStdio):
        prompt.with_stdio(options.stdio)

    _logging.debug(f"Asking question '{question.name}'")
    answer = prompt.prompt(config)

    validators: list[Validator] = []
    if question.validate is not None:
        validators.append(question.validate)
    validators.extend(options.validators)

    answer = _validated_answer(prompt, answer, validators, config)

    if question.transform is not None:
        transformed = question.transform(answer)
        if transformed is not None:
            answer = transformed

    try:
        prompt.cleanup(config, answer)
    except Exception as e:
        _logging.warning(f"Cleanup failed for question '{question.name}': {type(e).__name__}: {e}")

    write_answer(response, question.name, answer)


def ask(questions: list[Question], response: Any, *opts: AskOpt) -> None:
    """Ask every question in order and write the answers into ``response``.

    ``response`` is either a mapping (answers are stored under each
    question's name) or an object whose fields match the question names;
    dataclass fields can name their question with ``field(metadata={"survey": name})``.

    Example:
        questions = [
            Question(name="name", prompt=Input("What is your name?"),
                     validate=required, transform=title),
            Question(name="color", prompt=Select("Choose a color:", ["red", "blue"])),
        ]
        answers = {}
        ask(questions, answers)

    Raises:
        ConfigError: If ``response`` is None or an option is invalid
        InterruptError: If the user interrupts a prompt
        SurveyError: Any other failure reading keys or writing answers
    """
    options = build_ask_options(opts)

    if response is None:
        raise ConfigError("cannot call ask() with a None reference to record the answers")

    for question in questions:
        _ask_question(question, response, options)


def ask_one(prompt: Prompt, *opts: AskOpt) -> Any:
    """Ask a single unnamed question and return its answer.

    Example:
        color = ask_one(Select("Choose a color:", ["red", "blue", "green"]))
    """
    answers: dict[str, Any] = {}
    ask([Question(name="", prompt=prompt)], answers, *opts)
    return answers[""]


__all__ = ["Question", "ask", "ask_one"]
