"""Tests for the ask() driver loop."""

import logging
from unittest.mock import MagicMock

import pytest

from surveyor import (
    AnswerWriteError,
    ConfigError,
    InterruptError,
    Question,
    Select,
    ValidationError,
    ask,
    ask_one,
    to_lower,
    with_page_size,
    with_stdio,
    with_validator,
)
from surveyor.config import PromptConfig
from tests.helpers import DOWN, ENTER, ScriptedAgainPrompt, ScriptedPrompt


def reject_first(k: int):
    """A validator rejecting the first ``k`` answers it sees."""
    seen = []

    def _validate(answer):
        seen.append(answer)
        if len(seen) <= k:
            raise ValidationError(f"attempt {len(seen)} rejected")

    return _validate


class TestAsk:
    """Tests for ask function."""

    def test_writes_answers_in_order(self):
        first = ScriptedPrompt(["Ann"])
        second = ScriptedPrompt(["blue"])
        answers = {}
        ask([Question(name="name", prompt=first), Question(name="color", prompt=second)], answers)
        assert answers == {"name": "Ann", "color": "blue"}
        assert list(answers) == ["name", "color"]

    def test_none_response_is_config_error(self):
        prompt = ScriptedPrompt(["Ann"])
        with pytest.raises(ConfigError):
            ask([Question(name="name", prompt=prompt)], None)
        assert prompt.prompt_calls == 0

    def test_option_error_aborts_before_prompting(self):
        prompt = ScriptedPrompt(["Ann"])

        def broken(options):
            raise ConfigError("bad option")

        with pytest.raises(ConfigError, match="bad option"):
            ask([Question(name="name", prompt=prompt)], {}, broken)
        assert prompt.prompt_calls == 0

    def test_invalid_page_size_option(self):
        with pytest.raises(ConfigError, match="page_size"):
            ask([Question(name="x", prompt=ScriptedPrompt(["a"]))], {}, with_page_size(0))

    def test_options_last_write_wins(self):
        seen = []

        class ConfigSpy(ScriptedPrompt):
            def prompt(self, config: PromptConfig):
                seen.append(config.page_size)
                return super().prompt(config)

        ask([Question(name="x", prompt=ConfigSpy(["a"]))], {}, with_page_size(3), with_page_size(11))
        assert seen == [11]

    @pytest.mark.parametrize("k", [0, 1, 2, 5])
    def test_exactly_k_reprompts(self, k):
        prompt = ScriptedPrompt([f"answer-{i}" for i in range(k + 1)])
        answers = {}
        ask([Question(name="q", prompt=prompt, validate=reject_first(k))], answers)
        assert prompt.prompt_calls == k + 1
        assert len(prompt.errors) == k
        assert answers == {"q": f"answer-{k}"}

    def test_prompt_again_preferred(self):
        prompt = ScriptedAgainPrompt(["first", "second"])
        answers = {}
        ask([Question(name="q", prompt=prompt, validate=reject_first(1))], answers)
        assert prompt.prompt_calls == 1
        assert len(prompt.again_calls) == 1
        invalid, err = prompt.again_calls[0]
        assert invalid == "first"
        assert isinstance(err, ValidationError)
        assert answers == {"q": "second"}

    def test_error_is_reported_to_prompt(self):
        prompt = ScriptedPrompt(["", "ok"])

        def not_empty(answer):
            if not answer:
                raise ValidationError("Value is required")

        ask([Question(name="q", prompt=prompt, validate=not_empty)], {})
        assert [str(e) for e in prompt.errors] == ["Value is required"]

    def test_question_validator_runs_before_global(self):
        calls = []

        def local(answer):
            calls.append(("local", answer))

        def global_(answer):
            calls.append(("global", answer))

        ask([Question(name="q", prompt=ScriptedPrompt(["a"]), validate=local)], {}, with_validator(global_))
        assert calls == [("local", "a"), ("global", "a")]

    def test_whole_chain_restarts_after_failure(self):
        calls = []

        def local(answer):
            calls.append(("local", answer))
            if answer == "bad-local":
                raise ValidationError("local")

        def global_(answer):
            calls.append(("global", answer))
            if answer == "bad-global":
                raise ValidationError("global")

        prompt = ScriptedPrompt(["bad-global", "bad-local", "good"])
        answers = {}
        ask([Question(name="q", prompt=prompt, validate=local)], answers, with_validator(global_))
        assert answers == {"q": "good"}
        assert calls == [
            ("local", "bad-global"),
            ("global", "bad-global"),
            ("local", "bad-local"),
            ("local", "good"),
            ("global", "good"),
        ]

    def test_global_validators_apply_to_every_question(self):
        first = ScriptedPrompt(["", "Ann"])
        second = ScriptedPrompt(["", "blue"])

        def not_empty(answer):
            if not answer:
                raise ValidationError("Value is required")

        answers = {}
        ask(
            [Question(name="name", prompt=first), Question(name="color", prompt=second)],
            answers,
            with_validator(not_empty),
        )
        assert answers == {"name": "Ann", "color": "blue"}
        assert first.prompt_calls == 2
        assert second.prompt_calls == 2

    def test_non_validation_errors_propagate(self):
        def explode(answer):
            raise RuntimeError("validator bug")

        prompt = ScriptedPrompt(["a"])
        with pytest.raises(RuntimeError, match="validator bug"):
            ask([Question(name="q", prompt=prompt, validate=explode)], {})
        assert prompt.errors == []

    def test_prompt_error_aborts_remaining_questions(self):
        failing = MagicMock(spec=ScriptedPrompt)
        failing.prompt.side_effect = InterruptError()
        later = ScriptedPrompt(["never"])
        answers = {}
        with pytest.raises(InterruptError):
            ask([Question(name="a", prompt=failing), Question(name="b", prompt=later)], answers)
        assert later.prompt_calls == 0
        assert answers == {}

    def test_transform_replaces_answer(self):
        prompt = ScriptedPrompt(["BLUE"])
        answers = {}
        ask([Question(name="color", prompt=prompt, transform=to_lower)], answers)
        assert answers == {"color": "blue"}
        assert prompt.cleaned_up == ["blue"]

    def test_transform_returning_none_keeps_answer(self):
        prompt = ScriptedPrompt([42])
        answers = {}
        ask([Question(name="n", prompt=prompt, transform=to_lower)], answers)
        assert answers == {"n": 42}

    def test_transform_runs_after_validation(self):
        def must_be_upper(answer):
            if answer != answer.upper():
                raise ValidationError("shout it")

        prompt = ScriptedPrompt(["quiet", "LOUD"])
        answers = {}
        ask([Question(name="q", prompt=prompt, validate=must_be_upper, transform=to_lower)], answers)
        assert answers == {"q": "loud"}

    def test_cleanup_failure_is_logged_not_raised(self, caplog):
        prompt = ScriptedPrompt(["Ann"], fail_cleanup=True)
        answers = {}
        with caplog.at_level(logging.WARNING, logger="surveyor.survey"):
            ask([Question(name="name", prompt=prompt)], answers)
        assert answers == {"name": "Ann"}
        assert "Cleanup failed for question 'name'" in caplog.text
        assert "terminal went away" in caplog.text

    def test_sink_error_propagates(self):
        class Answers:
            def __init__(self):
                self.name = ""

        with pytest.raises(AnswerWriteError):
            ask([Question(name="color", prompt=ScriptedPrompt(["blue"]))], Answers())

    def test_writes_into_object_fields(self):
        class Answers:
            def __init__(self):
                self.name = ""
                self.color = ""

        answers = Answers()
        ask(
            [
                Question(name="name", prompt=ScriptedPrompt(["Ann"])),
                Question(name="Color", prompt=ScriptedPrompt(["blue"])),
            ],
            answers,
        )
        assert answers.name == "Ann"
        assert answers.color == "blue"

    def test_stdio_injected_into_widgets(self, terminal):
        terminal.send(DOWN, ENTER)
        select = Select("Pick", ["red", "blue"])
        ask([Question(name="color", prompt=select)], {}, with_stdio(terminal.stdio))
        assert select.stdio is terminal.stdio

    def test_select_full_reprompt_after_rejection(self, terminal):
        terminal.send(ENTER, DOWN, ENTER)

        def not_red(answer):
            if answer == "red":
                raise ValidationError("red is taken")

        answers = {}
        question = Question(name="color", prompt=Select("Pick", ["red", "blue"]), validate=not_red)
        ask([question], answers, with_stdio(terminal.stdio))
        assert answers == {"color": "blue"}
        assert "X Sorry, your reply was invalid: red is taken\n" in terminal.screen


class TestAskOne:
    """Tests for ask_one function."""

    def test_returns_answer(self):
        assert ask_one(ScriptedPrompt(["Ann"])) == "Ann"

    def test_global_validator(self):
        prompt = ScriptedPrompt(["", "Ann"])

        def not_empty(answer):
            if not answer:
                raise ValidationError("Value is required")

        assert ask_one(prompt, with_validator(not_empty)) == "Ann"
        assert prompt.prompt_calls == 2
