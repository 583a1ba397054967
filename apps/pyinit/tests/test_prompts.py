from __future__ import annotations

import io

from rich.console import Console

from pyinit.prompts import Prompter, RichPrompter
from pyinit.testing import ScriptedPrompter


def _prompter(answers: str) -> tuple[RichPrompter, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, force_terminal=False, width=120)
    return RichPrompter(console, stream=io.StringIO(answers)), out


def test_empty_answer_returns_default() -> None:
    prompter, out = _prompter("\n")
    assert prompter.ask_text("version", default="0.1.0") == "0.1.0"
    assert "(0.1.0)" in out.getvalue()


def test_typed_answer_wins_over_default() -> None:
    prompter, _ = _prompter("2.0.0\n")
    assert prompter.ask_text("version", default="0.1.0") == "2.0.0"


def test_empty_answer_allowed_without_default() -> None:
    prompter, _ = _prompter("\n")
    assert prompter.ask_text("description", allow_empty=True) == ""


def test_required_answer_is_asked_again() -> None:
    prompter, out = _prompter("\n\nmyapp\n")
    assert prompter.ask_text("project name") == "myapp"
    assert out.getvalue().count("A value is required.") == 2


def test_prompt_text_with_brackets_is_not_treated_as_markup() -> None:
    prompter, out = _prompter("x\n")
    prompter.ask_text("keywords [a;b]", allow_empty=True)
    assert "keywords [a;b]" in out.getvalue()


def test_choice_defaults_to_highlighted_option() -> None:
    prompter, out = _prompter("\n")
    assert prompter.ask_choice("license", ["Apache-2.0", "MIT", "GPL-3.0"], 1) == 1
    rendered = out.getvalue()
    assert "Apache-2.0" in rendered
    assert "GPL-3.0" in rendered


def test_choice_accepts_one_based_number_and_retries_invalid_input() -> None:
    prompter, out = _prompter("zero\n9\n3\n")
    assert prompter.ask_choice("license", ["Apache-2.0", "MIT", "GPL-3.0"], 1) == 2
    assert out.getvalue().count("Enter a number between 1 and 3.") == 2


def test_prompters_satisfy_protocol() -> None:
    assert isinstance(RichPrompter(Console(file=io.StringIO())), Prompter)
    assert isinstance(ScriptedPrompter([]), Prompter)
