"""Test-only utilities for pyinit.

`ScriptedPrompter` replays canned answers through the `Prompter` interface so the
collector and the CLI can be exercised without a terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["ScriptedPrompter"]


@dataclass
class ScriptedPrompter:
    """Replays `answers` in order.

    An empty string stands for pressing Enter. Choice answers are 0-based
    indexes (as `int`) or `""` to accept the default.
    """

    answers: list[str | int]
    asked: list[str] = field(default_factory=list)

    def _next(self, prompt: str) -> str | int:
        self.asked.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt: {prompt!r}")
        return self.answers.pop(0)

    def ask_text(self, prompt: str, *, default: str | None = None, allow_empty: bool = False) -> str:
        while True:
            answer = str(self._next(prompt))
            if not answer and default is not None:
                return default
            if answer or allow_empty:
                return answer

    def ask_choice(self, prompt: str, options: Sequence[str], default_index: int) -> int:
        answer = self._next(prompt)
        if answer == "":
            return default_index
        return int(answer)
