from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table


@runtime_checkable
class Prompter(Protocol):
    """Interactive input used by the field collector.

    `ask_text` returns the default on empty input when one is set, otherwise
    the empty string when `allow_empty` is true, otherwise it asks again.
    `ask_choice` returns the 0-based index of the selected option.
    """

    def ask_text(
        self, prompt: str, *, default: str | None = None, allow_empty: bool = False
    ) -> str:  # pragma: no cover
        raise NotImplementedError

    def ask_choice(
        self, prompt: str, options: Sequence[str], default_index: int
    ) -> int:  # pragma: no cover
        raise NotImplementedError


class RichPrompter:
    def __init__(self, console: Console | None = None, *, stream: TextIO | None = None) -> None:
        self.console = console or Console()
        # When set, answers are read from `stream` instead of stdin.
        self.stream = stream

    def _read(self, prompt: str, default: str | None) -> str:
        if default is None:
            return Prompt.ask(escape(prompt), console=self.console, stream=self.stream)
        return Prompt.ask(
            escape(prompt),
            console=self.console,
            default=default,
            show_default=True,
            stream=self.stream,
        )

    def ask_text(self, prompt: str, *, default: str | None = None, allow_empty: bool = False) -> str:
        while True:
            value = self._read(prompt, default)
            if not value and default is not None:
                return default
            if value or allow_empty:
                return value
            self.console.print("[prompt.invalid]A value is required.")

    def ask_choice(self, prompt: str, options: Sequence[str], default_index: int) -> int:
        table = Table(show_header=False, box=None)
        for idx, option in enumerate(options):
            marker = ">" if idx == default_index else ""
            table.add_row(marker, str(idx + 1), escape(option))
        self.console.print(table)

        while True:
            raw = self._read(prompt, str(default_index + 1))
            if not raw:
                return default_index
            try:
                chosen = int(raw)
            except ValueError:
                chosen = 0
            if 1 <= chosen <= len(options):
                return chosen - 1
            self.console.print(f"[prompt.invalid]Enter a number between 1 and {len(options)}.")
