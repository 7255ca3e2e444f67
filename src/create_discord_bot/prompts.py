"""Interactive prompts.

CONTRACT
- Inputs: questions and defaults
- Outputs:
  - Validated strings / booleans
- Invariants:
  - ask_name() loops until validate_name() passes
  - The bot token is read with hidden input
- Failure:
  - Ctrl-C at the name or token prompt propagates as typer.Abort
  - Ctrl-C or end of input at confirm() counts as "no"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import typer
from rich.console import Console

from .names import validate_name


class Prompter(Protocol):
    def ask_name(self, default: str) -> str: ...

    def ask_token(self, default: str) -> str: ...

    def confirm(self, question: str) -> bool: ...


@dataclass
class TyperPrompter:
    console: Console

    def ask_name(self, default: str) -> str:
        while True:
            value = typer.prompt("Application name?", default=default)
            check = validate_name(value)
            if check.valid:
                return value
            self.console.print(check.message, style="red", markup=False, highlight=False)

    def ask_token(self, default: str) -> str:
        return typer.prompt(
            "Discord bot token?", default=default, hide_input=True, show_default=False
        )

    def confirm(self, question: str) -> bool:
        try:
            return typer.confirm(question, default=False)
        except typer.Abort:
            return False


@dataclass
class ScriptedPrompter:
    """Non-interactive answers for the Python API."""

    name: str
    token: str | None = None
    update: bool = False

    def ask_name(self, default: str) -> str:
        check = validate_name(self.name)
        if not check.valid:
            raise ValueError(check.message)
        return self.name

    def ask_token(self, default: str) -> str:
        return self.token if self.token is not None else default

    def confirm(self, question: str) -> bool:
        return self.update
