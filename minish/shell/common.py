"""Result and handler types shared by the dispatcher and builtins."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Shell


@dataclass(slots=True)
class CommandResult:
    """Text a builtin produced for each stream, plus its status.

    Text is newline-terminated; the dispatcher routes each stream through the
    line's redirection plan.
    """

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @classmethod
    def output(cls, *lines: str) -> "CommandResult":
        return cls(stdout="".join(line(text) for text in lines))

    @classmethod
    def error(cls, message: str, exit_code: int = 1) -> "CommandResult":
        """A failed command whose message follows the stdout redirection."""
        return cls(stdout=line(message), exit_code=exit_code)


CommandHandler = Callable[[list[str]], CommandResult | str | None]
Builtin = Callable[["Shell", list[str]], CommandResult | str | None]


def line(text: str) -> str:
    return f"{text}\n"


__all__ = ["Builtin", "CommandHandler", "CommandResult", "line"]
