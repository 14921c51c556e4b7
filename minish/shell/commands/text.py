"""Text output builtins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import BUILTINS

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@BUILTINS.builtin("echo")
def echo(shell: "Shell", args: list[str]) -> CommandResult:
    return CommandResult.output(" ".join(args))
