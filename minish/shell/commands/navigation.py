"""Working-directory builtins."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import BUILTINS
from ...exceptions import ShellError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


def expand_location(shell: "Shell", location: str) -> str:
    session = shell.session
    if location.startswith("~"):
        return os.path.normpath(os.path.join(session.home, location[1:].lstrip("/")))
    return session.resolve_path(location)


@BUILTINS.builtin("cd")
def cd(shell: "Shell", args: list[str]) -> CommandResult:
    location = args[0] if args else "~"
    target = expand_location(shell, location)
    if not os.path.exists(target):
        raise ShellError(f"cd: {location}: No such file or directory")
    if not os.path.isdir(target):
        raise ShellError(f"cd: {location}: Not a directory")
    try:
        shell.session.chdir(target)
    except PermissionError as exc:
        raise ShellError(f"cd: {location}: Permission denied") from exc
    return CommandResult()


@BUILTINS.builtin("pwd")
def pwd(shell: "Shell", _: list[str]) -> CommandResult:
    return CommandResult.output(shell.session.cwd)
