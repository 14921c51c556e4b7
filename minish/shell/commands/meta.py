"""Meta builtins for shell introspection and control."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult, line
from ..registry import BUILTINS
from ...resolver import ResolutionKind

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@BUILTINS.builtin("exit")
def exit(shell: "Shell", args: list[str]) -> CommandResult:  # noqa: A001
    if not args:
        shell.request_exit(0)
        return CommandResult()
    try:
        code = int(args[0])
    except ValueError:
        shell.request_exit(2)
        return CommandResult.error(f"exit: {args[0]}: numeric argument required", exit_code=2)
    shell.request_exit(code & 0xFF)
    return CommandResult()


@BUILTINS.builtin("type")
def type(shell: "Shell", args: list[str]) -> CommandResult:  # noqa: A001
    if not args:
        return CommandResult.error("type: missing operand", exit_code=2)
    out: list[str] = []
    missing = False
    for name in args:
        resolution = shell.resolve(name)
        if resolution.kind is ResolutionKind.BUILTIN:
            out.append(line(f"{name} is a shell builtin"))
        elif resolution.kind is ResolutionKind.EXTERNAL:
            out.append(line(f"{name} is {resolution.path}"))
        else:
            out.append(line(f"{name}: not found"))
            missing = True
    return CommandResult(stdout="".join(out), exit_code=1 if missing else 0)
