"""Core Shell implementation: builtin table and command dispatch."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from ..exceptions import RedirectionError, ShellError
from ..redirection import RedirectionPlan, RedirectTarget, prepare_targets, write_target
from ..resolver import Resolution, resolve
from ..session import ShellSession
from ..shell_parser import ParsedCommand, parse_command
from .common import Builtin, CommandHandler, CommandResult, line
from .host import ProcessRunner, run_process
from .registry import BUILTINS


class Shell:
    """Dispatches parsed lines to builtins or to programs on the search path."""

    def __init__(
        self,
        session: ShellSession | None = None,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        process_runner: ProcessRunner = run_process,
    ) -> None:
        self.session = session or ShellSession()
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.process_runner = process_runner
        self.commands: dict[str, CommandHandler] = {}
        self.exit_status: int | None = None
        self._register_builtin_commands()

    # ------------------------------------------------------------------
    # Command registration
    # ------------------------------------------------------------------
    def register_command(self, name: str, handler: CommandHandler) -> None:
        self.commands[name] = handler

    def available_commands(self) -> list[str]:
        return sorted(self.commands)

    def _bind_builtin(self, func: Builtin) -> CommandHandler:
        def bound(args: list[str]) -> CommandResult | str | None:
            return func(self, args)

        return bound

    def _register_builtin_commands(self) -> None:
        # importing the package fills BUILTINS
        from . import commands  # noqa: F401

        for spec in BUILTINS:
            self.register_command(spec.name, self._bind_builtin(spec.handler))

    def resolve(self, name: str) -> Resolution:
        return resolve(name, self.commands, self.session)

    @property
    def exit_requested(self) -> bool:
        return self.exit_status is not None

    def request_exit(self, code: int = 0) -> None:
        self.exit_status = code

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def exec(self, command: str) -> CommandResult:
        """Run every line of ``command`` in order, stopping after ``exit``."""

        last_result = CommandResult()
        for segment in command.splitlines():
            if self.exit_requested:
                break
            parsed = parse_command(segment)
            if parsed is None:
                continue
            last_result = self.dispatch(parsed)
        return last_result

    def dispatch(self, parsed: ParsedCommand) -> CommandResult:
        plan = parsed.redirection
        cwd = self.session.cwd
        try:
            prepare_targets(plan, cwd)
        except RedirectionError as exc:
            # the target itself is unusable, so the message stays on the terminal
            message = line(f"minish: {exc}")
            self._write_terminal(self.stderr, message)
            return CommandResult(stderr=message, exit_code=1)

        handler = self.commands.get(parsed.command)
        if handler is None:
            return self._run_external(parsed, cwd)
        result = self._call_builtin(parsed.command, handler, list(parsed.args))
        self._emit(result, plan, cwd)
        return result

    def _call_builtin(self, name: str, handler: CommandHandler, args: list[str]) -> CommandResult:
        try:
            result = handler(args)
        except ShellError as exc:
            return CommandResult.error(str(exc))
        except Exception as exc:  # unexpected failure path
            logger.exception("builtin {} crashed", name)
            return CommandResult.error(f"{name} failed: {exc}")
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        return CommandResult(stdout=str(result))

    def _run_external(self, parsed: ParsedCommand, cwd: str) -> CommandResult:
        plan = parsed.redirection
        resolution = self.resolve(parsed.command)
        if resolution.path is None:
            result = CommandResult.error(f"{parsed.command}: command not found", exit_code=127)
            self._emit(result, plan, cwd)
            return result
        argv = [parsed.command, *parsed.args]
        try:
            completed = self.process_runner(resolution.path, argv, plan.stdio_plan, cwd)
        except OSError as exc:
            logger.debug("could not start {}: {}", resolution.path, exc)
            result = CommandResult.error(f"{parsed.command}: {exc.strerror or exc}", exit_code=126)
            self._emit(result, plan, cwd)
            return result
        if plan.stdout is not None and completed.stdout is not None:
            self._deliver(completed.stdout, plan.stdout, self.stdout, cwd)
        if plan.stderr is not None and completed.stderr is not None:
            self._deliver(completed.stderr, plan.stderr, self.stderr, cwd)
        return CommandResult(exit_code=completed.exit_code)

    # ------------------------------------------------------------------
    # Output routing
    # ------------------------------------------------------------------
    def _emit(self, result: CommandResult, plan: RedirectionPlan, cwd: str) -> None:
        self._deliver(result.stdout, plan.stdout, self.stdout, cwd)
        self._deliver(result.stderr, plan.stderr, self.stderr, cwd)

    def _deliver(
        self,
        data: str | bytes,
        target: RedirectTarget | None,
        terminal: TextIO,
        cwd: str,
    ) -> None:
        if target is None:
            self._write_terminal(terminal, data)
            return
        try:
            write_target(target, data, cwd)
        except RedirectionError as exc:
            self._write_terminal(self.stderr, line(f"minish: {exc}"))

    def _write_terminal(self, stream: TextIO, data: str | bytes) -> None:
        if not data:
            return
        if isinstance(data, bytes):
            data = data.decode(errors="replace")
        stream.write(data)
        stream.flush()


__all__ = ["Shell"]
