"""Command-line interface for minish."""

from __future__ import annotations

import argparse
import sys

from .completion import CompletionEngine, ReadlineCompleter
from .config import ShellSettings
from .exceptions import ConfigurationError
from .logging_utils import configure_logging
from .session import ShellSession
from .shell import Shell


def _add_common_flags(parser: argparse.ArgumentParser, *, nested: bool = False) -> None:
    # flags repeated on a subcommand must not reset values given before it
    default = argparse.SUPPRESS if nested else None
    parser.add_argument(
        "--log-level",
        default=default,
        help="Log level for diagnostics on stderr (default: $MINISH_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--prompt",
        default=default,
        help="Prompt shown before each line (default: $MINISH_PROMPT or '$ ').",
    )


def _build_shell(args: argparse.Namespace) -> tuple[Shell, ShellSettings]:
    settings = ShellSettings.from_env()
    configure_logging(args.log_level or settings.log_level)
    session = ShellSession.from_settings(settings)
    return Shell(session), settings


def _run_exec(args: argparse.Namespace) -> int:
    shell, _ = _build_shell(args)
    result = shell.exec(args.command)
    if shell.exit_requested:
        return shell.exit_status or 0
    return result.exit_code


def _run_shell(args: argparse.Namespace) -> int:
    shell, settings = _build_shell(args)
    prompt = args.prompt if args.prompt is not None else settings.prompt
    if sys.stdin.isatty():
        ReadlineCompleter(CompletionEngine(shell), prompt).install()
    while not shell.exit_requested:
        try:
            line = input(prompt)
        except EOFError:
            return 0
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            continue
        shell.exec(line)
    return shell.exit_status or 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="minish")
    _add_common_flags(parser)
    parser.set_defaults(func=_run_shell)
    subparsers = parser.add_subparsers(dest="command_name")

    exec_parser = subparsers.add_parser("exec", help="Run a single command line")
    _add_common_flags(exec_parser, nested=True)
    exec_parser.add_argument("command", help="Command line to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive shell")
    _add_common_flags(shell_parser, nested=True)
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    try:
        exit_code = args.func(args)
    except ConfigurationError as exc:
        parser.error(str(exc))
    raise SystemExit(exit_code)


__all__ = ["main"]
