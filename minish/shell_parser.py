"""Turn a raw input line into a command, its arguments and redirections."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from .redirection import RedirectionPlan, extract
from .tokenizer import tokenize


@dataclass(frozen=True)
class ParsedCommand:
    command: str
    args: tuple[str, ...] = ()
    redirection: RedirectionPlan = field(default_factory=RedirectionPlan)


def parse_command(line: str) -> ParsedCommand | None:
    """Parse ``line``; ``None`` when it holds no words at all.

    The command word itself is never treated as redirection syntax.
    """

    tokens = tokenize(line)
    if not tokens:
        return None
    name, *rest = tokens
    args, plan = extract(rest)
    logger.debug("parsed {!r} -> {} {} {}", line, name, args, plan)
    return ParsedCommand(command=name, args=tuple(args), redirection=plan)


__all__ = ["ParsedCommand", "parse_command"]
