"""Output redirection: operator extraction and target file handling."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from loguru import logger

from .exceptions import RedirectionError


class Stream(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class RedirectMode(Enum):
    TRUNCATE = "truncate"
    APPEND = "append"


class StdioPlan(Enum):
    INHERIT_ALL = "inherit-all"
    CAPTURE_STDOUT = "capture-stdout"
    CAPTURE_STDERR = "capture-stderr"
    CAPTURE_BOTH = "capture-both"


@dataclass(frozen=True, slots=True)
class RedirectOperator:
    symbol: str
    stream: Stream
    mode: RedirectMode


@dataclass(frozen=True, slots=True)
class RedirectTarget:
    path: str
    mode: RedirectMode

    @property
    def append(self) -> bool:
        return self.mode is RedirectMode.APPEND


@dataclass(frozen=True, slots=True)
class RedirectionPlan:
    """Where stdout/stderr go; a missing entry means the terminal."""

    stdout: RedirectTarget | None = None
    stderr: RedirectTarget | None = None

    def targets(self) -> list[RedirectTarget]:
        return [target for target in (self.stdout, self.stderr) if target is not None]

    @property
    def stdio_plan(self) -> StdioPlan:
        if self.stdout is not None and self.stderr is not None:
            return StdioPlan.CAPTURE_BOTH
        if self.stdout is not None:
            return StdioPlan.CAPTURE_STDOUT
        if self.stderr is not None:
            return StdioPlan.CAPTURE_STDERR
        return StdioPlan.INHERIT_ALL


# Priority order for fused tokens such as ``2>>err.log``: longer prefixes
# first, append before truncate, fd-numbered before bare.
OPERATORS: tuple[RedirectOperator, ...] = (
    RedirectOperator("2>>", Stream.STDERR, RedirectMode.APPEND),
    RedirectOperator("1>>", Stream.STDOUT, RedirectMode.APPEND),
    RedirectOperator(">>", Stream.STDOUT, RedirectMode.APPEND),
    RedirectOperator("2>", Stream.STDERR, RedirectMode.TRUNCATE),
    RedirectOperator("1>", Stream.STDOUT, RedirectMode.TRUNCATE),
    RedirectOperator(">", Stream.STDOUT, RedirectMode.TRUNCATE),
)
_BY_SYMBOL = {op.symbol: op for op in OPERATORS}

# (operator, target path, tokens consumed)
RuleMatch = tuple[RedirectOperator, str, int]
RedirectRule = Callable[[Sequence[str], int], RuleMatch | None]


def _standalone_rule(tokens: Sequence[str], idx: int) -> RuleMatch | None:
    op = _BY_SYMBOL.get(tokens[idx])
    if op is None or idx + 1 >= len(tokens):
        return None
    return op, tokens[idx + 1], 2


def _fused_rule(tokens: Sequence[str], idx: int) -> RuleMatch | None:
    token = tokens[idx]
    if token in _BY_SYMBOL:
        # bare operator without a following token stays a literal argument
        return None
    for op in OPERATORS:
        if token.startswith(op.symbol) and len(token) > len(op.symbol):
            return op, token[len(op.symbol) :], 1
    return None


RULES: tuple[RedirectRule, ...] = (_standalone_rule, _fused_rule)


def match_redirection(tokens: Sequence[str], idx: int) -> RuleMatch | None:
    for rule in RULES:
        found = rule(tokens, idx)
        if found is not None:
            return found
    return None


def extract(tokens: Sequence[str]) -> tuple[list[str], RedirectionPlan]:
    """Strip redirection syntax from ``tokens`` (the words after the command).

    Returns the remaining arguments in their original order and the plan. A
    stream redirected more than once keeps its last target.
    """

    args: list[str] = []
    chosen: dict[Stream, RedirectTarget] = {}
    idx = 0
    while idx < len(tokens):
        found = match_redirection(tokens, idx)
        if found is None:
            args.append(tokens[idx])
            idx += 1
            continue
        op, path, consumed = found
        chosen[op.stream] = RedirectTarget(path, op.mode)
        idx += consumed
    plan = RedirectionPlan(stdout=chosen.get(Stream.STDOUT), stderr=chosen.get(Stream.STDERR))
    return args, plan


def target_path(target: RedirectTarget, cwd: str | os.PathLike[str]) -> Path:
    return Path(cwd, target.path)


def prepare_targets(plan: RedirectionPlan, cwd: str | os.PathLike[str]) -> None:
    """Create or empty every truncate-mode target before the command runs."""

    for target in plan.targets():
        if target.append:
            continue
        path = target_path(target, cwd)
        try:
            with open(path, "wb"):
                pass
        except OSError as exc:
            raise RedirectionError(f"{target.path}: {exc.strerror or exc}") from exc
        logger.debug("truncated redirection target {}", path)


def write_target(target: RedirectTarget, data: str | bytes, cwd: str | os.PathLike[str]) -> None:
    payload = data.encode() if isinstance(data, str) else data
    path = target_path(target, cwd)
    try:
        with open(path, "ab" if target.append else "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise RedirectionError(f"{target.path}: {exc.strerror or exc}") from exc


__all__ = [
    "OPERATORS",
    "RULES",
    "RedirectMode",
    "RedirectOperator",
    "RedirectTarget",
    "RedirectionPlan",
    "StdioPlan",
    "Stream",
    "extract",
    "match_redirection",
    "prepare_targets",
    "write_target",
]
