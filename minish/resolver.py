"""Resolve command names to builtins or executables on the search path."""

from __future__ import annotations

import os
from collections.abc import Collection, Iterator
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from .session import ShellSession


class ResolutionKind(Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Resolution:
    kind: ResolutionKind
    name: str
    path: str | None = None

    @property
    def found(self) -> bool:
        return self.kind is not ResolutionKind.NOT_FOUND


def is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def search_dirs(session: ShellSession) -> Iterator[str]:
    """Yield search-path directories in order, relative ones anchored at cwd."""

    for entry in session.search_path:
        yield entry if os.path.isabs(entry) else session.resolve_path(entry)


def find_executable(name: str, session: ShellSession) -> str | None:
    if os.sep in name:
        candidate = session.resolve_path(name)
        return candidate if is_executable(candidate) else None
    for directory in search_dirs(session):
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            return candidate
    return None


def resolve(name: str, builtins: Collection[str], session: ShellSession) -> Resolution:
    """Builtins win over same-named executables; lookups are never cached."""

    if name in builtins:
        return Resolution(ResolutionKind.BUILTIN, name)
    path = find_executable(name, session)
    if path is None:
        logger.debug("{} not found on search path", name)
        return Resolution(ResolutionKind.NOT_FOUND, name)
    logger.debug("{} resolved to {}", name, path)
    return Resolution(ResolutionKind.EXTERNAL, name, path)


__all__ = [
    "Resolution",
    "ResolutionKind",
    "find_executable",
    "is_executable",
    "resolve",
    "search_dirs",
]
