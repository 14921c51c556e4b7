"""Per-interpreter state shared by the resolver, dispatcher and completer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from loguru import logger

from .config import ShellSettings


@dataclass
class ShellSession:
    """Working directory, search path and home directory of one shell.

    ``follow_process`` mirrors every ``cd`` onto the real process working
    directory; sessions created with it disabled stay isolated from each
    other.
    """

    cwd: str = field(default_factory=os.getcwd)
    search_path: tuple[str, ...] = ()
    home: str = field(default_factory=lambda: os.path.expanduser("~"))
    follow_process: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: ShellSettings,
        *,
        cwd: str | None = None,
        follow_process: bool = True,
    ) -> "ShellSession":
        return cls(
            cwd=cwd or os.getcwd(),
            search_path=settings.search_path,
            home=settings.home or os.path.expanduser("~"),
            follow_process=follow_process,
        )

    def resolve_path(self, path: str) -> str:
        return os.path.normpath(os.path.join(self.cwd, path))

    def chdir(self, path: str) -> None:
        if self.follow_process:
            os.chdir(path)
        self.cwd = path
        logger.debug("cwd is now {}", path)


__all__ = ["ShellSession"]
