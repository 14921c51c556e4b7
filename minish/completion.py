"""Tab completion for command names."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger

from .resolver import search_dirs

if TYPE_CHECKING:
    from .shell import Shell


BELL = "\a"


class CompletionAction(Enum):
    NONE = "none"
    BELL = "bell"
    REPLACE = "replace"
    LIST = "list"


@dataclass(frozen=True)
class Completion:
    action: CompletionAction
    word: str = ""
    replacement: str = ""
    candidates: tuple[str, ...] = ()

    def apply(self, line: str) -> str:
        """Return ``line`` with the command word swapped for the replacement."""

        if self.action is not CompletionAction.REPLACE:
            return line
        start = line.find(self.word)
        return line[:start] + self.replacement + line[start + len(self.word) :]


def command_word(line: str) -> str:
    words = line.split()
    return words[0] if words else ""


def longest_common_prefix(words: Sequence[str]) -> str:
    """Find the longest common prefix of a list of words."""
    if not words:
        return ""
    prefix = words[0]
    for word in words[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


class CompletionEngine:
    """Completes the command word against builtins and the search path.

    An ambiguous word rings the bell on the first press and lists every
    candidate from the second consecutive press on. Any change to the line
    between presses, or a call to :meth:`reset`, starts the count over.
    """

    def __init__(self, shell: "Shell") -> None:
        self.shell = shell
        self._presses = 0
        self._last_line: str | None = None

    def candidates(self, prefix: str) -> list[str]:
        found = {name for name in self.shell.commands if name.startswith(prefix)}
        for directory in search_dirs(self.shell.session):
            try:
                entries = os.listdir(directory)
            except OSError:
                continue
            found.update(entry for entry in entries if entry.startswith(prefix))
        return sorted(found)

    def reset(self) -> None:
        self._presses = 0
        self._last_line = None

    def complete(self, line: str) -> Completion:
        if line != self._last_line:
            self._presses = 0
        completion = self._propose(line)
        if completion.action is CompletionAction.REPLACE:
            self._presses = 0
        self._last_line = completion.apply(line)
        logger.debug("complete {!r} -> {}", line, completion.action.value)
        return completion

    def _propose(self, line: str) -> Completion:
        word = command_word(line)
        if not word:
            return Completion(CompletionAction.NONE)
        matches = self.candidates(word)
        if not matches:
            return Completion(CompletionAction.BELL, word)
        if len(matches) == 1:
            return Completion(CompletionAction.REPLACE, word, f"{matches[0]} ", tuple(matches))
        prefix = longest_common_prefix(matches)
        if len(prefix) > len(word):
            return Completion(CompletionAction.REPLACE, word, prefix, tuple(matches))
        self._presses += 1
        action = CompletionAction.BELL if self._presses == 1 else CompletionAction.LIST
        return Completion(action, word, candidates=tuple(matches))


class ReadlineCompleter:
    """Adapter exposing :class:`CompletionEngine` as a readline completer."""

    def __init__(
        self,
        engine: CompletionEngine,
        prompt: str,
        *,
        backend: Any = None,
        output: TextIO | None = None,
    ) -> None:
        if backend is None:
            import readline as backend
        self.engine = engine
        self.prompt = prompt
        self.backend = backend
        self.output = output or sys.stdout

    def install(self) -> None:
        self.backend.set_completer(self)
        self.backend.set_completer_delims(" \t\n")
        self.backend.parse_and_bind("tab: complete")

    def __call__(self, text: str, state: int) -> str | None:
        if state != 0:
            return None
        buffer = self.backend.get_line_buffer()
        if buffer[: self.backend.get_begidx()].strip():
            # only the command word is completed
            return None
        completion = self.engine.complete(buffer)
        if completion.action is CompletionAction.REPLACE:
            return completion.replacement
        if completion.action is CompletionAction.BELL:
            self.output.write(BELL)
        elif completion.action is CompletionAction.LIST:
            # two spaces between names, as bash prints a completion listing
            listing = "  ".join(completion.candidates)
            self.output.write(f"\n{listing}\n{self.prompt}{buffer}")
        self.output.flush()
        return None


__all__ = [
    "Completion",
    "CompletionAction",
    "CompletionEngine",
    "ReadlineCompleter",
    "command_word",
    "longest_common_prefix",
]
