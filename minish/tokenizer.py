"""Split a raw command line into argument tokens."""

from __future__ import annotations

from enum import Enum


class LexState(Enum):
    NORMAL = "normal"
    SINGLE = "single"
    DOUBLE = "double"


# Characters a backslash escapes inside double quotes.
DOUBLE_QUOTE_ESCAPES = frozenset({"\\", "$", '"', "\n"})


class Tokenizer:
    """Character-at-a-time lexer honoring single/double quotes and backslashes.

    Per character the checks run in a fixed order: backslash, quote toggle,
    separator, literal. Unterminated quotes are not an error; whatever was
    collected up to the end of the line becomes the last token.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self.state = LexState.NORMAL
        self.tokens: list[str] = []
        self._buffer: list[str] = []
        self._pos = 0

    def run(self) -> list[str]:
        while self._pos < len(self.line):
            self._step(self.line[self._pos])
            self._pos += 1
        self._flush()
        return self.tokens

    def _step(self, char: str) -> None:
        if char == "\\":
            self._backslash()
        elif char == '"' and self.state is not LexState.SINGLE:
            self._toggle(LexState.DOUBLE)
        elif char == "'" and self.state is not LexState.DOUBLE:
            self._toggle(LexState.SINGLE)
        elif char == " " and self.state is LexState.NORMAL:
            self._flush()
        else:
            self._buffer.append(char)

    def _backslash(self) -> None:
        nxt = self._peek()
        if self.state is LexState.SINGLE:
            self._buffer.append("\\")
        elif self.state is LexState.DOUBLE:
            if nxt is not None and nxt in DOUBLE_QUOTE_ESCAPES:
                self._buffer.append(nxt)
                self._pos += 1
            else:
                self._buffer.append("\\")
        elif nxt is not None:
            self._buffer.append(nxt)
            self._pos += 1
        # a trailing unquoted backslash has nothing to escape and is dropped

    def _toggle(self, quoted: LexState) -> None:
        self.state = LexState.NORMAL if self.state is quoted else quoted

    def _peek(self) -> str | None:
        if self._pos + 1 < len(self.line):
            return self.line[self._pos + 1]
        return None

    def _flush(self) -> None:
        if self._buffer:
            self.tokens.append("".join(self._buffer))
            self._buffer = []


def tokenize(line: str) -> list[str]:
    return Tokenizer(line).run()


__all__ = ["LexState", "Tokenizer", "tokenize"]
