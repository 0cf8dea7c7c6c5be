"""Lexer for the arithmetic language: booleans, small integers, ``+`` and ``?:``."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

MAX_INTEGER = 255


class TokenKind(enum.Enum):
    """The kinds of token the arithmetic language knows."""

    FALSE = "false"
    TRUE = "true"
    INTEGER = "integer"
    PLUS = "+"
    QUEST = "?"
    COLON = ":"


class LexError(ValueError):
    """Raised when the input holds text that is not a token."""

    def __init__(self, position: int, text: str) -> None:
        super().__init__(f"unexpected input {text!r} at offset {position}")
        self.position = position
        self.text = text


@dataclass(frozen=True)
class Token:
    """A token with the slice of source it came from."""

    kind: TokenKind
    text: str
    start: int
    end: int
    value: int | None = None

    @property
    def span(self) -> tuple[int, int]:
        """The half-open ``(start, end)`` offsets of the token."""
        return (self.start, self.end)


_WHITESPACE = re.compile(r"\s+")
_LEXEME = re.compile(
    r"(?P<false>false)"
    r"|(?P<true>true)"
    r"|(?P<integer>0|[1-9][0-9]*)"
    r"|(?P<plus>\+)"
    r"|(?P<quest>\?)"
    r"|(?P<colon>:)"
)
_KINDS = {
    "false": TokenKind.FALSE,
    "true": TokenKind.TRUE,
    "integer": TokenKind.INTEGER,
    "plus": TokenKind.PLUS,
    "quest": TokenKind.QUEST,
    "colon": TokenKind.COLON,
}


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source`` lazily, skipping whitespace.

    Raises :class:`LexError` when unknown text or an integer above 255 is met.
    """
    pos = 0
    while True:
        blank = _WHITESPACE.match(source, pos)
        if blank:
            pos = blank.end()
        if pos >= len(source):
            return
        match = _LEXEME.match(source, pos)
        if match is None:
            raise LexError(pos, source[pos])
        kind = _KINDS[match.lastgroup]
        text = match.group()
        value = None
        if kind is TokenKind.INTEGER:
            value = int(text)
            if value > MAX_INTEGER:
                raise LexError(pos, text)
        yield Token(kind, text, pos, match.end(), value)
        pos = match.end()