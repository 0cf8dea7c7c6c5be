"""Lexer for the basic language: the arithmetic tokens plus names, functions and ``const``."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

MAX_INTEGER = 255


class TokenKind(enum.Enum):
    """The kinds of token the basic language knows."""

    FALSE = "false"
    TRUE = "true"
    INTEGER = "integer"
    PLUS = "+"
    QUEST = "?"
    COLON = ":"
    IDENT = "ident"
    SEMICOLON = ";"
    CONST = "const"
    EQUALS = "="
    PAREN_L = "("
    COMMA = ","
    PAREN_R = ")"
    ARROW = "=>"


class LexError(ValueError):
    """Raised when the input holds text that is not a token."""

    def __init__(self, position: int, text: str) -> None:
        super().__init__(f"unexpected input {text!r} at offset {position}")
        self.position = position
        self.text = text


@dataclass(frozen=True)
class Token:
    """A token with the slice of source it came from.

    ``value`` holds the number of an integer and the name of an identifier.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    value: int | str | None = None

    @property
    def span(self) -> tuple[int, int]:
        """The half-open ``(start, end)`` offsets of the token."""
        return (self.start, self.end)


_WHITESPACE = re.compile(r"\s+")
_LEXEME = re.compile(
    r"(?P<integer>0|[1-9][0-9]*)"
    r"|(?P<ident>[a-zA-Z_][a-zA-Z0-9_]*)"
    r"|(?P<arrow>=>)"
    r"|(?P<equals>=)"
    r"|(?P<plus>\+)"
    r"|(?P<quest>\?)"
    r"|(?P<colon>:)"
    r"|(?P<semicolon>;)"
    r"|(?P<paren_l>\()"
    r"|(?P<comma>,)"
    r"|(?P<paren_r>\))"
)
_KINDS = {
    "integer": TokenKind.INTEGER,
    "ident": TokenKind.IDENT,
    "arrow": TokenKind.ARROW,
    "equals": TokenKind.EQUALS,
    "plus": TokenKind.PLUS,
    "quest": TokenKind.QUEST,
    "colon": TokenKind.COLON,
    "semicolon": TokenKind.SEMICOLON,
    "paren_l": TokenKind.PAREN_L,
    "comma": TokenKind.COMMA,
    "paren_r": TokenKind.PAREN_R,
}
_KEYWORDS = {
    "false": TokenKind.FALSE,
    "true": TokenKind.TRUE,
    "const": TokenKind.CONST,
}


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source`` lazily, skipping whitespace.

    Keywords win over identifiers of the same text; longer identifiers such as
    ``constant`` stay identifiers. Raises :class:`LexError` when unknown text or
    an integer above 255 is met.
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
        value: int | str | None = None
        if kind is TokenKind.INTEGER:
            value = int(text)
            if value > MAX_INTEGER:
                raise LexError(pos, text)
        elif kind is TokenKind.IDENT:
            keyword = _KEYWORDS.get(text)
            if keyword is None:
                value = text
            else:
                kind = keyword
        yield Token(kind, text, pos, match.end(), value)
        pos = match.end()