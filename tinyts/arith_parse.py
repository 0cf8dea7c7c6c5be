"""Recursive-descent parser for the arithmetic language.

Grammar::

    unary   = false | true | integer
    binary  = unary | unary "+" binary
    ternary = binary | binary "?" ternary ":" ternary
"""

from __future__ import annotations

from collections.abc import Iterable

from tinyts.arith_term import Add, Bool, If, Integer, Term
from tinyts.arith_token import Token, TokenKind, tokenize


class ParseError(ValueError):
    """Raised when the tokens do not form a term."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


def _unexpected(token: Token | None) -> ParseError:
    if token is None:
        return ParseError("unexpected end of input")
    return ParseError(f"unexpected token {token.text!r} at offset {token.start}", token)


class _Parser:
    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._lookahead: Token | None = None

    def _peek(self) -> Token | None:
        if self._lookahead is None:
            self._lookahead = next(self._tokens, None)
        return self._lookahead

    def _advance(self) -> Token | None:
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return next(self._tokens, None)

    def _expect(self, kind: TokenKind) -> Token:
        token = self._advance()
        if token is None or token.kind is not kind:
            raise _unexpected(token)
        return token

    def binary(self) -> Term:
        token = self._advance()
        if token is None:
            raise _unexpected(None)
        if token.kind is TokenKind.FALSE:
            unary: Term = Bool(False)
        elif token.kind is TokenKind.TRUE:
            unary = Bool(True)
        elif token.kind is TokenKind.INTEGER:
            unary = Integer(token.value)
        else:
            raise _unexpected(token)

        following = self._peek()
        if following is None or following.kind in (TokenKind.QUEST, TokenKind.COLON):
            return unary
        if following.kind is TokenKind.PLUS:
            self._advance()
            return Add(unary, self.binary())
        raise _unexpected(following)

    def ternary(self) -> Term:
        binary = self.binary()
        following = self._peek()
        if following is None or following.kind is TokenKind.COLON:
            return binary
        if following.kind is TokenKind.QUEST:
            self._advance()
            thn = self.ternary()
            self._expect(TokenKind.COLON)
            els = self.ternary()
            return If(binary, thn, els)
        raise _unexpected(following)


def parse(source: str) -> Term:
    """Parse ``source`` into a term; text after a complete term is ignored."""
    return _Parser(tokenize(source)).ternary()