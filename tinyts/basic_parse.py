"""Recursive-descent parser for the basic language.

Grammar::

    func         = "(" ")" "=>" ternary | "(" param_list ")" "=>" ternary
    param        = ident ":" ident
    param_list   = param | param "," param_list
    func_call    = ident "(" ")"
    primary_expr = false | true | integer | ident | func | func_call
    binary       = primary_expr | primary_expr "+" binary
    ternary      = binary | binary "?" ternary ":" ternary
    const        = "const" ident "=" ternary ";" term
    seq          = ternary ";" term
    term         = const | seq | ternary ";" | ternary
"""

from __future__ import annotations

from collections.abc import Iterable

from tinyts.basic_term import Add, Bool, Call, Const, Func, If, Integer, Seq, Term, Var
from tinyts.basic_token import Token, TokenKind, tokenize
from tinyts.basic_types import BooleanType, IntegerType, Param, Type


class ParseError(ValueError):
    """Raised when the tokens do not form a term."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


def _unexpected(token: Token | None) -> ParseError:
    if token is None:
        return ParseError("unexpected end of input")
    return ParseError(f"unexpected token {token.text!r} at offset {token.start}", token)


_TYPE_NAMES: dict[str, Type] = {
    "number": IntegerType(),
    "boolean": BooleanType(),
}

_TERM_STARTS = frozenset(
    {
        TokenKind.FALSE,
        TokenKind.TRUE,
        TokenKind.INTEGER,
        TokenKind.IDENT,
        TokenKind.PAREN_L,
    }
)


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

    def term(self) -> Term:
        token = self._peek()
        if token is None:
            raise _unexpected(None)
        if token.kind in _TERM_STARTS:
            body = self.ternary()
            following = self._peek()
            if following is None:
                return body
            if following.kind is not TokenKind.SEMICOLON:
                raise _unexpected(following)
            self._advance()
            if self._peek() is None:
                return body
            return Seq(body, self.term())
        if token.kind is TokenKind.CONST:
            self._advance()
            name = self._expect(TokenKind.IDENT).value
            self._expect(TokenKind.EQUALS)
            init = self.ternary()
            self._expect(TokenKind.SEMICOLON)
            return Const(name, init, self.term())
        raise _unexpected(token)

    def _param(self, name_token: Token) -> Param:
        self._expect(TokenKind.COLON)
        type_token = self._expect(TokenKind.IDENT)
        typ = _TYPE_NAMES.get(type_token.value)
        if typ is None:
            raise ParseError(
                f"unsupported parameter type {type_token.text!r} at offset {type_token.start}",
                type_token,
            )
        return Param(name_token.value, typ)

    def _func(self) -> Func:
        params: list[Param] = []
        while True:
            token = self._advance()
            if token is None:
                raise _unexpected(None)
            if token.kind is TokenKind.PAREN_R:
                break
            if token.kind is not TokenKind.IDENT:
                raise _unexpected(token)
            params.append(self._param(token))
            separator = self._advance()
            if separator is None:
                raise _unexpected(None)
            if separator.kind is TokenKind.PAREN_R:
                break
            if separator.kind is not TokenKind.COMMA:
                raise _unexpected(separator)
        self._expect(TokenKind.ARROW)
        return Func(tuple(params), self.ternary())

    def primary(self) -> Term:
        token = self._advance()
        if token is None:
            raise _unexpected(None)
        match token.kind:
            case TokenKind.FALSE:
                return Bool(False)
            case TokenKind.TRUE:
                return Bool(True)
            case TokenKind.INTEGER:
                return Integer(token.value)
            case TokenKind.IDENT:
                following = self._peek()
                if following is not None and following.kind is TokenKind.PAREN_L:
                    self._advance()
                    self._expect(TokenKind.PAREN_R)
                    return Call(Var(token.value), ())
                return Var(token.value)
            case TokenKind.PAREN_L:
                return self._func()
        raise _unexpected(token)

    def binary(self) -> Term:
        primary = self.primary()
        following = self._peek()
        if following is None or following.kind in (
            TokenKind.QUEST,
            TokenKind.COLON,
            TokenKind.SEMICOLON,
        ):
            return primary
        if following.kind is TokenKind.PLUS:
            self._advance()
            return Add(primary, self.binary())
        raise _unexpected(following)

    def ternary(self) -> Term:
        binary = self.binary()
        following = self._peek()
        if following is None or following.kind in (TokenKind.COLON, TokenKind.SEMICOLON):
            return binary
        if following.kind is TokenKind.QUEST:
            self._advance()
            thn = self.ternary()
            self._expect(TokenKind.COLON)
            els = self.ternary()
            return If(binary, thn, els)
        raise _unexpected(following)


def parse(source: str) -> Term:
    """Parse a program of the basic language into a term.

    Raises :class:`ParseError` on malformed input and
    :class:`~tinyts.basic_token.LexError` on text that is not a token.
    """
    return _Parser(tokenize(source)).term()