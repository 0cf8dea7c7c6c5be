"""Type checker for the arithmetic language."""

from __future__ import annotations

import enum

from tinyts.arith_term import Add, Bool, If, Integer, Term


class Type(enum.Enum):
    """Types of arithmetic terms."""

    BOOLEAN = "boolean"
    INTEGER = "number"


class TypeCheckError(Exception):
    """Raised when a term is ill-typed."""


def _require(actual: Type, expected: Type, message: str) -> None:
    if actual is not expected:
        raise TypeCheckError(message)


def typecheck(term: Term) -> Type:
    """Return the type of ``term`` or raise :class:`TypeCheckError`."""
    match term:
        case Bool():
            return Type.BOOLEAN
        case Integer():
            return Type.INTEGER
        case Add(left=left, right=right):
            _require(typecheck(left), Type.INTEGER, "integer expected")
            _require(typecheck(right), Type.INTEGER, "integer expected")
            return Type.INTEGER
        case If(cond=cond, thn=thn, els=els):
            _require(typecheck(cond), Type.BOOLEAN, "boolean expected")
            thn_type = typecheck(thn)
            if thn_type is not typecheck(els):
                raise TypeCheckError("then and else have different types")
            return thn_type
    raise TypeError(f"not a term: {term!r}")