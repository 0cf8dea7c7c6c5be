"""Syntax tree of the arithmetic language."""

from __future__ import annotations

from dataclasses import dataclass

MAX_INTEGER = 255


@dataclass(frozen=True)
class Term:
    """Base class of every term."""


@dataclass(frozen=True)
class Bool(Term):
    """A ``true`` or ``false`` literal."""

    value: bool


@dataclass(frozen=True)
class Integer(Term):
    """An integer literal, limited to 0..=255."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"integer literal must be an int, got {self.value!r}")
        if not 0 <= self.value <= MAX_INTEGER:
            raise ValueError(f"integer literal out of range: {self.value}")


@dataclass(frozen=True)
class Add(Term):
    """Addition ``left + right``."""

    left: Term
    right: Term


@dataclass(frozen=True)
class If(Term):
    """Conditional ``cond ? thn : els``."""

    cond: Term
    thn: Term
    els: Term