"""Syntax tree of the basic language."""

from __future__ import annotations

from dataclasses import dataclass

from tinyts.basic_types import Param

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


@dataclass(frozen=True)
class Var(Term):
    """A reference to a variable, such as ``x`` or ``f``."""

    name: str


@dataclass(frozen=True)
class Func(Term):
    """An anonymous function ``(x: number) => body``."""

    params: tuple[Param, ...]
    body: Term

    def __post_init__(self) -> None:
        params = tuple(self.params)
        for param in params:
            if not isinstance(param, Param):
                raise TypeError(f"function parameter must be a Param, got {param!r}")
        object.__setattr__(self, "params", params)


@dataclass(frozen=True)
class Call(Term):
    """A function call ``func(args...)``."""

    func: Term
    args: tuple[Term, ...]

    def __post_init__(self) -> None:
        args = tuple(self.args)
        for arg in args:
            if not isinstance(arg, Term):
                raise TypeError(f"call argument must be a Term, got {arg!r}")
        object.__setattr__(self, "args", args)


@dataclass(frozen=True)
class Seq(Term):
    """Sequencing ``body; rest``."""

    body: Term
    rest: Term


@dataclass(frozen=True)
class Const(Term):
    """A binding ``const name = init; rest``."""

    name: str
    init: Term
    rest: Term