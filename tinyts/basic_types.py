"""Types of the basic language."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Type:
    """Base class of every type."""


@dataclass(frozen=True)
class BooleanType(Type):
    """The ``boolean`` type."""

    def __str__(self) -> str:
        return "boolean"


@dataclass(frozen=True)
class IntegerType(Type):
    """The ``number`` type."""

    def __str__(self) -> str:
        return "number"


@dataclass(frozen=True)
class Param:
    """A named, typed parameter."""

    name: str
    typ: Type

    def __post_init__(self) -> None:
        if not isinstance(self.typ, Type):
            raise TypeError(f"parameter type must be a Type, got {self.typ!r}")

    def __str__(self) -> str:
        return f"{self.name}: {self.typ}"


@dataclass(frozen=True)
class FuncType(Type):
    """A function type ``(params) => ret_type``."""

    params: tuple[Param, ...]
    ret_type: Type

    def __post_init__(self) -> None:
        params = tuple(self.params)
        for param in params:
            if not isinstance(param, Param):
                raise TypeError(f"function parameter must be a Param, got {param!r}")
        if not isinstance(self.ret_type, Type):
            raise TypeError(f"return type must be a Type, got {self.ret_type!r}")
        object.__setattr__(self, "params", params)

    def __str__(self) -> str:
        params = ", ".join(str(param) for param in self.params)
        return f"({params}) => {self.ret_type}"