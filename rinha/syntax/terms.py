"""Program tree for Rinha.

Terms are immutable tagged nodes produced by the loader. A parent owns its
children exclusively; no node is shared or mutated after construction, so the
tree is acyclic by construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Location:
    start: int
    end: int
    filename: str = ""

    def __str__(self) -> str:
        name = self.filename or "<program>"
        return f"{name}:{self.start}..{self.end}"


class BinaryOp(Enum):
    ADD = "Add"
    SUB = "Sub"
    LT = "Lt"

    def __str__(self) -> str:
        return self.value


class Term:
    """Marker base class for every program tree node."""

    __slots__ = ()


def _location():
    return field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class IntLiteral(Term):
    value: int
    location: Location | None = _location()


@dataclass(frozen=True)
class StrLiteral(Term):
    value: str
    location: Location | None = _location()


@dataclass(frozen=True)
class BoolLiteral(Term):
    value: bool
    location: Location | None = _location()


@dataclass(frozen=True)
class Print(Term):
    value: Term
    location: Location | None = _location()


@dataclass(frozen=True)
class Binary(Term):
    op: BinaryOp
    lhs: Term
    rhs: Term
    location: Location | None = _location()


@dataclass(frozen=True)
class If(Term):
    condition: Term
    then: Term
    otherwise: Term
    location: Location | None = _location()


@dataclass(frozen=True)
class Let(Term):
    name: str
    value: Term
    next: Term
    location: Location | None = _location()


@dataclass(frozen=True)
class Var(Term):
    name: str
    location: Location | None = _location()


@dataclass(frozen=True)
class Function(Term):
    parameters: tuple[str, ...]
    body: Term
    location: Location | None = _location()

    def __post_init__(self):
        # Accept any sequence from callers but store an immutable tuple
        object.__setattr__(self, "parameters", tuple(self.parameters))


@dataclass(frozen=True)
class Call(Term):
    callee: Term
    arguments: tuple[Term, ...]
    location: Location | None = _location()

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class Program:
    """A loaded program document: its name and root expression."""
    name: str
    expression: Term
    location: Location | None = _location()
