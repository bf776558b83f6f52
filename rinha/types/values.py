"""Scalar runtime values and their textual rendering.

Int, Bool and Str are distinct wrapper types so that a boolean is never
accepted where an integer is required (Python's own bool is an int).
"""

from __future__ import annotations

from rinha import RinhaValue
from rinha.errors import RinhaUnsupportedPrintValue


class Int:
    __slots__ = ("value",)

    def __init__(self, value: int):
        if isinstance(value, bool):
            raise TypeError("Int cannot wrap a bool; use Bool")
        self.value = int(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Int) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Int, self.value))

    def __repr__(self):
        return f"Int({self.value})"

    def __str__(self):
        return str(self.value)


class Bool:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Bool) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Bool, self.value))

    def __repr__(self):
        return f"Bool({self.value})"

    def __str__(self):
        return "true" if self.value else "false"


class Str:
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = str(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Str) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Str, self.value))

    def __repr__(self):
        return f"Str({self.value!r})"

    def __str__(self):
        return self.value


RENDERABLE = (Int, Bool, Str)


def type_name(value: RinhaValue) -> str:
    """Short name of a runtime value's kind, for error messages."""
    return type(value).__name__.removesuffix("Type")


def render(value: RinhaValue, location=None) -> str:
    """Textual form of a value as print emits it.

    Void and Closure have no rendering; asking for one raises
    RinhaUnsupportedPrintValue.
    """
    if isinstance(value, RENDERABLE):
        return str(value)
    raise RinhaUnsupportedPrintValue(
        f"Cannot print a value of type {type_name(value)}", location
    )
