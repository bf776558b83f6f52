"""Binary operator semantics.

Only the pairings listed in each operator's table are defined; anything else,
including any operand that is a Bool where an Int is expected, a Void or a
Closure, raises RinhaInvalidOperation. Integer results wrap to 32 bits.
"""

from __future__ import annotations

from typing import Callable

from rinha import RinhaValue
from rinha.errors import RinhaInvalidOperation
from rinha.syntax.terms import BinaryOp
from rinha.types.values import Int, Bool, Str, type_name

_I32_MODULUS = 1 << 32
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def wrap_i32(n: int) -> int:
    """Reduce `n` to a signed 32-bit integer (two's complement)."""
    return (n - _I32_MIN) % _I32_MODULUS + _I32_MIN


def _add(lhs: RinhaValue, rhs: RinhaValue) -> RinhaValue | None:
    match lhs, rhs:
        case Int(), Int():
            return Int(wrap_i32(lhs.value + rhs.value))
        case Str(), Str():
            return Str(lhs.value + rhs.value)
        case Int(), Str():
            return Str(str(lhs) + rhs.value)
        case Str(), Int():
            return Str(lhs.value + str(rhs))
    return None


def _sub(lhs: RinhaValue, rhs: RinhaValue) -> RinhaValue | None:
    if isinstance(lhs, Int) and isinstance(rhs, Int):
        return Int(wrap_i32(lhs.value - rhs.value))
    return None


def _lt(lhs: RinhaValue, rhs: RinhaValue) -> RinhaValue | None:
    if isinstance(lhs, Int) and isinstance(rhs, Int):
        return Bool(lhs.value < rhs.value)
    return None


OPERATORS: dict[BinaryOp, Callable[[RinhaValue, RinhaValue], RinhaValue | None]] = {
    BinaryOp.ADD: _add,
    BinaryOp.SUB: _sub,
    BinaryOp.LT: _lt,
}


def apply_binary(op: BinaryOp, lhs: RinhaValue, rhs: RinhaValue, location=None) -> RinhaValue:
    """Apply `op` to two already-evaluated operands."""
    result = OPERATORS[op](lhs, rhs)
    if result is None:
        raise RinhaInvalidOperation(
            f"Cannot apply {op} to {type_name(lhs)} and {type_name(rhs)}", location
        )
    return result
