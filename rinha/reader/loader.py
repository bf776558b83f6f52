"""Loader for Rinha program documents.

Decodes the JSON node graph into Term trees. Each node is an object whose
`kind` field selects the variant; the variant decides which other fields are
required. Anything malformed is reported as RinhaLoadError with a JSON path
(e.g. `$.expression.next.value`) pointing at the offending node, so the
evaluator only ever sees well-formed Terms.
"""

from __future__ import annotations

import json
import logging
from os import PathLike
from typing import Any, Callable, IO

from rinha.errors import RinhaLoadError
from rinha.syntax.terms import (
    Location,
    BinaryOp,
    Term,
    IntLiteral,
    StrLiteral,
    BoolLiteral,
    Print,
    Binary,
    If,
    Let,
    Var,
    Function,
    Call,
    Program,
)

logger = logging.getLogger(__name__)

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1


# --- field helpers ---

def _field(node: dict, key: str, path: str) -> Any:
    if key not in node:
        raise RinhaLoadError(f"{path}: missing field '{key}'")
    return node[key]


def _object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise RinhaLoadError(f"{path}: expected an object, got {type(value).__name__}")
    return value


def _text(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise RinhaLoadError(f"{path}: expected a string, got {type(value).__name__}")
    return value


def _identifier(value: Any, path: str) -> str:
    """Identifiers appear as {"text": name}; a bare string is accepted too."""
    if isinstance(value, str):
        return value
    node = _object(value, path)
    return _text(_field(node, "text", path), f"{path}.text")


def _location(node: dict, path: str) -> Location | None:
    raw = node.get("location")
    if raw is None:
        return None
    raw = _object(raw, f"{path}.location")
    start, end = raw.get("start", 0), raw.get("end", 0)
    # bool is an int subclass; reject it explicitly
    if type(start) is not int or type(end) is not int:
        raise RinhaLoadError(f"{path}.location: start and end must be integers")
    filename = raw.get("filename", "")
    return Location(start, end, _text(filename, f"{path}.location.filename"))


# --- node builders ---

def _int(node: dict, path: str) -> Term:
    value = _field(node, "value", path)
    if type(value) is not int:
        raise RinhaLoadError(f"{path}.value: expected an integer, got {type(value).__name__}")
    if not I32_MIN <= value <= I32_MAX:
        raise RinhaLoadError(f"{path}.value: {value} does not fit in 32 bits")
    return IntLiteral(value, _location(node, path))


def _str(node: dict, path: str) -> Term:
    return StrLiteral(_text(_field(node, "value", path), f"{path}.value"), _location(node, path))


def _bool(node: dict, path: str) -> Term:
    value = _field(node, "value", path)
    if not isinstance(value, bool):
        raise RinhaLoadError(f"{path}.value: expected a boolean, got {type(value).__name__}")
    return BoolLiteral(value, _location(node, path))


def _print(node: dict, path: str) -> Term:
    return Print(_child(node, "value", path), _location(node, path))


def _binary(node: dict, path: str) -> Term:
    op_name = _text(_field(node, "op", path), f"{path}.op")
    try:
        op = BinaryOp(op_name)
    except ValueError:
        raise RinhaLoadError(f"{path}.op: unsupported operator '{op_name}'") from None
    lhs = _child(node, "lhs", path)
    rhs = _child(node, "rhs", path)
    return Binary(op, lhs, rhs, _location(node, path))


def _if(node: dict, path: str) -> Term:
    condition = _child(node, "condition", path)
    then = _child(node, "then", path)
    otherwise = _child(node, "otherwise", path)
    return If(condition, then, otherwise, _location(node, path))


def _let(node: dict, path: str) -> Term:
    name = _identifier(_field(node, "name", path), f"{path}.name")
    value = _child(node, "value", path)
    next_ = _child(node, "next", path)
    return Let(name, value, next_, _location(node, path))


def _var(node: dict, path: str) -> Term:
    return Var(_text(_field(node, "text", path), f"{path}.text"), _location(node, path))


def _function(node: dict, path: str) -> Term:
    raw = _field(node, "parameters", path)
    if not isinstance(raw, list):
        raise RinhaLoadError(f"{path}.parameters: expected a list")
    parameters = [_identifier(p, f"{path}.parameters[{i}]") for i, p in enumerate(raw)]
    body = _child(node, "value", path)
    return Function(parameters, body, _location(node, path))


def _call(node: dict, path: str) -> Term:
    callee = _child(node, "callee", path)
    raw = _field(node, "arguments", path)
    if not isinstance(raw, list):
        raise RinhaLoadError(f"{path}.arguments: expected a list")
    arguments = [load_term(a, f"{path}.arguments[{i}]") for i, a in enumerate(raw)]
    return Call(callee, arguments, _location(node, path))


BUILDERS: dict[str, Callable[[dict, str], Term]] = {
    "Int": _int,
    "Str": _str,
    "Bool": _bool,
    "Print": _print,
    "Binary": _binary,
    "If": _if,
    "Let": _let,
    "Var": _var,
    "Function": _function,
    "Call": _call,
}


def _child(node: dict, key: str, path: str) -> Term:
    return load_term(_field(node, key, path), f"{path}.{key}")


# --- public API ---

def load_term(node: Any, path: str = "$") -> Term:
    """Build the Term tree rooted at a decoded JSON node."""
    node = _object(node, path)
    kind = _text(_field(node, "kind", path), f"{path}.kind")
    builder = BUILDERS.get(kind)
    if builder is None:
        raise RinhaLoadError(f"{path}.kind: unknown node kind '{kind}'")
    return builder(node, path)


def load_program(data: Any) -> Program:
    """Build a Program from a decoded document {"name", "expression", "location"}."""
    data = _object(data, "$")
    name = data.get("name", "")
    name = _text(name, "$.name")
    try:
        expression = load_term(_field(data, "expression", "$"), "$.expression")
    except RecursionError:
        raise RinhaLoadError("$.expression: document is nested too deeply") from None
    logger.debug("Loaded program %r", name)
    return Program(name, expression, _location(data, "$"))


def loads(text: str | bytes) -> Program:
    """Decode a complete JSON document into a Program."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RinhaLoadError(f"Invalid JSON: {exc}") from None
    except UnicodeDecodeError as exc:
        raise RinhaLoadError(f"Invalid encoding: {exc}") from None
    except RecursionError:
        raise RinhaLoadError("Invalid JSON: document is nested too deeply") from None
    return load_program(data)


def load(fp: IO) -> Program:
    """Read a whole document from a file object, then decode it."""
    try:
        text = fp.read()
    except UnicodeDecodeError as exc:
        raise RinhaLoadError(f"Invalid encoding: {exc}") from None
    return loads(text)


def load_path(path: str | PathLike) -> Program:
    with open(path, encoding="utf-8") as fp:
        return load(fp)
