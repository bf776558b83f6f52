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

__all__ = [
    "Location",
    "BinaryOp",
    "Term",
    "IntLiteral",
    "StrLiteral",
    "BoolLiteral",
    "Print",
    "Binary",
    "If",
    "Let",
    "Var",
    "Function",
    "Call",
    "Program",
]
