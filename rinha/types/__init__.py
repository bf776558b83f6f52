from rinha.types.void import Void, VoidType
from rinha.types.values import Int, Bool, Str, render, type_name
from rinha.types.environment import Environment
from rinha.types.closure import Closure

__all__ = [
    "Void",
    "VoidType",
    "Int",
    "Bool",
    "Str",
    "render",
    "type_name",
    "Environment",
    "Closure",
]
