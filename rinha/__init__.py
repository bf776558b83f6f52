# Core type aliases for Rinha's data model.
# Programs arrive as Term trees (frozen dataclasses in rinha.syntax.terms) and
# evaluate to runtime values (Void, Int, Bool, Str, Closure in rinha.types).
#
# Naming guidance:
# - TermNode:   Use in loader/printer code to denote program tree nodes.
# - RinhaValue: Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` so the leaf modules can import them without
# pulling in the whole type hierarchy.

from typing import Any, Callable

# Runtime value alias
RinhaValue = Any
# Program tree node alias
TermNode = Any

# Evaluator function type: the recursive step handed to node forms
EvaluatorFn = Callable[..., RinhaValue]

__version__ = "0.1.0"
