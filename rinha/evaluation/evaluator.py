"""Core evaluator for the Rinha interpreter.

Dispatches on the class of each Term through the NODE_FORMS table. Every
node form receives `evaluate0` so that it recurses through the same
dispatcher. Recursion is the host's own: there is no explicit call stack
and no tail-call elimination.
"""

from __future__ import annotations

from rinha import TermNode, RinhaValue
from rinha.errors import RinhaError, RinhaStackExhausted
from rinha.evaluation.node_forms import NODE_FORMS
from rinha.output import Output, StreamOutput
from rinha.types.environment import Environment


def evaluate(
    term: TermNode, env: Environment | None = None, output: Output | None = None
) -> RinhaValue:
    """
    Evaluate a whole program tree.

    `env` defaults to a fresh empty environment and `output` to stdout.
    Running out of host stack is fatal and surfaces as RinhaStackExhausted.
    """
    if env is None:
        env = Environment()
    if output is None:
        output = StreamOutput()

    try:
        return evaluate0(term, env, output)
    except RecursionError:
        raise RinhaStackExhausted("Maximum evaluation depth exceeded") from None


def evaluate0(term: TermNode, env: Environment, output: Output) -> RinhaValue:
    """
    Core evaluator: single-step dispatch on the node kind.
    """
    form = NODE_FORMS.get(type(term))
    if form is None:
        raise RinhaError(f"Cannot evaluate {term!r}: not a program term")
    return form(term, env, output, evaluate0)
