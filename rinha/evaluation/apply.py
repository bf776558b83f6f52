"""Application engine for Rinha.

Centralizes the call protocol:
- Only Closure values are callable.
- Arguments arrive already evaluated, left to right.
- The body runs in a snapshot of the closure's captured environment extended
  with the parameters (lexical scoping). The caller's environment is never
  consulted.
"""

from __future__ import annotations

import logging

from rinha import RinhaValue, EvaluatorFn
from rinha.errors import RinhaNotCallable
from rinha.output import Output
from rinha.types.closure import Closure
from rinha.types.values import type_name

logger = logging.getLogger(__name__)


def ensure_callable(callee: RinhaValue, location=None) -> Closure:
    """Return `callee` if it can be called, else raise RinhaNotCallable."""
    if not isinstance(callee, Closure):
        raise RinhaNotCallable(f"Cannot call a value of type {type_name(callee)}", location)
    return callee


def apply_closure(
    callee: RinhaValue,
    args: list[RinhaValue],
    output: Output,
    evaluate_fn: EvaluatorFn,
    location=None,
) -> RinhaValue:
    """Invoke `callee` with `args` and return the value of its body.

    Raises RinhaNotCallable if `callee` is not a Closure and
    RinhaArityMismatch if the argument count differs from the parameter count.
    """
    fn = ensure_callable(callee, location)
    call_env = fn.extend_env(args, location)
    logger.debug("Calling %s", fn)
    return evaluate_fn(fn.body, call_env, output)
