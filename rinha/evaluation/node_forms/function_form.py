import logging

from rinha import EvaluatorFn, RinhaValue
from rinha.output import Output
from rinha.syntax.terms import Function
from rinha.types.closure import Closure
from rinha.types.environment import Environment

logger = logging.getLogger(__name__)


def function_form(
    term: Function,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    # The body is not evaluated here; the environment is frozen as of now.
    closure = Closure(term.parameters, term.body, env.snapshot())
    logger.debug("Closure created: params=(%s), captured=%d name(s)",
                 ", ".join(term.parameters), len(closure.env))
    return closure
