from rinha import EvaluatorFn, RinhaValue
from rinha.errors import RinhaUnboundVariable
from rinha.output import Output
from rinha.syntax.terms import Var
from rinha.types.environment import Environment


def var_form(
    term: Var,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    value = env.lookup(term.name)
    if value is None:
        raise RinhaUnboundVariable(f"Unbound variable {term.name}", term.location)
    return value
