from rinha import EvaluatorFn, RinhaValue
from rinha.errors import RinhaInvalidCondition
from rinha.output import Output
from rinha.syntax.terms import If
from rinha.types.environment import Environment
from rinha.types.values import Bool, type_name


def if_form(
    term: If,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    cond = evaluate_fn(term.condition, env, output)
    # No truthiness: only a Bool selects a branch
    if not isinstance(cond, Bool):
        raise RinhaInvalidCondition(
            f"Condition must be a Bool, got {type_name(cond)}", term.location
        )

    if cond.value:
        return evaluate_fn(term.then, env, output)
    return evaluate_fn(term.otherwise, env, output)
