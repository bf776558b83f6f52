from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.operators import apply_binary
from rinha.output import Output
from rinha.syntax.terms import Binary
from rinha.types.environment import Environment


def binary_form(
    term: Binary,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    # Left operand strictly before right: either may print
    lhs = evaluate_fn(term.lhs, env, output)
    rhs = evaluate_fn(term.rhs, env, output)
    return apply_binary(term.op, lhs, rhs, term.location)
