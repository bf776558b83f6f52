from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.apply import apply_closure, ensure_callable
from rinha.output import Output
from rinha.syntax.terms import Call
from rinha.types.environment import Environment


def call_form(
    term: Call,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    # The callee is checked before any argument is evaluated
    callee = ensure_callable(evaluate_fn(term.callee, env, output), term.location)
    args = [evaluate_fn(arg, env, output) for arg in term.arguments]
    return apply_closure(callee, args, output, evaluate_fn, term.location)
