from rinha import EvaluatorFn, RinhaValue
from rinha.output import Output
from rinha.syntax.terms import IntLiteral, StrLiteral, BoolLiteral
from rinha.types.environment import Environment
from rinha.types.values import Int, Str, Bool


# Literals never touch the environment or recurse.

def int_form(
    term: IntLiteral,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    return Int(term.value)


def str_form(
    term: StrLiteral,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    return Str(term.value)


def bool_form(
    term: BoolLiteral,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    return Bool(term.value)
