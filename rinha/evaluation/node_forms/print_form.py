from rinha import EvaluatorFn, RinhaValue
from rinha.output import Output
from rinha.syntax.terms import Print
from rinha.types.environment import Environment
from rinha.types.values import render
from rinha.types.void import Void


def print_form(
    term: Print,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    """
    print(value)
    Writes the rendering of an Int, Str or Bool with no separator and yields Void.
    """
    value = evaluate_fn(term.value, env, output)
    output.write(render(value, term.location))
    return Void
