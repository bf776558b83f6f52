from rinha import EvaluatorFn, RinhaValue
from rinha.output import Output
from rinha.syntax.terms import Let, Function
from rinha.types.closure import Closure
from rinha.types.environment import Environment


def let_form(
    term: Let,
    env: Environment,
    output: Output,
    evaluate_fn: EvaluatorFn,
) -> RinhaValue:
    """
    let name = value; next
    Binds into the current environment in place, so the name stays visible to
    everything evaluated after it through this environment.
    """
    value = evaluate_fn(term.value, env, output)
    if isinstance(term.value, Function) and isinstance(value, Closure):
        # let-bound function literals may refer to themselves
        value = value.named(term.name)
    env.bind(term.name, value)
    return evaluate_fn(term.next, env, output)
