import json

import pytest

from rinha.errors import RinhaUnboundVariable, RinhaLoadError
from rinha.interpreter import Interpreter
from rinha.output import BufferOutput
from rinha.reader.loader import load_program
from rinha.syntax.terms import IntLiteral
from rinha.types import Int, Void


def int_(n):
    return {"kind": "Int", "value": n}


def var(name):
    return {"kind": "Var", "text": name}


def binary(op, lhs, rhs):
    return {"kind": "Binary", "op": op, "lhs": lhs, "rhs": rhs}


def let(name, value, next_):
    return {"kind": "Let", "name": {"text": name}, "value": value, "next": next_}


def program(expression, name="test.rinha"):
    return {"name": name, "expression": expression}


@pytest.fixture
def interp(output):
    return Interpreter(output=output)


def test_print_sum(interp, output):
    doc = program({"kind": "Print", "value": binary("Add", int_(1), int_(2))})
    assert interp.run(doc) is Void
    assert output.getvalue() == "3"


def test_identity_program(interp, output):
    doc = program(
        let(
            "id",
            {"kind": "Function", "parameters": [{"text": "x"}], "value": var("x")},
            {"kind": "Print", "value": {"kind": "Call", "callee": var("id"), "arguments": [{"kind": "Str", "value": "hi"}]}},
        )
    )
    interp.run(doc)
    assert output.getvalue() == "hi"


def test_fib_program(interp, output):
    fib_body = {
        "kind": "If",
        "condition": binary("Lt", var("n"), int_(2)),
        "then": var("n"),
        "otherwise": binary(
            "Add",
            {"kind": "Call", "callee": var("fib"), "arguments": [binary("Sub", var("n"), int_(1))]},
            {"kind": "Call", "callee": var("fib"), "arguments": [binary("Sub", var("n"), int_(2))]},
        ),
    }
    doc = program(
        let(
            "fib",
            {"kind": "Function", "parameters": [{"text": "n"}], "value": fib_body},
            {"kind": "Print", "value": binary("Add", {"kind": "Str", "value": "fib: "},
                                              {"kind": "Call", "callee": var("fib"), "arguments": [int_(10)]})},
        ),
        name="fib.rinha",
    )
    interp.run(json.dumps(doc))
    assert output.getvalue() == "fib: 55"


def test_run_accepts_every_program_form(interp):
    doc = program(binary("Sub", int_(10), int_(4)))
    assert interp.run(doc) == Int(6)
    assert interp.run(json.dumps(doc)) == Int(6)
    assert interp.run(load_program(doc)) == Int(6)
    assert interp.run(IntLiteral(6)) == Int(6)


def test_each_run_starts_with_empty_environment(interp):
    interp.run(program(let("x", int_(1), var("x"))))
    with pytest.raises(RinhaUnboundVariable):
        interp.run(program(var("x")))


def test_output_before_error_is_kept(interp, output):
    doc = program(let("_", {"kind": "Print", "value": {"kind": "Str", "value": "partial"}}, var("missing")))
    with pytest.raises(RinhaUnboundVariable):
        interp.run(doc)
    assert output.getvalue() == "partial"


def test_long_let_chain_loads_and_runs(interp):
    # deeper than Python's default recursion limit
    expression = var("x0")
    for i in range(1500):
        expression = let(f"x{i}", int_(i), expression)
    assert interp.run(program(expression)) == Int(0)


def test_load_errors_propagate(interp):
    with pytest.raises(RinhaLoadError):
        interp.run(program({"kind": "Tuple"}))


def test_run_path(tmp_path, interp, output):
    path = tmp_path / "prog.json"
    path.write_text(json.dumps(program({"kind": "Print", "value": {"kind": "Bool", "value": False}})))
    interp.run_path(path)
    assert output.getvalue() == "false"


def test_custom_evaluator_is_used():
    seen = []

    def eval_fn(term, env, output):
        seen.append(term)
        return Int(0)

    Interpreter(eval_fn=eval_fn, output=BufferOutput()).run(IntLiteral(9))
    assert seen == [IntLiteral(9)]
