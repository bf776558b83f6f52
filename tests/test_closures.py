import pytest
from hypothesis import given, assume, strategies as st

from rinha.errors import RinhaArityMismatch, RinhaNotCallable, RinhaUnboundVariable, RinhaStackExhausted
from rinha.evaluation.apply import apply_closure
from rinha.evaluation.evaluator import evaluate, evaluate0
from rinha.interpreter import Interpreter
from rinha.output import BufferOutput
from rinha.syntax.terms import (
    BinaryOp, IntLiteral, StrLiteral, BoolLiteral, Print, Binary, If, Let, Var, Function, Call,
)
from rinha.types import Int, Str, Closure, Environment


def add(lhs, rhs):
    return Binary(BinaryOp.ADD, lhs, rhs)


def sub(lhs, rhs):
    return Binary(BinaryOp.SUB, lhs, rhs)


def test_identity_function_end_to_end(env, output):
    term = Let(
        "id",
        Function(["x"], Var("x")),
        Print(Call(Var("id"), [StrLiteral("hi")])),
    )
    evaluate(term, env, output)
    assert output.getvalue() == "hi"


def test_call_binds_parameters_in_order(env, output):
    term = Call(Function(["a", "b"], sub(Var("a"), Var("b"))), [IntLiteral(10), IntLiteral(3)])
    assert evaluate(term, env, output) == Int(7)


def test_arguments_evaluated_left_to_right(env, output):
    arg = lambda text, n: Let("_", Print(StrLiteral(text)), IntLiteral(n))
    term = Call(Function(["a", "b", "c"], Var("c")), [arg("1", 1), arg("2", 2), arg("3", 3)])
    assert evaluate(term, env, output) == Int(3)
    assert output.getvalue() == "123"


def test_captured_environment_is_frozen(env, output):
    # let x = 1; let f = fn () => x; let x = 2; f()
    term = Let(
        "x",
        IntLiteral(1),
        Let("f", Function([], Var("x")), Let("x", IntLiteral(2), Call(Var("f"), []))),
    )
    assert evaluate(term, env, output) == Int(1)


def test_names_bound_after_capture_are_invisible(env, output):
    # let f = fn () => y; let y = 5; f()
    term = Let("f", Function([], Var("y")), Let("y", IntLiteral(5), Call(Var("f"), [])))
    with pytest.raises(RinhaUnboundVariable):
        evaluate(term, env, output)


def test_caller_environment_is_not_used(env, output):
    # let f = fn (a) => b; let g = fn (b) => f(1); g(7)
    term = Let(
        "f",
        Function(["a"], Var("b")),
        Let("g", Function(["b"], Call(Var("f"), [IntLiteral(1)])), Call(Var("g"), [IntLiteral(7)])),
    )
    with pytest.raises(RinhaUnboundVariable):
        evaluate(term, env, output)


def test_bindings_before_the_literal_reach_nested_calls(env, output):
    term = Let("x", IntLiteral(1), Let("f", Function([], Var("x")), Call(Var("f"), [])))
    assert evaluate(term, env, output) == Int(1)


def test_let_inside_body_does_not_leak(env, output):
    # let f = fn () => { let x = 2; x }; let x = 1; let _ = f(); x
    term = Let(
        "f",
        Function([], Let("x", IntLiteral(2), Var("x"))),
        Let("x", IntLiteral(1), Let("_", Call(Var("f"), []), Var("x"))),
    )
    assert evaluate(term, env, output) == Int(1)


def test_parameters_shadow_captured_names(env, output):
    term = Let("x", IntLiteral(1), Call(Function(["x"], Var("x")), [IntLiteral(9)]))
    assert evaluate(term, env, output) == Int(9)


def test_closures_are_first_class(env, output):
    # let add = fn (a) => fn (b) => a + b; let add1 = add(1); add1(41)
    term = Let(
        "add",
        Function(["a"], Function(["b"], add(Var("a"), Var("b")))),
        Let("add1", Call(Var("add"), [IntLiteral(1)]), Call(Var("add1"), [IntLiteral(41)])),
    )
    assert evaluate(term, env, output) == Int(42)


def test_closure_passed_as_argument(env, output):
    # let twice = fn (f, x) => f(f(x)); twice(fn (s) => s + "!", "hey")
    term = Let(
        "twice",
        Function(["f", "x"], Call(Var("f"), [Call(Var("f"), [Var("x")])])),
        Call(Var("twice"), [Function(["s"], add(Var("s"), StrLiteral("!"))), StrLiteral("hey")]),
    )
    assert evaluate(term, env, output) == Str("hey!!")


def fib_program(n):
    # let fib = fn (n) => if (n < 2) n else fib(n - 1) + fib(n - 2); fib(n)
    body = If(
        Binary(BinaryOp.LT, Var("n"), IntLiteral(2)),
        Var("n"),
        add(
            Call(Var("fib"), [sub(Var("n"), IntLiteral(1))]),
            Call(Var("fib"), [sub(Var("n"), IntLiteral(2))]),
        ),
    )
    return Let("fib", Function(["n"], body), Call(Var("fib"), [IntLiteral(n)]))


def test_let_bound_function_can_recurse(env, output):
    assert evaluate(fib_program(15), env, output) == Int(610)


def test_rebound_name_keeps_its_captured_meaning(env, output):
    # let g = fn () => 1; let g = fn () => g(); g()
    term = Let(
        "g",
        Function([], IntLiteral(1)),
        Let("g", Function([], Call(Var("g"), [])), Call(Var("g"), [])),
    )
    assert evaluate(term, env, output) == Int(1)


def test_self_name_is_only_given_to_function_literals(env, output):
    # let g = (fn () => g)(); is not a recursive binding
    term = Let("g", Call(Function([], Var("g")), []), IntLiteral(0))
    with pytest.raises(RinhaUnboundVariable):
        evaluate(term, env, output)


@given(st.integers(min_value=0, max_value=6), st.integers(min_value=0, max_value=6))
def test_arity_mismatch(n_params, n_args):
    assume(n_params != n_args)
    fn = Function([f"p{i}" for i in range(n_params)], IntLiteral(0))
    term = Call(fn, [IntLiteral(i) for i in range(n_args)])
    with pytest.raises(RinhaArityMismatch):
        evaluate(term, Environment(), BufferOutput())


@given(st.integers(min_value=0, max_value=6))
def test_matching_arity_calls_body(n):
    fn = Function([f"p{i}" for i in range(n)], StrLiteral("ok"))
    term = Call(fn, [IntLiteral(i) for i in range(n)])
    assert evaluate(term, Environment(), BufferOutput()) == Str("ok")


@pytest.mark.parametrize("callee", [IntLiteral(1), StrLiteral("f"), BoolLiteral(True), Print(IntLiteral(0))])
def test_not_callable(callee, env, output):
    with pytest.raises(RinhaNotCallable):
        evaluate(Call(callee, []), env, output)


def test_callee_checked_before_arguments(env, output):
    with pytest.raises(RinhaNotCallable):
        evaluate(Call(IntLiteral(1), [Print(StrLiteral("arg"))]), env, output)
    assert output.getvalue() == ""


def test_apply_closure_directly(output):
    closure = Closure(["a"], add(Var("a"), Var("k")), Environment({"k": Int(1)}))
    assert apply_closure(closure, [Int(2)], output, evaluate0) == Int(3)
    with pytest.raises(RinhaNotCallable):
        apply_closure(Int(2), [], output, evaluate0)
    with pytest.raises(RinhaArityMismatch):
        apply_closure(closure, [], output, evaluate0)


def test_unbounded_recursion_exhausts_stack():
    # let loop = fn (n) => loop(n + 1); loop(0)
    term = Let(
        "loop",
        Function(["n"], Call(Var("loop"), [add(Var("n"), IntLiteral(1))])),
        Call(Var("loop"), [IntLiteral(0)]),
    )
    with pytest.raises(RinhaStackExhausted):
        Interpreter(output=BufferOutput(), recursion_limit=2000).run(term)
