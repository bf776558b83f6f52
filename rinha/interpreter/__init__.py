from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from os import PathLike
from typing import Any, Callable

from rinha import TermNode, RinhaValue
from rinha.config import get_recursion_limit
from rinha.output import Output, StreamOutput
from rinha.reader.loader import load_program, loads, load_path
from rinha.syntax.terms import Program, Term
from rinha.types.environment import Environment

logger = logging.getLogger(__name__)


@contextmanager
def raised_recursion_limit(limit: int):
    """Raise the host recursion limit to at least `limit` for the duration."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Orchestrates loading and evaluating Rinha programs via a pluggable evaluator.
    Every run starts from a fresh, empty top-level Environment.
    """

    def __init__(
        self,
        eval_fn: Callable[[TermNode, Environment, Output], RinhaValue] | None = None,
        output: Output | None = None,
        recursion_limit: int | None = None,
    ):
        if eval_fn is None:
            from rinha.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.output: Output = output if output is not None else StreamOutput()
        self.recursion_limit: int = recursion_limit or get_recursion_limit()

    @staticmethod
    def to_term(program: Program | Term | dict | str | bytes) -> Term:
        """Accept a Program, a bare Term, a decoded document or JSON text."""
        if isinstance(program, Program):
            return program.expression
        if isinstance(program, Term):
            return program
        if isinstance(program, (str, bytes)):
            return loads(program).expression
        return load_program(program).expression

    def run(self, program: Program | Term | dict[str, Any] | str | bytes) -> RinhaValue:
        # Loading recurses as deeply as evaluating does
        with raised_recursion_limit(self.recursion_limit):
            term = self.to_term(program)
            if isinstance(program, Program):
                logger.debug("Running program %r", program.name)
            return self.eval_fn(term, Environment(), self.output)

    def run_path(self, path: str | PathLike) -> RinhaValue:
        with raised_recursion_limit(self.recursion_limit):
            program = load_path(path)
        return self.run(program)
