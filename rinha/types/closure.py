"""Closure representation and argument binding for Rinha."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Sequence

from rinha import RinhaValue, TermNode
from rinha.errors import RinhaArityMismatch
from rinha.types.environment import Environment

logger = logging.getLogger(__name__)


class Closure:
    """A first-class function value: parameters, body and a captured environment.

    `env` is a snapshot taken when the function literal was evaluated. `name`
    is set when the closure was bound by a let, so that its body can call
    itself. It is only bound when the captured `env` has no binding for it,
    and then afresh in every call environment rather than stored
    inside `env`, which keeps closures acyclic.
    """

    __slots__ = ("parameters", "body", "env", "name")

    def __init__(
        self,
        parameters: Sequence[str],
        body: TermNode,
        env: Environment | None = None,
        name: str | None = None,
    ):
        self.parameters: tuple[str, ...] = tuple(parameters)
        self.body: TermNode = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()
        self.name: str | None = name

    def named(self, name: str) -> Closure:
        """Copy of this closure that binds itself under `name` when called."""
        return Closure(self.parameters, self.body, self.env, name)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Closure)
            and self.parameters == other.parameters
            and self.body == other.body
            and self.name == other.name
            and self.env == other.env
        )

    def __hash__(self) -> int:
        return hash((self.parameters, self.body, self.name))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure")
            if self.name:
                buffer.write(f" {self.name}")
            buffer.write(" fn (")
            buffer.write(", ".join(self.parameters))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    # --- Evaluation helpers ---
    def extend_env(self, args: list[RinhaValue], location=None) -> Environment:
        """
        Bind the given argument values to this closure's parameters and return
        a fresh Environment for evaluating the body.

        The new environment starts as a snapshot of the captured one, never
        the caller's, so free variables resolve lexically.
        """
        if len(args) != len(self.parameters):
            raise RinhaArityMismatch(
                f"{self} expects {len(self.parameters)} argument(s), got {len(args)}",
                location,
            )
        call_env = self.env.snapshot()
        # A name captured from the defining scope keeps its earlier meaning
        if self.name is not None and self.name not in self.env:
            call_env.bind(self.name, self)
        for parameter, arg in zip(self.parameters, args):
            call_env.bind(parameter, arg)
        logger.debug("Binding %s with %d argument(s)", self, len(args))
        return call_env
