"""Runtime environment for Rinha.

The Environment is a single flat mapping of names to evaluated values. There
are no nested scope frames: binding a name that already exists overwrites it
for every later lookup through the same Environment. Closures and calls take
snapshots, which are independent copies, so a later bind on the original can
never leak into an environment captured earlier.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from rinha import RinhaValue


class Environment:
    """Flat, mutable mapping from names to Rinha values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[str, RinhaValue]] = None):
        self.vars: dict[str, RinhaValue] = dict(bindings) if bindings else {}

    def bind(self, name: str, value: RinhaValue) -> None:
        """Bind `name` to `value`, overwriting any existing binding."""
        self.vars[name] = value

    def lookup(self, name: str) -> Optional[RinhaValue]:
        """Return the value bound to `name`, or None when it is unbound."""
        return self.vars.get(name)

    def snapshot(self) -> Environment:
        """Independent copy: later binds on either side do not affect the other.

        Values are immutable, so copying the mapping is enough.
        """
        return Environment(self.vars)

    def names(self) -> Iterator[str]:
        return iter(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __eq__(self, other) -> bool:
        return isinstance(other, Environment) and self.vars == other.vars

    # Mutable, so unhashable
    __hash__ = None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
