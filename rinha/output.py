"""Output sinks receiving the text emitted by print expressions.

The evaluator only ever asks a sink to `write` a rendered value. Sinks add no
separators or trailing newline of their own.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Protocol, TextIO


class Output(Protocol):
    def write(self, text: str) -> None: ...


class StreamOutput:
    """Writes straight through to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class BufferOutput:
    """Collects everything written in memory."""

    def __init__(self):
        self._buffer = StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()
