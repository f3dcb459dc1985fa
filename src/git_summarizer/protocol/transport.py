"""Line transports: newline-delimited text in, newline-delimited text out.

Each transport satisfies the :class:`LineTransport` protocol, providing
``receive``, ``send`` and ``close``.  Reads block; the server handles one
line completely before asking for the next.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import TextIO


@runtime_checkable
class LineTransport(Protocol):
    """Abstract transport for line-delimited JSON-RPC traffic."""

    def receive(self) -> str | None: ...
    def send(self, line: str) -> None: ...
    def close(self) -> None: ...


class StdioTransport:
    """Reads requests from a text stream and writes responses to another.

    Defaults to the process's stdin/stdout.  Every written line is flushed
    immediately so the peer never waits on a buffered response.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout
        self._closed = False

    def receive(self) -> str | None:
        """Return the next line without its terminator, or ``None`` at end of input."""
        if self._closed:
            msg = "Transport closed"
            raise RuntimeError(msg)
        line = self._reader.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def send(self, line: str) -> None:
        """Write one line and flush."""
        if self._closed:
            msg = "Transport closed"
            raise RuntimeError(msg)
        self._writer.write(line + "\n")
        self._writer.flush()

    def close(self) -> None:
        """Flush the writer; the underlying streams belong to the caller."""
        if not self._closed:
            self._writer.flush()
            self._closed = True
