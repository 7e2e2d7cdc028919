"""MCP transports: the server side of the stdio communication layer.

Each transport satisfies the :class:`MCPTransport` protocol, providing
``receive``, ``send``, and ``close`` methods. Reads and writes are
blocking; the dispatcher handles one line at a time.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Protocol, runtime_checkable

from simple_mcp.protocol.codec import encode_message


@runtime_checkable
class MCPTransport(Protocol):
    """Abstract transport for line-delimited MCP JSON-RPC communication."""

    def receive(self) -> str | None: ...
    def send(self, data: dict[str, Any]) -> None: ...
    def close(self) -> None: ...


class StdioTransport:
    """Reads requests from a text stream and writes responses to another.

    Defaults to the process's stdin/stdout. Every response is flushed as
    soon as it is written so a client on the other end of a pipe sees it
    immediately.
    """

    def __init__(self, reader: IO[str] | None = None, writer: IO[str] | None = None) -> None:
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout
        self._closed = False

    def receive(self) -> str | None:
        """Return the next raw line, or ``None`` at end of input."""
        if self._closed:
            msg = "Transport closed"
            raise RuntimeError(msg)
        line = self._reader.readline()
        if not line:
            return None
        return line

    def send(self, data: dict[str, Any]) -> None:
        """Write one JSON line and flush."""
        if self._closed:
            msg = "Transport closed"
            raise RuntimeError(msg)
        self._writer.write(encode_message(data))
        self._writer.flush()

    def close(self) -> None:
        """Flush pending output; the underlying streams are left open."""
        if not self._closed:
            self._writer.flush()
            self._closed = True
