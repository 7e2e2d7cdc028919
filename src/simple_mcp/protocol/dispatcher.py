"""MCPDispatcher: validates JSON-RPC envelopes and routes MCP methods.

The dispatcher is state-free beyond the tool registry and config it was
built with. It processes one message to completion before the next one
is read, so responses leave in the same order their requests arrived.

Usage::

    dispatcher = MCPDispatcher(build_default_registry())
    dispatcher.serve(StdioTransport())
"""

from __future__ import annotations

import io
import logging
import sys
from typing import TYPE_CHECKING, Any

from simple_mcp.config import ServerConfig
from simple_mcp.protocol.codec import decode_line, strip_line
from simple_mcp.protocol.errors import (
    InternalError,
    InvalidRequestError,
    MCPError,
    MethodNotFoundError,
    ParseError,
)
from simple_mcp.protocol.handlers import ROUTES, SILENT_METHODS, Handler, HandlerContext
from simple_mcp.protocol.models import JSONRPC_VERSION, JsonRpcRequest, JsonRpcResponse, RequestId
from simple_mcp.protocol.transport import StdioTransport
from simple_mcp.tools.registry import ToolRegistry
from simple_mcp.utils.telemetry import ATTR_ERROR_CODE, ATTR_METHOD, ATTR_NOTIFICATION, get_tracer

if TYPE_CHECKING:
    from simple_mcp.protocol.transport import MCPTransport

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


def _is_valid_id(value: Any) -> bool:
    # bool is an int subclass but not a legal JSON-RPC id.
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (int, float, str))


def _salvage_id(message: Any) -> RequestId:
    """Best-effort id for an Invalid Request response; ``None`` if unusable."""
    if isinstance(message, dict):
        value = message.get("id")
        if _is_valid_id(value):
            return value  # type: ignore[no-any-return]
    return None


class MCPDispatcher:
    """Turns decoded JSON-RPC messages into MCP handler calls.

    1. **Envelope validation**: the message must be an object with
       ``jsonrpc == "2.0"`` and a non-empty string ``method``.
    2. **Classification**: an absent or null ``id`` makes it a notification,
       which never gets a response.
    3. **Routing**: the method is looked up in the handler table; unknown
       methods yield ``-32601`` for requests and are dropped for
       notifications.
    """

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        *,
        config: ServerConfig | None = None,
        routes: dict[str, Handler] | None = None,
    ) -> None:
        self._ctx = HandlerContext(
            registry=registry if registry is not None else ToolRegistry(),
            config=config or ServerConfig(),
        )
        self._routes = dict(routes if routes is not None else ROUTES)

    @property
    def registry(self) -> ToolRegistry:
        return self._ctx.registry

    @property
    def config(self) -> ServerConfig:
        return self._ctx.config

    def serve(self, transport: MCPTransport) -> None:
        """Read lines until end of input, answering each request in turn."""
        logger.info("Serving %d tool(s)", len(self.registry))
        try:
            while True:
                raw = transport.receive()
                if raw is None:
                    break
                response = self.handle_line(raw)
                if response is not None:
                    transport.send(response)
        finally:
            transport.close()
        logger.info("End of input, shutting down")

    def handle_line(self, raw: str) -> dict[str, Any] | None:
        """Process one raw input line; return the response dict, if any."""
        line = strip_line(raw)
        if line is None:
            return None
        try:
            message = decode_line(line)
        except ParseError as exc:
            # The id is unknown before parsing, so even a would-be
            # notification gets an answer.
            logger.warning("Parse error on input line: %.200s", line)
            return JsonRpcResponse.failure(None, exc.to_error()).to_wire()
        return self.handle_message(message)

    def handle_message(self, message: Any) -> dict[str, Any] | None:
        """Process one decoded JSON value."""
        try:
            request = self._validate_envelope(message)
        except InvalidRequestError as exc:
            logger.warning("Invalid request: %s", exc.message)
            return JsonRpcResponse.failure(_salvage_id(message), exc.to_error()).to_wire()

        with _tracer.start_as_current_span("mcp.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            span.set_attribute(ATTR_NOTIFICATION, request.is_notification)
            response = self._route(request)
            if response is not None and response.error is not None:
                span.set_attribute(ATTR_ERROR_CODE, response.error.code)
        return response.to_wire() if response is not None else None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate_envelope(self, message: Any) -> JsonRpcRequest:
        if not isinstance(message, dict):
            raise InvalidRequestError()
        method = message.get("method")
        if message.get("jsonrpc") != JSONRPC_VERSION or not isinstance(method, str) or not method:
            raise InvalidRequestError()
        if not _is_valid_id(message.get("id")):
            raise InvalidRequestError()
        if not isinstance(message.get("params"), (dict, list, type(None))):
            raise InvalidRequestError()
        return JsonRpcRequest(
            jsonrpc=JSONRPC_VERSION,
            method=method,
            id=message.get("id"),
            params=message.get("params"),
        )

    def _route(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        method = request.method
        if method in SILENT_METHODS:
            logger.debug("Acknowledged %s", method)
            return None

        handler = self._routes.get(method)
        if handler is None:
            if request.is_notification:
                logger.debug("Dropping notification for unknown method %s", method)
                return None
            return JsonRpcResponse.failure(
                request.id, MethodNotFoundError(f"Method not found: {method}").to_error()
            )

        try:
            result = handler(request.params, self._ctx)
        except MCPError as exc:
            if request.is_notification:
                logger.debug("Dropping error %d for notification %s", exc.code, method)
                return None
            return JsonRpcResponse.failure(request.id, exc.to_error())
        except Exception:
            logger.exception("Handler for %s failed", method)
            if request.is_notification:
                return None
            return JsonRpcResponse.failure(request.id, InternalError().to_error())

        if request.is_notification:
            return None
        return JsonRpcResponse.success(request.id, result)


def run_stdio(registry: ToolRegistry, config: ServerConfig | None = None) -> None:
    """Serve on the process's stdin/stdout as UTF-8 with ``\\n`` line endings."""
    # Only "\n" terminates a line; a trailing "\r" is stripped by the codec.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace", newline="\n")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", newline="\n")
    dispatcher = MCPDispatcher(registry, config=config)
    dispatcher.serve(StdioTransport(sys.stdin, sys.stdout))
