"""JSON-RPC / MCP error types.

Every error raised while handling a message carries the JSON-RPC code it
maps to, so the dispatcher can turn it into an error response without a
lookup table.
"""

from __future__ import annotations

from simple_mcp.protocol.models import JsonRpcError

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MCPError(Exception):
    """Base error for all protocol-layer failures."""

    code: int = INTERNAL_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_error(self) -> JsonRpcError:
        return JsonRpcError(code=self.code, message=self.message)


class ParseError(MCPError):
    """The input line is not valid JSON."""

    code = PARSE_ERROR
    default_message = "Parse error"


class InvalidRequestError(MCPError):
    """The decoded value is not a valid JSON-RPC 2.0 request object."""

    code = INVALID_REQUEST
    default_message = "Invalid Request"


class MethodNotFoundError(MCPError):
    """Unknown method, or a ``tools/call`` naming an unregistered tool."""

    code = METHOD_NOT_FOUND
    default_message = "Method not found"


class InvalidParamsError(MCPError):
    """Missing or ill-typed parameters."""

    code = INVALID_PARAMS
    default_message = "Invalid parameters"


class InternalError(MCPError):
    """A failure inside the server, typically a tool raising."""

    code = INTERNAL_ERROR


class ToolExecutionError(Exception):
    """Convenience error for tools that want to fail with a named type.

    Tools may raise anything; the dispatcher maps every failure to
    :class:`InternalError` without exposing the detail.
    """

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))


class DuplicateToolError(ValueError):
    """A tool with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool already registered: {name}")
