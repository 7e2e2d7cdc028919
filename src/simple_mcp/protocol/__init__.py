"""Protocol layer: MCP models and error types."""

from simple_mcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MCPError,
    MethodNotFoundError,
    ParseError,
    ToolExecutionError,
)
from simple_mcp.protocol.models import (
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ServerInfo,
    ToolContent,
)

__all__ = [
    "InitializeResult",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPError",
    "MCPToolDef",
    "MethodNotFoundError",
    "ParseError",
    "ServerInfo",
    "ToolContent",
    "ToolExecutionError",
]
