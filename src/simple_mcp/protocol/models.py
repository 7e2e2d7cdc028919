"""MCP models: JSON-RPC 2.0 messages and MCP payloads.

Implements the message format used by the Model Context Protocol for
the handshake (``initialize``), tool discovery (``tools/list``) and
execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

JSONRPC_VERSION = "2.0"

RequestId = int | float | str | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    Only built after the raw envelope passed validation, so ``method`` is
    always a non-empty string here.
    """

    jsonrpc: str = JSONRPC_VERSION
    method: str
    id: RequestId = None
    params: dict[str, Any] | list[Any] | None = None

    @property
    def is_notification(self) -> bool:
        # A null id is treated the same as an absent one.
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` or ``error`` is set.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _one_of_result_or_error(self) -> JsonRpcResponse:
        if self.result is not None and self.error is not None:
            msg = "response cannot carry both 'result' and 'error'"
            raise ValueError(msg)
        if self.result is None and self.error is None:
            msg = "response must carry 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, id: RequestId, result: dict[str, Any]) -> JsonRpcResponse:  # noqa: A002
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: RequestId, error: JsonRpcError) -> JsonRpcResponse:  # noqa: A002
        return cls(id=id, error=error)

    def to_wire(self) -> dict[str, Any]:
        """Return the on-the-wire dict: ``id`` is always present, even when null."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolContent(BaseModel):
    """One item of a tool's output, e.g. ``{"type": "text", "text": "..."}``.

    Unknown fields are kept so future content kinds pass through untouched.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    text: str | None = None

    @classmethod
    def from_text(cls, text: str) -> ToolContent:
        return cls(type="text", text=text)


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ServerInfo(BaseModel):
    """The ``serverInfo`` block of the ``initialize`` result."""

    name: str
    version: str


class InitializeResult(BaseModel):
    """Result payload of ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    server_info: ServerInfo = Field(alias="serverInfo")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
