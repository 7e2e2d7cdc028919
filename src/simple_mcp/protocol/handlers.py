"""MCP method handlers.

Each handler takes the request's ``params`` (whatever the client sent, or
``None``) plus the :class:`HandlerContext`, and returns the ``result``
dict. Failures are raised as :class:`~simple_mcp.protocol.errors.MCPError`
subclasses; the dispatcher turns them into error responses.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from simple_mcp.config import ServerConfig
from simple_mcp.protocol.errors import InternalError, InvalidParamsError, MethodNotFoundError
from simple_mcp.protocol.models import InitializeResult, ServerInfo
from simple_mcp.tools.base import normalize_content, required_fields
from simple_mcp.tools.registry import ToolRegistry
from simple_mcp.utils.telemetry import ATTR_TOOL_NAME, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


@dataclass(frozen=True)
class HandlerContext:
    """Process-scoped state shared by all handlers."""

    registry: ToolRegistry
    config: ServerConfig


Handler = Callable[[Any, HandlerContext], dict[str, Any]]


def handle_initialize(params: Any, ctx: HandlerContext) -> dict[str, Any]:
    """Answer the handshake.

    The client's ``protocolVersion`` is echoed back verbatim when it is a
    string, so older and newer clients can both proceed.
    """
    requested = params.get("protocolVersion") if isinstance(params, dict) else None
    version = requested if isinstance(requested, str) else ctx.config.default_protocol_version
    result = InitializeResult(
        protocol_version=version,
        server_info=ServerInfo(name=ctx.config.name, version=ctx.config.version),
        capabilities={"tools": {}},
    )
    return result.model_dump(by_alias=True)


def handle_tools_list(params: Any, ctx: HandlerContext) -> dict[str, Any]:
    return {"tools": [d.model_dump(by_alias=True) for d in ctx.registry.definitions()]}


def handle_resources_list(params: Any, ctx: HandlerContext) -> dict[str, Any]:
    return {"resources": []}


def handle_prompts_list(params: Any, ctx: HandlerContext) -> dict[str, Any]:
    return {"prompts": []}


def handle_tools_call(params: Any, ctx: HandlerContext) -> dict[str, Any]:
    """Validate the call, run the tool, and wrap its output as ``content``.

    Checks run in order and the first failure wins:

    1. ``params`` must be an object.
    2. ``name`` must be a string and ``arguments`` an object.
    3. The tool must be registered.
    4. Every name in the tool's ``inputSchema.required`` must be a key of
       ``arguments`` (presence only, values are the tool's business).
    5. The tool must not raise.
    """
    if not isinstance(params, dict):
        raise InvalidParamsError()

    name = params.get("name")
    arguments = params.get("arguments")
    if not isinstance(name, str) or not isinstance(arguments, dict):
        raise InvalidParamsError("Invalid parameters: missing tool name or arguments")

    tool = ctx.registry.get(name)
    if tool is None:
        raise MethodNotFoundError(f"Method not found: tool '{name}' is not available")

    for field in required_fields(tool.input_schema):
        if field not in arguments:
            raise InvalidParamsError(f"Missing required parameter: '{field}'")

    with _tracer.start_as_current_span("mcp.tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, name)
        try:
            content = normalize_content(tool.execute(arguments))
        except Exception as exc:
            logger.exception("Tool %s failed", name)
            span.record_exception(exc)
            raise InternalError("Internal error during tool execution") from exc

    logger.debug("Tool %s returned %d content item(s)", name, len(content))
    return {"content": content}


ROUTES: dict[str, Handler] = {
    "initialize": handle_initialize,
    "tools/list": handle_tools_list,
    "resources/list": handle_resources_list,
    "prompts/list": handle_prompts_list,
    "tools/call": handle_tools_call,
}

# Acknowledged without a response, even when the message carries an id.
SILENT_METHODS = frozenset({"initialized", "notifications/initialized", "cancelled"})
