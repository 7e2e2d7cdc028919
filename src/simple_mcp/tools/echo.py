"""The sample ``echo`` tool."""

from __future__ import annotations

from typing import Any

from simple_mcp.protocol.errors import ToolExecutionError
from simple_mcp.protocol.models import ToolContent


class EchoTool:
    """Returns the given message prefixed with ``Echo: ``."""

    name = "echo"
    description = "Returns the specified message as is"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "message": {"type": "string", "description": "The string to echo"},
            },
            "required": ["message"],
        }

    def execute(self, arguments: dict[str, Any]) -> ToolContent:
        message = arguments.get("message")
        if not isinstance(message, str):
            raise ToolExecutionError(self.name, "invalid type for 'message'")
        return ToolContent.from_text(f"Echo: {message}")
