"""ToolRegistry: ordered, name-unique collection of tools."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from simple_mcp.protocol.errors import DuplicateToolError
from simple_mcp.tools.base import to_definition

if TYPE_CHECKING:
    from simple_mcp.protocol.models import MCPToolDef
    from simple_mcp.tools.base import Tool


class ToolRegistry:
    """Maintains a name-to-tool map that remembers registration order.

    Usage::

        registry = ToolRegistry([EchoTool()])
        registry.get("echo")            # -> EchoTool
        registry.definitions()          # -> [MCPToolDef(name="echo", ...)]

    The registry is filled at startup and not mutated while serving.
    """

    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools: dict[str, Tool] = {}
        for t in tools:
            self.register(t)

    def register(self, tool: Tool) -> None:
        """Add *tool*; raise :class:`DuplicateToolError` if the name is taken."""
        if not tool.name:
            msg = "tool name must be a non-empty string"
            raise ValueError(msg)
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def definitions(self) -> list[MCPToolDef]:
        """Return the ``tools/list`` catalog in registration order."""
        return [to_definition(t) for t in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
