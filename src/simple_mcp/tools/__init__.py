"""Tools: the tool abstraction plus the bundled tools."""

from simple_mcp.tools.base import FunctionTool, Tool, normalize_content, tool
from simple_mcp.tools.echo import EchoTool
from simple_mcp.tools.registry import ToolRegistry

__all__ = [
    "EchoTool",
    "FunctionTool",
    "Tool",
    "ToolRegistry",
    "build_default_registry",
    "normalize_content",
    "tool",
]


def build_default_registry() -> ToolRegistry:
    """Return a registry holding the bundled tools."""
    return ToolRegistry([EchoTool()])
