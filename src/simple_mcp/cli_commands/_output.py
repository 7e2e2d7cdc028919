"""Shared CLI output formatters."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from simple_mcp.protocol.models import MCPToolDef  # noqa: TC001

console = Console()


def print_tools_table(tools: list[MCPToolDef]) -> None:
    """Pretty-print tool definitions as a table."""
    if not tools:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(str(r) for r in required) if isinstance(required, list) else "-",
        )

    console.print(table)


def print_tools_json(tools: list[MCPToolDef]) -> None:
    """Print the ``tools/list`` payload as JSON."""
    console.print_json(json.dumps({"tools": [t.model_dump(by_alias=True) for t in tools]}))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
