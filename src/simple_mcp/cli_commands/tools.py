"""``simple-mcp-server tools``: inspect the bundled tool catalog."""

from __future__ import annotations

import click

from simple_mcp.cli_commands._output import print_tools_json, print_tools_table


@click.command("tools")
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def tools(as_json: bool) -> None:
    """Print the registered tool catalog instead of serving."""
    from simple_mcp.tools import build_default_registry

    definitions = build_default_registry().definitions()
    if as_json:
        print_tools_json(definitions)
    else:
        print_tools_table(definitions)
