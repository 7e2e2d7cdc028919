"""simple-mcp-server CLI entrypoint.

Running the command with no subcommand serves MCP on stdin/stdout until
end of input. Logs go to stderr only.
"""

from __future__ import annotations

import logging
import sys

import click

from simple_mcp import __version__
from simple_mcp.config import ServerConfig

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root = logging.getLogger("simple_mcp")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="simple-mcp-server")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum level for diagnostics written to stderr.",
)
@click.option("--trace", is_flag=True, help="Export OpenTelemetry spans to stderr (needs the otel extra).")
@click.option(
    "--otlp-endpoint",
    default=None,
    metavar="URL",
    help="Export spans via OTLP/gRPC to URL (needs the otel extra).",
)
@click.pass_context
def main(ctx: click.Context, log_level: str, trace: bool, otlp_endpoint: str | None) -> None:
    """Simple MCP server: JSON-RPC over stdin/stdout."""
    config = ServerConfig(log_level=log_level.upper())  # type: ignore[arg-type]
    ctx.obj = config
    if ctx.invoked_subcommand is not None:
        return

    from simple_mcp.protocol.dispatcher import run_stdio
    from simple_mcp.tools import build_default_registry

    _configure_logging(config.log_level)
    if trace or otlp_endpoint:
        from simple_mcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(
                service_name=config.name,
                export_to_console=trace,
                otlp_endpoint=otlp_endpoint,
            )
        except ImportError as exc:
            raise click.ClickException(str(exc)) from exc

    run_stdio(build_default_registry(), config)


# Register subcommands
from simple_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
