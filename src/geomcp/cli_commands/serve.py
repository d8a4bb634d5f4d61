"""``geo serve`` — run the MCP server over stdio."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from geomcp.cli_commands._output import err_console

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (defaults to GEO_LOG_LEVEL, then INFO).",
)
@click.option("--otlp-endpoint", default=None, help="Export spans via OTLP/gRPC to this endpoint.")
@click.option("--trace-console", is_flag=True, help="Print spans as JSON to stderr.")
def serve(log_level: str | None, otlp_endpoint: str | None, trace_console: bool) -> None:
    """Serve the GEO tools to an MCP client on stdin/stdout.

    Stdout carries only protocol messages; logs and traces go to stderr.
    """
    from geomcp.config import Settings
    from geomcp.protocol.server import MCPServer
    from geomcp.protocol.transport import StdioTransport
    from geomcp.tools.catalog import build_registry

    try:
        settings = Settings.from_env()
    except Exception as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if otlp_endpoint or trace_console:
        from geomcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=trace_console, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    server = MCPServer(build_registry(settings))
    try:
        asyncio.run(server.serve(StdioTransport()))
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted.[/yellow]")
