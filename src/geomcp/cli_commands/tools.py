"""``geo tools`` — list the registered tools and run one directly."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from geomcp.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """List and call the GEO tools."""


@tools.command("list")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
def list_tools(fmt: str) -> None:
    """Show the tools the MCP server advertises."""
    from geomcp.config import Settings
    from geomcp.tools.catalog import build_registry

    descriptors = build_registry(Settings.from_env()).list()

    if fmt == "json":
        data = [d.model_dump(by_alias=True) for d in descriptors]
        console.print_json(json.dumps(data))
        return

    print_tools_table(descriptors)


@tools.command("call")
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
def call_tool(name: str, raw_args: str) -> None:
    """Run tool NAME once through the dispatcher and print its text."""
    from geomcp.config import Settings
    from geomcp.protocol.dispatcher import ToolDispatcher
    from geomcp.tools.catalog import build_registry

    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid --args JSON:[/red] {exc}")
        sys.exit(1)
    if not isinstance(arguments, dict):
        console.print("[red]Invalid --args JSON:[/red] expected an object")
        sys.exit(1)

    dispatcher = ToolDispatcher(build_registry(Settings.from_env()))
    result = asyncio.run(dispatcher.dispatch(name, arguments))
    text = result.text

    # Write raw so Markdown and JSON reach the terminal unchanged
    click.echo(text)
    if text.startswith(("Error:", "Unknown tool:")):
        sys.exit(1)
