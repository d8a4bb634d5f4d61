"""geo CLI entrypoint."""

from __future__ import annotations

import click

from geomcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="geo")
def main() -> None:
    """geo — GEO toolbox: MCP server, audits and page rewrites."""


# Register subcommands
from geomcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
