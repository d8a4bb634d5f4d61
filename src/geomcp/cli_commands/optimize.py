"""``geo optimize`` — rewrite a page into GEO-friendly HTML with the chat model."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from geomcp.cli_commands._output import console


@click.command()
@click.argument("url")
@click.option("--keyword", "-k", default=None, help="Target keyword; also runs an AI search audit.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the optimized HTML to this file instead of stdout.",
)
def optimize(url: str, keyword: str | None, output: str | None) -> None:
    """Read URL, optionally audit KEYWORD, and rewrite the page."""
    from geomcp.analysis import optimize_page
    from geomcp.config import Settings
    from geomcp.errors import GeoError

    try:
        result = asyncio.run(optimize_page(Settings.from_env(), url, keyword=keyword))
    except GeoError as exc:
        console.print(f"[red]Optimization error:[/red] {exc}")
        sys.exit(1)

    if result.audit_insights:
        console.print("[bold]Audit insights:[/bold]")
        console.print(result.audit_insights, markup=False)

    if output:
        Path(output).write_text(result.optimized_html, encoding="utf-8")
        console.print(f"[green]Optimized HTML written to {output}[/green]")
        return

    console.print("\n[bold]Optimized HTML:[/bold]")
    click.echo(result.optimized_html)
