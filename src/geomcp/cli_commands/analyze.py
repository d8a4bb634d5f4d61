"""``geo analyze`` — audit a keyword and inspect a page in one pass."""

from __future__ import annotations

import asyncio

import click

from geomcp.cli_commands._output import console, print_analysis


@click.command()
@click.option("--keyword", "-k", default=None, help="Keyword to audit in AI search.")
@click.option("--url", "-u", default=None, help="Page to read and inspect.")
@click.option("--max-results", default=5, show_default=True, type=int, help="Sources to fetch for the audit.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def analyze(keyword: str | None, url: str | None, max_results: int, as_json: bool) -> None:
    """Audit KEYWORD and read URL; a failing step is reported, not fatal."""
    from geomcp.analysis import analyze as run_analysis
    from geomcp.config import Settings

    if not keyword and not url:
        console.print("[yellow]Nothing to do: pass --keyword and/or --url.[/yellow]")
        return

    report = asyncio.run(
        run_analysis(Settings.from_env(), keyword=keyword, url=url, max_results=max_results)
    )

    if as_json:
        console.print_json(report.model_dump_json(by_alias=True))
        return

    print_analysis(report)
