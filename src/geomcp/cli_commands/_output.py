"""Shared CLI output formatters."""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from geomcp.analysis import AnalysisReport  # noqa: TC001
from geomcp.protocol.models import ToolDescriptor  # noqa: TC001

console = Console()
err_console = Console(stderr=True)


def print_tools_table(descriptors: list[ToolDescriptor]) -> None:
    """Pretty-print the registered tools as a table."""
    table = Table(title="GEO Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for descriptor in descriptors:
        required = descriptor.input_schema.get("required", [])
        table.add_row(
            descriptor.name,
            _truncate(descriptor.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def print_analysis(report: AnalysisReport) -> None:
    """Pretty-print an analysis report section by section."""
    if report.keyword:
        console.print(f"\n[bold]AI search audit:[/bold] {report.keyword}")
        if report.audit is not None:
            console.print(Markdown(report.audit.content))
        else:
            console.print(f"  [red]Audit failed:[/red] {report.audit_error}")

    if report.url:
        console.print(f"\n[bold]Page:[/bold] {report.url}")
        if report.page is not None:
            console.print(f"  Title: {report.page.title or '(none)'}")
            console.print(f"  Meta description: {report.page.meta_description or '(none)'}")
            console.print(f"  Headings: {len(report.page.headings)}")
            for heading in report.page.headings[:20]:
                indent = "  " * int(heading.get("level", 1))
                console.print(f"  {indent}{_truncate(str(heading.get('text', '')))}")
        else:
            console.print(f"  [red]Reading failed:[/red] {report.page_error}")

    if report.schema_json:
        console.print("\n[bold]Suggested Article JSON-LD:[/bold]")
        console.print_json(report.schema_json)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
