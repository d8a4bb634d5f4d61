"""content-reader — render a page and extract its text, headings and JSON-LD."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import trafilatura
from pydantic import BaseModel

from geomcp.clients.browser import BrowserPageReader, PageSnapshot
from geomcp.tools.base import Tool
from geomcp.tools.inputs import ContentReaderInput

logger = logging.getLogger(__name__)


class PageReport(BaseModel):
    """A page snapshot with its body converted to Markdown."""

    snapshot: PageSnapshot
    markdown: str

    def summary(self, preview_chars: int | None = None) -> dict[str, Any]:
        """The page fields the optimizer and front-ends consume."""
        preview = self.markdown
        if preview_chars is not None and len(preview) > preview_chars:
            preview = preview[:preview_chars] + "\n...\n(truncated)"
        return {
            "title": self.snapshot.title,
            "metaDescription": self.snapshot.meta_description,
            "headings": [h.model_dump() for h in self.snapshot.headings],
            "markdownPreview": preview,
        }


def html_to_markdown(html: str) -> str | None:
    """Extract the main body of *html* as Markdown, or ``None`` if nothing is found."""
    if not html.strip():
        return None
    return trafilatura.extract(
        html,
        output_format="markdown",
        include_links=True,
        include_tables=True,
        include_comments=False,
    )


def format_page_report(report: PageReport) -> str:
    snapshot = report.snapshot
    parts: list[str] = [f"# {snapshot.title}\n"]
    if snapshot.meta_description:
        parts.append(f"Meta Description: {snapshot.meta_description}\n")
    parts.append("## Heading Structure\n")
    parts.extend(f"{'#' * h.level} {h.text}" for h in snapshot.headings)
    parts.append("\n## Body (Markdown)\n")
    parts.append(report.markdown)
    if snapshot.schemas:
        parts.append("\n## Existing JSON-LD\n")
        for index, schema in enumerate(snapshot.schemas, start=1):
            parts.append(f"\n### Schema {index}\n```json\n{schema}\n```")
    return "\n".join(parts)


class ContentReaderTool(Tool):
    name = "content-reader"
    description = (
        "Renders the target page in a headless browser and extracts its body as Markdown, "
        "its heading hierarchy (H1-H6) and any JSON-LD Schema markup, for GEO diagnosis and comparison."
    )
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "Target page URL"},
            "waitForSelector": {
                "type": "string",
                "description": "Wait for this CSS selector before extracting (SPA pages)",
            },
            "waitForTimeout": {"type": "number", "description": "Milliseconds to wait"},
        },
        "required": ["url"],
    }

    def __init__(self, reader: BrowserPageReader | None = None) -> None:
        self._reader = reader or BrowserPageReader()

    async def read(self, payload: ContentReaderInput) -> PageReport:
        """Render the page and convert its body to Markdown."""
        snapshot = await self._reader.read(
            payload.url,
            wait_for_selector=payload.wait_for_selector,
            wait_for_timeout=payload.wait_for_timeout,
        )
        markdown = await asyncio.to_thread(html_to_markdown, snapshot.html)
        if not markdown:
            logger.debug("No extractable article body at %s; using main element text", payload.url)
            markdown = snapshot.main_text
        return PageReport(snapshot=snapshot, markdown=markdown.strip())

    async def run(self, payload: ContentReaderInput) -> str:
        return format_page_report(await self.read(payload))
