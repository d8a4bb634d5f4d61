"""Tests for the content-reader tool."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from geomcp.clients.browser import BrowserPageReader, Heading, PageSnapshot
from geomcp.tools.content_reader import (
    ContentReaderTool,
    PageReport,
    format_page_report,
    html_to_markdown,
)
from geomcp.tools.inputs import ContentReaderInput


def _snapshot(**overrides: object) -> PageSnapshot:
    data: dict[str, object] = {
        "url": "https://shop.example/grinder",
        "title": "Best Grinder",
        "meta_description": "A review of burr grinders.",
        "headings": [Heading(level=1, text="Best Grinder"), Heading(level=2, text="Verdict")],
        "schemas": ['{"@type": "Product"}'],
        "main_text": "Main text body",
        "html": "<html><body><main>Main text body</main></body></html>",
    }
    data.update(overrides)
    return PageSnapshot.model_validate(data)


class TestFormatPageReport:
    def test_sections(self) -> None:
        text = format_page_report(PageReport(snapshot=_snapshot(), markdown="Body **md**"))
        assert text.startswith("# Best Grinder\n")
        assert "Meta Description: A review of burr grinders." in text
        assert "## Heading Structure" in text
        assert "# Best Grinder\n## Verdict" in text
        assert "## Body (Markdown)" in text
        assert "Body **md**" in text
        assert "## Existing JSON-LD" in text
        assert '### Schema 1\n```json\n{"@type": "Product"}\n```' in text

    def test_no_schemas_section_when_none(self) -> None:
        text = format_page_report(PageReport(snapshot=_snapshot(schemas=[]), markdown="x"))
        assert "Existing JSON-LD" not in text

    def test_no_meta_line_when_empty(self) -> None:
        text = format_page_report(PageReport(snapshot=_snapshot(meta_description=""), markdown="x"))
        assert "Meta Description" not in text


class TestPageReportSummary:
    def test_preview_truncated(self) -> None:
        report = PageReport(snapshot=_snapshot(), markdown="a" * 50)
        summary = report.summary(10)
        assert summary["markdownPreview"] == "a" * 10 + "\n...\n(truncated)"
        assert summary["metaDescription"] == "A review of burr grinders."
        assert summary["headings"][0] == {"level": 1, "text": "Best Grinder"}

    def test_short_preview_untouched(self) -> None:
        report = PageReport(snapshot=_snapshot(), markdown="short")
        assert report.summary(10)["markdownPreview"] == "short"


class TestHtmlToMarkdown:
    def test_blank_html(self) -> None:
        assert html_to_markdown("   ") is None


class TestContentReaderTool:
    async def test_read_uses_extracted_markdown(self) -> None:
        reader = AsyncMock(spec=BrowserPageReader)
        reader.read = AsyncMock(return_value=_snapshot())
        tool = ContentReaderTool(reader=reader)

        with patch("geomcp.tools.content_reader.html_to_markdown", return_value="# Extracted\n"):
            report = await tool.read(
                ContentReaderInput(url="https://shop.example/grinder", waitForSelector="#app", waitForTimeout=500)
            )

        reader.read.assert_awaited_once_with(
            "https://shop.example/grinder", wait_for_selector="#app", wait_for_timeout=500
        )
        assert report.markdown == "# Extracted"

    async def test_falls_back_to_main_text(self) -> None:
        reader = AsyncMock(spec=BrowserPageReader)
        reader.read = AsyncMock(return_value=_snapshot())
        tool = ContentReaderTool(reader=reader)

        with patch("geomcp.tools.content_reader.html_to_markdown", return_value=None):
            text = await tool.run(ContentReaderInput(url="https://shop.example/grinder"))

        assert "Main text body" in text
        assert text.startswith("# Best Grinder")
