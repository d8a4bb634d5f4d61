"""End-to-end GEO pipelines used by the CLI: analyze a keyword/page, optimize a page."""

from __future__ import annotations

import logging
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field

from geomcp.config import Settings
from geomcp.optimizer import ContentOptimizer, OptimizationResult, PageSummary, summarize_audit
from geomcp.tools.coercion import coerce_arguments
from geomcp.tools.content_reader import ContentReaderTool
from geomcp.tools.inputs import ContentReaderInput, SearchAuditInput
from geomcp.tools.schema_generator import dump_json_ld, generate_json_ld
from geomcp.tools.search_audit import SearchAuditTool, format_audit

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 2000


class AuditSection(BaseModel):
    content: str
    results: list[dict[str, Any]] = []


class AnalysisReport(BaseModel):
    """Outcome of :func:`analyze`; each step records either data or an error."""

    model_config = ConfigDict(populate_by_name=True)

    keyword: str | None = None
    url: str | None = None
    audit: AuditSection | None = None
    audit_error: str | None = Field(default=None, alias="auditError")
    page: PageSummary | None = None
    page_error: str | None = Field(default=None, alias="pageError")
    schema_json: str | None = Field(default=None, alias="schemaJson")


async def analyze(
    settings: Settings,
    *,
    keyword: str | None = None,
    url: str | None = None,
    max_results: int = 5,
    search_tool: SearchAuditTool | None = None,
    reader_tool: ContentReaderTool | None = None,
) -> AnalysisReport:
    """Audit *keyword* and read *url*; a failing step does not stop the other."""
    report = AnalysisReport(keyword=keyword, url=url)

    if keyword:
        search = search_tool or SearchAuditTool(settings)
        try:
            payload = cast("SearchAuditInput", coerce_arguments(search.name, {"query": keyword, "maxResults": max_results}))
            response = await search.audit(payload)
            report.audit = AuditSection(
                content=format_audit(response),
                results=[hit.model_dump() for hit in response.results],
            )
        except Exception as exc:
            logger.warning("Audit of %r failed: %s", keyword, exc)
            report.audit_error = str(exc)

    if url:
        reader = reader_tool or ContentReaderTool()
        try:
            payload = cast("ContentReaderInput", coerce_arguments(reader.name, {"url": url}))
            page = await reader.read(payload)
            report.page = PageSummary.model_validate(page.summary(PREVIEW_CHARS))
            graph = generate_json_ld(
                "Article",
                {
                    "name": page.snapshot.title or "Page title",
                    "description": page.snapshot.meta_description or "Page summary",
                    "url": payload.url,
                },
            )
            report.schema_json = dump_json_ld(graph)
        except Exception as exc:
            logger.warning("Reading %s failed: %s", url, exc)
            report.page_error = str(exc)

    return report


async def optimize_page(
    settings: Settings,
    url: str,
    *,
    keyword: str | None = None,
    search_tool: SearchAuditTool | None = None,
    reader_tool: ContentReaderTool | None = None,
    optimizer: ContentOptimizer | None = None,
) -> OptimizationResult:
    """Read *url*, optionally audit *keyword*, and rewrite the page with the model.

    Raises:
        GeoError: when reading, auditing or the model call fails.
    """
    payload = cast("ContentReaderInput", coerce_arguments("content-reader", {"url": url}))
    reader = reader_tool or ContentReaderTool()
    page = await reader.read(payload)

    audit_summary: str | None = None
    if keyword:
        search = search_tool or SearchAuditTool(settings)
        query = cast("SearchAuditInput", coerce_arguments(search.name, {"query": keyword, "maxResults": 5}))
        audit_summary = summarize_audit(await search.audit(query))

    summary = PageSummary.model_validate(page.summary(PREVIEW_CHARS))
    return await (optimizer or ContentOptimizer(settings)).optimize(
        summary,
        keyword=keyword,
        url=payload.url,
        audit_summary=audit_summary,
    )
