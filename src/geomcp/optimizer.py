"""Content optimizer — LLM rewrite of a scraped page into GEO-friendly HTML.

The model is asked for two bracket-delimited sections. Its reply is treated
as untrusted free text: a missing pair never raises, and without an HTML pair
the whole reply is taken as the HTML.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from geomcp.clients.model import ChatModel
from geomcp.clients.tavily import SearchResponse
from geomcp.config import Settings
from geomcp.prompts import (
    GEO_SYSTEM_PROMPT,
    HTML_CLOSE,
    HTML_OPEN,
    INSIGHTS_CLOSE,
    INSIGHTS_OPEN,
    OPTIMIZER_INSTRUCTIONS,
    OPTIMIZER_USER_PREFIX,
)

EMPTY_REPLY_HTML = "<!-- model returned no content -->"


def _section_re(open_tag: str, close_tag: str) -> re.Pattern[str]:
    return re.compile(re.escape(open_tag) + r"(.*?)" + re.escape(close_tag), re.IGNORECASE | re.DOTALL)


_INSIGHTS_RE = _section_re(INSIGHTS_OPEN, INSIGHTS_CLOSE)
_HTML_RE = _section_re(HTML_OPEN, HTML_CLOSE)


class PageSummary(BaseModel):
    """The parsed page handed to the model."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    meta_description: str = Field(default="", alias="metaDescription")
    headings: list[dict[str, Any]] = []
    markdown_preview: str = Field(default="", alias="markdownPreview")


@dataclass
class OptimizationResult:
    """HTML to deploy plus the audit-derived points the model called out."""

    optimized_html: str
    audit_insights: str | None = None


def parse_model_output(raw: str) -> OptimizationResult:
    """Split a model reply into insights and HTML, best effort."""
    text = raw.strip()
    if not text:
        return OptimizationResult(optimized_html=EMPTY_REPLY_HTML)

    insights = _INSIGHTS_RE.search(text)
    html = _HTML_RE.search(text)
    return OptimizationResult(
        optimized_html=html.group(1).strip() if html else text,
        audit_insights=insights.group(1).strip() if insights else None,
    )


def summarize_audit(response: SearchResponse, max_sources: int = 5) -> str:
    """Condense a search audit into the short brief passed to the model."""
    lines: list[str] = []
    if response.answer:
        lines.append(f"AI answer: {response.answer}")
    for hit in response.results[:max_sources]:
        lines.append(f"- {hit.title} ({hit.url}): {hit.snippet}")
    return "\n".join(lines)


class ContentOptimizer:
    """Rewrites a page through the configured chat model.

    Usage::

        optimizer = ContentOptimizer(settings)
        result = await optimizer.optimize(page, keyword="espresso grinder", url=url)
    """

    def __init__(self, settings: Settings, model: ChatModel | None = None) -> None:
        self._settings = settings
        self._model = model

    def _get_model(self) -> ChatModel:
        if self._model is not None:
            return self._model
        return ChatModel(self._settings.require_model())

    async def optimize(
        self,
        page: PageSummary,
        *,
        keyword: str | None = None,
        url: str | None = None,
        audit_summary: str | None = None,
    ) -> OptimizationResult:
        model = self._get_model()
        system = f"{GEO_SYSTEM_PROMPT}\n{OPTIMIZER_INSTRUCTIONS}"
        payload = {
            "keyword": keyword,
            "url": url,
            "auditSummary": audit_summary,
            "page": page.model_dump(by_alias=True),
        }
        user = OPTIMIZER_USER_PREFIX + json.dumps(payload, indent=2, ensure_ascii=False)
        raw = await model.complete(system, user)
        return parse_model_output(raw)
