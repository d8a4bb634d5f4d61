"""ai-search-audit — how a query is currently answered and cited by AI search."""

from __future__ import annotations

from typing import Any

from geomcp.clients.tavily import SearchResponse, TavilyClient
from geomcp.config import Settings
from geomcp.tools.base import Tool
from geomcp.tools.inputs import SearchAuditInput


def format_audit(response: SearchResponse) -> str:
    """Render the synthesized answer and the ranked sources as Markdown."""
    lines: list[str] = []
    if response.answer:
        lines.append("## AI Summary\n" + response.answer)
    lines.append("\n## Cited Sources\n")
    for index, hit in enumerate(response.results, start=1):
        lines.append(f"### {index}. {hit.title}")
        lines.append(f"- URL: {hit.url}")
        if hit.score is not None:
            lines.append(f"- Relevance: {hit.score}")
        lines.append(f"- Snippet: {hit.snippet}")
        lines.append("")
    return "\n".join(lines)


class SearchAuditTool(Tool):
    name = "ai-search-audit"
    description = (
        "Simulates how AI search engines (Perplexity, SearchGPT) retrieve answers for a query: "
        "returns the synthesized answer plus the cited sources, their domains and key snippets, "
        "for GEO baseline analysis and competitor comparison."
    )
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Target keyword or natural-language search query"},
            "maxResults": {
                "type": "number",
                "description": "Maximum number of results (1-20)",
                "default": 10,
            },
            "searchDepth": {"type": "string", "enum": ["basic", "advanced"], "default": "advanced"},
        },
        "required": ["query"],
    }

    def __init__(self, settings: Settings, client: TavilyClient | None = None) -> None:
        self._settings = settings
        self._client = client

    def _get_client(self) -> TavilyClient:
        if self._client is not None:
            return self._client
        return TavilyClient(
            self._settings.require_tavily(),
            base_url=self._settings.tavily_base_url,
            timeout=self._settings.http_timeout,
        )

    async def audit(self, payload: SearchAuditInput) -> SearchResponse:
        """Run the search and return the structured response."""
        return await self._get_client().search(
            payload.query,
            max_results=payload.max_results,
            search_depth=payload.search_depth,
        )

    async def run(self, payload: SearchAuditInput) -> str:
        return format_audit(await self.audit(payload))
