"""TavilyClient — search-audit backend over the Tavily HTTP API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from geomcp.errors import UpstreamError
from geomcp.utils.telemetry import ATTR_UPSTREAM_SERVICE, ATTR_UPSTREAM_STATUS, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SERVICE = "Tavily"


class SearchHit(BaseModel):
    """One ranked search result."""

    title: str = ""
    url: str = ""
    snippet: str = ""
    score: float | None = None


class SearchResponse(BaseModel):
    """Ranked results plus the optional synthesized answer."""

    answer: str | None = None
    results: list[SearchHit] = []


class TavilyClient:
    """Minimal async client for ``POST /search``.

    Usage::

        client = TavilyClient(api_key="tvly-...")
        response = await client.search("best espresso grinder", max_results=5)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.tavily.com",
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def search(
        self,
        query: str,
        *,
        max_results: int = 10,
        search_depth: str = "advanced",
    ) -> SearchResponse:
        body: dict[str, Any] = {
            "api_key": self._api_key,
            "query": query,
            "search_depth": search_depth,
            "max_results": max_results,
            "include_answer": True,
            "include_raw_content": False,
        }
        with _tracer.start_as_current_span("tavily.search") as span:
            span.set_attribute(ATTR_UPSTREAM_SERVICE, SERVICE)
            try:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(f"{self._base_url}/search", json=body)
            except httpx.HTTPError as exc:
                raise UpstreamError(SERVICE, None, str(exc)) from exc

            span.set_attribute(ATTR_UPSTREAM_STATUS, response.status_code)
            if not response.is_success:
                logger.warning("Tavily search failed with status %s", response.status_code)
                raise UpstreamError(SERVICE, response.status_code, response.text)

            data: dict[str, Any] = response.json()

        hits = [
            SearchHit(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("content") or "",
                score=item.get("score"),
            )
            for item in data.get("results") or []
        ]
        return SearchResponse(answer=data.get("answer") or None, results=hits)
