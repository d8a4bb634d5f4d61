"""Tests for TavilyClient."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from geomcp.clients.tavily import TavilyClient
from geomcp.errors import UpstreamError


class TestTavilyClient:
    async def test_search_success(self, http_client_factory: Any) -> None:
        client = http_client_factory(
            json_data={
                "answer": "Use a burr grinder.",
                "results": [
                    {"title": "Guide", "url": "https://g.example", "content": "Burrs.", "score": 0.8},
                    {"title": None, "url": "https://h.example", "content": "More."},
                ],
            }
        )
        tavily = TavilyClient("tvly-key", base_url="https://api.tavily.com/")

        with patch("geomcp.clients.tavily.httpx.AsyncClient", return_value=client):
            response = await tavily.search("grinder", max_results=4, search_depth="basic")

        assert response.answer == "Use a burr grinder."
        assert [hit.snippet for hit in response.results] == ["Burrs.", "More."]
        assert response.results[0].score == 0.8
        assert response.results[1].title == ""

        call = client.post.call_args
        assert call.args[0] == "https://api.tavily.com/search"
        body = call.kwargs["json"]
        assert body["api_key"] == "tvly-key"
        assert body["max_results"] == 4
        assert body["search_depth"] == "basic"
        assert body["include_answer"] is True

    async def test_empty_answer_is_none(self, http_client_factory: Any) -> None:
        client = http_client_factory(json_data={"answer": "", "results": []})
        with patch("geomcp.clients.tavily.httpx.AsyncClient", return_value=client):
            response = await TavilyClient("k").search("q")
        assert response.answer is None
        assert response.results == []

    async def test_non_success_status(self, http_client_factory: Any) -> None:
        client = http_client_factory(status_code=401, text="invalid api key")
        with patch("geomcp.clients.tavily.httpx.AsyncClient", return_value=client):
            with pytest.raises(UpstreamError) as excinfo:
                await TavilyClient("k").search("q")
        assert excinfo.value.status == 401
        assert str(excinfo.value) == "Tavily API error (401): invalid api key"

    async def test_transport_failure(self) -> None:
        client = AsyncMock()
        client.post = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=None)

        with patch("geomcp.clients.tavily.httpx.AsyncClient", return_value=client):
            with pytest.raises(UpstreamError) as excinfo:
                await TavilyClient("k").search("q")
        assert excinfo.value.status is None
        assert "connection refused" in str(excinfo.value)
