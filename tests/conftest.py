"""Shared fixtures for the geomcp test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from geomcp.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with every credential present."""
    return Settings(
        tavily_api_key="tvly-test",
        wordpress_url="https://blog.example.com/",
        wordpress_user="editor",
        wordpress_app_password="abcd efgh",
        deepseek_api_key="sk-test",
    )


@pytest.fixture
def empty_settings() -> Settings:
    """Settings with no credentials at all."""
    return Settings()


@pytest.fixture
def http_client_factory() -> Any:
    """Build an ``httpx.AsyncClient`` stand-in whose ``post`` returns a canned response."""

    def _make(status_code: int = 200, json_data: Any = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.json = MagicMock(return_value=json_data if json_data is not None else {})
        response.text = text

        client = AsyncMock()
        client.post = AsyncMock(return_value=response)
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=None)
        return client

    return _make
