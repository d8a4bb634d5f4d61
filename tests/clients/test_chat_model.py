"""Tests for ChatModel."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from geomcp.clients.model import ChatModel
from geomcp.config import ModelSettings
from geomcp.errors import UpstreamError


def _litellm_response(content: str | None) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def config() -> ModelSettings:
    return ModelSettings(model="deepseek-chat", api_key="sk-test", api_base="https://api.deepseek.com")


class TestChatModel:
    async def test_complete(self, config: ModelSettings) -> None:
        model = ChatModel(config)
        with patch(
            "geomcp.clients.model.litellm.acompletion",
            new_callable=AsyncMock,
            return_value=_litellm_response("  hello  "),
        ) as mock_completion:
            reply = await model.complete("system text", "user text")

        assert reply == "hello"
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "openai/deepseek-chat"
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["api_base"] == "https://api.deepseek.com"
        assert kwargs["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]

    async def test_empty_content(self, config: ModelSettings) -> None:
        with patch(
            "geomcp.clients.model.litellm.acompletion",
            new_callable=AsyncMock,
            return_value=_litellm_response(None),
        ):
            assert await ChatModel(config).complete("s", "u") == ""

    async def test_failure_wrapped(self, config: ModelSettings) -> None:
        error = RuntimeError("rate limited")
        error.status_code = 429  # type: ignore[attr-defined]
        with patch(
            "geomcp.clients.model.litellm.acompletion",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            with pytest.raises(UpstreamError) as excinfo:
                await ChatModel(config).complete("s", "u")
        assert excinfo.value.status == 429
        assert "rate limited" in str(excinfo.value)
