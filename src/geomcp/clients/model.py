"""ChatModel — plain text-in/text-out access to a chat-completion API via LiteLLM."""

from __future__ import annotations

from typing import Any

import litellm

from geomcp.config import ModelSettings
from geomcp.errors import UpstreamError
from geomcp.utils.telemetry import ATTR_MODEL, ATTR_UPSTREAM_SERVICE, get_tracer

_tracer = get_tracer(__name__)

SERVICE = "Chat model"


class ChatModel:
    """Sends one system + user exchange and returns the raw reply text.

    No structured output is assumed; callers parse whatever comes back.

    Usage::

        model = ChatModel(settings.require_model())
        reply = await model.complete(system_prompt, user_prompt)
    """

    def __init__(self, config: ModelSettings, *, temperature: float = 0.4) -> None:
        self.config = config
        self.temperature = temperature

    async def complete(self, system: str, user: str, **kwargs: Any) -> str:
        call_kwargs: dict[str, Any] = {
            "model": self.config.litellm_model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": self.temperature,
            "api_key": self.config.api_key,
            "api_base": self.config.api_base,
            **kwargs,
        }
        with _tracer.start_as_current_span("model.complete") as span:
            span.set_attribute(ATTR_UPSTREAM_SERVICE, SERVICE)
            span.set_attribute(ATTR_MODEL, self.config.litellm_model)
            try:
                response = await litellm.acompletion(**call_kwargs)  # pyright: ignore[reportUnknownMemberType]
            except Exception as exc:
                status = getattr(exc, "status_code", None)
                raise UpstreamError(SERVICE, status if isinstance(status, int) else None, str(exc)) from exc

        content = response.choices[0].message.content
        return content.strip() if isinstance(content, str) else ""
