"""ToolDispatcher — routes a ``tools/call`` to its tool and normalizes the outcome."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from geomcp.errors import GeoError
from geomcp.protocol.models import ToolResult
from geomcp.tools.coercion import coerce_arguments
from geomcp.utils.telemetry import ATTR_TOOL_NAME, ATTR_TOOL_OUTCOME, get_tracer

if TYPE_CHECKING:
    from geomcp.protocol.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolDispatcher:
    """Looks up, validates and runs tools; never raises for tool failures.

    Every outcome is a :class:`ToolResult`:

    - unknown tool name → ``Unknown tool: <name>``;
    - success → the tool's text;
    - any exception (invalid arguments, missing configuration, upstream
      failure, anything else) → ``Error: <message>``.

    Usage::

        dispatcher = ToolDispatcher(registry)
        result = await dispatcher.dispatch("schema-generator", {"type": "Article", "entity": {}})
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        with _tracer.start_as_current_span("tool.dispatch") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)

            tool = self._registry.get(name)
            if tool is None:
                span.set_attribute(ATTR_TOOL_OUTCOME, "unknown")
                return ToolResult.from_text(f"Unknown tool: {name}")

            try:
                payload = coerce_arguments(name, arguments)
                text = await tool.run(payload)
            except GeoError as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                span.set_attribute(ATTR_TOOL_OUTCOME, "error")
                return ToolResult.from_text(f"Error: {exc}")
            except Exception as exc:
                logger.exception("Unexpected error while running tool %s", name)
                span.set_attribute(ATTR_TOOL_OUTCOME, "error")
                return ToolResult.from_text(f"Error: {exc}")

            span.set_attribute(ATTR_TOOL_OUTCOME, "ok")
            return ToolResult.from_text(text)
