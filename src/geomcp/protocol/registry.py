"""ToolRegistry — the fixed, ordered set of tools known at startup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geomcp.protocol.models import ToolDescriptor
    from geomcp.tools.base import Tool


class ToolRegistry:
    """Immutable name-to-tool lookup that preserves registration order.

    Usage::

        registry = ToolRegistry([SearchAuditTool(settings), SchemaGeneratorTool()])
        registry.list()        # descriptors, in order
        registry.get("schema-generator")
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        ordered = tuple(tools)
        index: dict[str, Tool] = {}
        for tool in ordered:
            if tool.name in index:
                msg = f"Duplicate tool name: {tool.name}"
                raise ValueError(msg)
            index[tool.name] = tool
        self._tools = ordered
        self._index = index
        self._descriptors = tuple(tool.descriptor() for tool in ordered)

    def list(self) -> list[ToolDescriptor]:
        """Return copies of every descriptor in registration order."""
        return [descriptor.model_copy(deep=True) for descriptor in self._descriptors]

    def get(self, name: str) -> Tool | None:
        return self._index.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(tool.name for tool in self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._tools)
