"""Base abstraction for GEO tools."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from geomcp.protocol.models import ToolDescriptor


class Tool(ABC):
    """A named, schema-described wrapper around one external call.

    Subclasses declare ``name``, ``description`` and ``input_schema`` (the
    JSON schema advertised over ``tools/list``), and implement :meth:`run`.
    :meth:`run` receives the record that
    :func:`~geomcp.tools.coercion.coerce_arguments` builds from the input
    model registered under the same ``name`` in
    :data:`~geomcp.tools.inputs.INPUT_MODELS`.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_schema: ClassVar[dict[str, Any]]

    def descriptor(self) -> ToolDescriptor:
        """Return a descriptor for discovery; its schema is a private copy."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=copy.deepcopy(self.input_schema),
        )

    @abstractmethod
    async def run(self, payload: Any) -> str:
        """Execute the tool with a validated input record and return text."""
