"""Argument coercion — untyped ``arguments`` bag to a typed tool input."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import ValidationError

from geomcp.errors import ToolValidationError
from geomcp.tools.inputs import INPUT_MODELS, ToolInput


def coerce_arguments(tool_name: str, raw: Mapping[str, Any] | None) -> ToolInput:
    """Validate *raw* against the input model registered for *tool_name*.

    A non-mapping ``raw`` is treated as an empty bag, so required fields are
    then reported as missing.

    Raises:
        ToolValidationError: naming the tool and the first offending field.
    """
    model = INPUT_MODELS.get(tool_name)
    if model is None:
        raise ToolValidationError(tool_name, "name", "no input model for this tool")

    data: dict[str, Any] = dict(raw) if isinstance(raw, Mapping) else {}
    try:
        return cast("ToolInput", model.model_validate(data))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "arguments"
        raise ToolValidationError(tool_name, field, first["msg"]) from exc
