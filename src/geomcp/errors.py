"""Shared error types for the GEO agent.

Tool-level failures (validation, configuration, upstream) are caught by the
dispatcher and reported as text. :class:`ProtocolError` is the only member
that travels over the JSON-RPC ``error`` channel.
"""

from __future__ import annotations


class GeoError(Exception):
    """Base error for all GEO agent failures."""


class ToolValidationError(GeoError):
    """Tool arguments are missing or cannot be coerced to the expected type."""

    def __init__(self, tool: str, field: str, detail: str = "") -> None:
        self.tool = tool
        self.field = field
        self.detail = detail
        msg = f"Invalid arguments for {tool}: field '{field}'"
        if detail:
            msg += f" — {detail}"
        super().__init__(msg)


class ConfigurationError(GeoError):
    """A required environment value is absent."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Missing required environment variable: {variable}")


class UpstreamError(GeoError):
    """An external collaborator failed or answered with a non-success status."""

    def __init__(self, service: str, status: int | None = None, body: str = "") -> None:
        self.service = service
        self.status = status
        self.body = body
        msg = f"{service} API error"
        if status is not None:
            msg += f" ({status})"
        if body:
            msg += f": {body}"
        super().__init__(msg)


class ProtocolError(GeoError):
    """A malformed request line or an unsupported method."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)
