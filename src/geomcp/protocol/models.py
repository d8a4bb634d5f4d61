"""MCP models — JSON-RPC 2.0 envelopes, tool descriptors and tool results.

Implements the server side of the message format used by the Model Context
Protocol for the handshake (``initialize``), tool discovery (``tools/list``)
and tool execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "2024-11-05"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    ``is_notification`` is true when the ``id`` key is absent from the wire
    message; an explicit ``"id": null`` still expects a response.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = "2.0"
    method: str = ""
    id: Any = None
    params: dict[str, Any] = Field(default_factory=dict)
    is_notification: bool = Field(default=False, exclude=True)

    @classmethod
    def from_message(cls, msg: dict[str, Any]) -> JsonRpcRequest:
        """Build a request from a decoded JSON object, tolerating loose types."""
        params = msg.get("params")
        method = msg.get("method")
        return cls(
            jsonrpc=str(msg.get("jsonrpc", "2.0")),
            method=method if isinstance(method, str) else "",
            id=msg.get("id"),
            params=params if isinstance(params, dict) else {},
            is_notification="id" not in msg,
        )


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message carrying exactly one of result/error."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message))

    def to_wire(self) -> dict[str, Any]:
        """Serialize, keeping ``id`` (even when null) and dropping the unused branch."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result if self.result is not None else {}
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class TextContent(BaseModel):
    """Plain text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """The outcome of a ``tools/call``: an ordered list of text blocks."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        """Create a ToolResult with a single text content block."""
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "\n".join(part.text for part in self.content)


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Handshake payload returned by ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")
