"""Tests for JSON-RPC envelopes and MCP payload models."""

from __future__ import annotations

from geomcp.protocol.models import (
    PROTOCOL_VERSION,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolDescriptor,
    ToolResult,
)


class TestJsonRpcRequest:
    def test_request_with_id(self) -> None:
        req = JsonRpcRequest.from_message({"jsonrpc": "2.0", "id": 7, "method": "ping"})
        assert req.id == 7
        assert req.method == "ping"
        assert req.is_notification is False

    def test_missing_id_is_notification(self) -> None:
        req = JsonRpcRequest.from_message({"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert req.is_notification is True

    def test_explicit_null_id_is_request(self) -> None:
        req = JsonRpcRequest.from_message({"id": None, "method": "ping"})
        assert req.is_notification is False
        assert req.id is None

    def test_loose_types_tolerated(self) -> None:
        req = JsonRpcRequest.from_message({"id": "a", "method": 5, "params": [1, 2]})
        assert req.method == ""
        assert req.params == {}


class TestJsonRpcResponse:
    def test_success_wire_form(self) -> None:
        wire = JsonRpcResponse.success("abc", {"ok": True}).to_wire()
        assert wire == {"jsonrpc": "2.0", "id": "abc", "result": {"ok": True}}

    def test_failure_wire_form(self) -> None:
        wire = JsonRpcResponse.failure(None, -32700, "Parse error").to_wire()
        assert wire == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Parse error"},
        }

    def test_exactly_one_branch(self) -> None:
        wire = JsonRpcResponse.success(1, {}).to_wire()
        assert "result" in wire
        assert "error" not in wire


class TestMcpPayloads:
    def test_descriptor_uses_camel_case_schema(self) -> None:
        desc = ToolDescriptor(name="t", description="d", input_schema={"type": "object"})
        assert desc.model_dump(by_alias=True)["inputSchema"] == {"type": "object"}

    def test_tool_result_text(self) -> None:
        result = ToolResult.from_text("hello")
        assert result.text == "hello"
        assert result.content[0].model_dump() == {"type": "text", "text": "hello"}

    def test_initialize_result(self) -> None:
        data = InitializeResult(server_info=ServerInfo(name="geo-mcp-agent", version="1.0.0")).model_dump(
            by_alias=True
        )
        assert data["protocolVersion"] == PROTOCOL_VERSION == "2024-11-05"
        assert data["capabilities"] == {"tools": {}}
        assert data["serverInfo"] == {"name": "geo-mcp-agent", "version": "1.0.0"}
