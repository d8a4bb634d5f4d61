"""Protocol layer — MCP JSON-RPC framing, tool registry and dispatch."""

from geomcp.protocol.dispatcher import ToolDispatcher
from geomcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    TextContent,
    ToolDescriptor,
    ToolResult,
)
from geomcp.protocol.registry import ToolRegistry
from geomcp.protocol.server import MCPServer
from geomcp.protocol.transport import ServerTransport, StdioTransport

__all__ = [
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPServer",
    "ServerTransport",
    "StdioTransport",
    "TextContent",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolRegistry",
    "ToolResult",
]
