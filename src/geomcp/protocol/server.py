"""MCPServer — JSON-RPC framing and method routing for the GEO tools.

Each input line is one JSON-RPC message. Lines are handled strictly in
arrival order and each request is fully answered before the next line is
read, so responses come out in request order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from geomcp import __version__
from geomcp.errors import ProtocolError
from geomcp.protocol.dispatcher import ToolDispatcher
from geomcp.protocol.models import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
)
from geomcp.utils.telemetry import ATTR_RPC_ID, ATTR_RPC_METHOD, get_tracer

if TYPE_CHECKING:
    from geomcp.protocol.registry import ToolRegistry
    from geomcp.protocol.transport import ServerTransport

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SERVER_NAME = "geo-mcp-agent"


def decode_line(line: str) -> dict[str, Any]:
    """Parse one line into a JSON object or raise a parse-error ProtocolError."""
    try:
        msg = json.loads(line)
    except (ValueError, RecursionError) as exc:
        raise ProtocolError(PARSE_ERROR, "Parse error") from exc
    if not isinstance(msg, dict):
        raise ProtocolError(PARSE_ERROR, "Parse error")
    return msg


class MCPServer:
    """Answers ``initialize``, ``ping``, ``tools/list`` and ``tools/call``.

    Messages without an ``id`` are notifications and never get a response.
    Tool failures come back as ordinary results whose text starts with
    ``Error:``; only bad JSON and unknown methods use the JSON-RPC ``error``
    member.

    Usage::

        server = MCPServer(build_registry(settings))
        await server.serve(StdioTransport())
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        dispatcher: ToolDispatcher | None = None,
        name: str = SERVER_NAME,
        version: str = __version__,
    ) -> None:
        self._registry = registry
        self._dispatcher = dispatcher or ToolDispatcher(registry)
        self._info = ServerInfo(name=name, version=version)

    async def serve(self, transport: ServerTransport) -> None:
        """Read and answer lines until the input stream ends."""
        logger.info("%s %s ready with %d tools", self._info.name, self._info.version, len(self._registry))
        while not transport.closed:
            line = await transport.receive_line()
            if line is None:
                break
            response = await self.handle_line(line)
            if response is not None:
                await transport.send(response)
        logger.info("Input stream closed; shutting down")

    async def handle_line(self, line: str) -> dict[str, Any] | None:
        """Handle one raw input line; ``None`` means nothing is written back."""
        text = line.strip()
        if not text:
            return None
        try:
            msg = decode_line(text)
        except ProtocolError as exc:
            logger.warning("Rejected unparseable input line")
            return JsonRpcResponse.failure(None, exc.code, exc.message).to_wire()
        return await self.handle_message(msg)

    async def handle_message(self, msg: dict[str, Any]) -> dict[str, Any] | None:
        """Handle one decoded JSON-RPC message."""
        request = JsonRpcRequest.from_message(msg)
        if request.is_notification:
            logger.debug("Notification %s received", request.method or "<none>")
            return None

        with _tracer.start_as_current_span("rpc.request") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            span.set_attribute(ATTR_RPC_ID, str(request.id))
            try:
                result = await self._route(request)
                response = JsonRpcResponse.success(request.id, result)
            except ProtocolError as exc:
                response = JsonRpcResponse.failure(request.id, exc.code, exc.message)
            except Exception:
                logger.exception("Unexpected error while handling %s", request.method)
                response = JsonRpcResponse.failure(request.id, INTERNAL_ERROR, "Internal error")
        return response.to_wire()

    async def _route(self, request: JsonRpcRequest) -> dict[str, Any]:
        method = request.method
        if method == "initialize":
            return InitializeResult(server_info=self._info).model_dump(by_alias=True)
        if method == "ping":
            return {}
        if method == "tools/list":
            return {"tools": [d.model_dump(by_alias=True) for d in self._registry.list()]}
        if method == "tools/call":
            return await self._call_tool(request.params)
        raise ProtocolError(METHOD_NOT_FOUND, f"Method not found: {method}")

    async def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        arguments = params.get("arguments")
        result = await self._dispatcher.dispatch(
            name if isinstance(name, str) else "",
            arguments if isinstance(arguments, Mapping) else None,
        )
        return {
            "content": [part.model_dump() for part in result.content],
            "isError": False,
        }
