"""Server-side transports — newline-delimited JSON over a pair of text streams."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, BinaryIO, Protocol, TextIO, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ServerTransport(Protocol):
    """Line-oriented transport the MCP server reads requests from."""

    closed: bool

    async def receive_line(self) -> str | None: ...
    async def send(self, data: dict[str, Any]) -> None: ...


class StdioTransport:
    """Reads request lines from *input* and writes response lines to *output*.

    Defaults to the binary stdin and the text stdout. Input bytes are decoded
    as UTF-8 with invalid sequences replaced, so a bad line still reaches the
    JSON decoder. Reads go through a worker thread so a blocking ``readline``
    never stalls the event loop. A broken pipe on write marks the transport
    closed.
    """

    def __init__(self, input: BinaryIO | None = None, output: TextIO | None = None) -> None:
        self._input = input if input is not None else sys.stdin.buffer
        self._output = output if output is not None else sys.stdout
        self._write_lock = asyncio.Lock()
        self.closed = False

    async def receive_line(self) -> str | None:
        """Return the next raw line, or ``None`` at end of stream."""
        if self.closed:
            return None
        raw = await asyncio.to_thread(self._input.readline)
        if not raw:
            return None
        return raw.decode("utf-8", errors="replace")

    async def send(self, data: dict[str, Any]) -> None:
        """Write one JSON object as a single line and flush."""
        if self.closed:
            return
        serialized = json.dumps(data)
        async with self._write_lock:
            try:
                self._output.write(serialized + "\n")
                self._output.flush()
            except (BrokenPipeError, OSError) as exc:
                self.closed = True
                logger.warning("MCP stdio transport closed while sending: %s", exc)
