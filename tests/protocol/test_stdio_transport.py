"""Tests for StdioTransport."""

from __future__ import annotations

import io
import json
from unittest.mock import MagicMock

from geomcp.protocol.transport import ServerTransport, StdioTransport


class TestStdioTransport:
    async def test_reads_lines_until_eof(self) -> None:
        transport = StdioTransport(input=io.BytesIO(b'{"a": 1}\n{"b": 2}\n'), output=io.StringIO())
        assert await transport.receive_line() == '{"a": 1}\n'
        assert await transport.receive_line() == '{"b": 2}\n'
        assert await transport.receive_line() is None

    async def test_decodes_utf8(self) -> None:
        transport = StdioTransport(input=io.BytesIO('{"q": "café"}\n'.encode()), output=io.StringIO())
        assert await transport.receive_line() == '{"q": "café"}\n'

    async def test_invalid_utf8_is_replaced(self) -> None:
        transport = StdioTransport(input=io.BytesIO(b"\xff\xfe garbage\n{}\n"), output=io.StringIO())
        assert await transport.receive_line() == "\ufffd\ufffd garbage\n"
        assert await transport.receive_line() == "{}\n"

    async def test_send_writes_one_line(self) -> None:
        out = io.StringIO()
        transport = StdioTransport(input=io.BytesIO(), output=out)
        await transport.send({"jsonrpc": "2.0", "id": 1, "result": {}})
        await transport.send({"jsonrpc": "2.0", "id": 2, "result": {}})

        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["id"] == 1
        assert out.getvalue().endswith("\n")

    async def test_broken_pipe_closes(self) -> None:
        output = MagicMock()
        output.write = MagicMock(side_effect=BrokenPipeError())
        transport = StdioTransport(input=io.BytesIO(b"{}\n"), output=output)

        await transport.send({"id": 1})
        assert transport.closed is True
        assert await transport.receive_line() is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StdioTransport(input=io.BytesIO(), output=io.StringIO()), ServerTransport)
