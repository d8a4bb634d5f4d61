"""Tests for ``geo serve`` CLI command."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from geomcp.cli import main


class TestServe:
    def test_runs_server(self) -> None:
        with (
            patch("geomcp.protocol.server.MCPServer.serve", new_callable=AsyncMock) as mock_serve,
            patch("geomcp.cli_commands.serve.logging.basicConfig") as mock_logging,
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "--log-level", "debug"])

        assert result.exit_code == 0
        mock_serve.assert_awaited_once()
        assert mock_logging.call_args.kwargs["level"] == logging.DEBUG

    def test_rejects_unknown_log_level(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve", "--log-level", "chatty"])

        assert result.exit_code != 0

    def test_telemetry_flag_configures(self) -> None:
        with (
            patch("geomcp.protocol.server.MCPServer.serve", new_callable=AsyncMock),
            patch("geomcp.cli_commands.serve.logging.basicConfig"),
            patch("geomcp.utils.telemetry.configure_telemetry") as mock_configure,
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "--trace-console"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with(export_to_console=True, otlp_endpoint=None)


class TestVersion:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output
