"""Tests for ``geo tools`` CLI commands."""

from __future__ import annotations

from click.testing import CliRunner

from geomcp.cli import main


class TestToolsList:
    def test_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list"])

        assert result.exit_code == 0
        for name in ("ai-search-audit", "content-reader", "schema-generator", "cms-bridge"):
            assert name in result.output

    def test_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list", "--format", "json"])

        assert result.exit_code == 0
        assert '"schema-generator"' in result.output
        assert '"inputSchema"' in result.output


class TestToolsCall:
    def test_schema_generator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["tools", "call", "schema-generator", "--args", '{"type": "Product", "entity": {"price_currency": "EUR"}}'],
        )

        assert result.exit_code == 0
        assert '"@type": "Product"' in result.output
        assert '"priceCurrency": "EUR"' in result.output

    def test_cms_bridge_without_fields(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "cms-bridge", "--args", '{"postId": 3}'])

        assert result.exit_code == 0
        assert "No fields to update" in result.output

    def test_unknown_tool_exits_nonzero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "nope"])

        assert result.exit_code == 1
        assert "Unknown tool: nope" in result.output

    def test_tool_error_exits_nonzero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "schema-generator", "--args", "{}"])

        assert result.exit_code == 1
        assert "Error: Invalid arguments for schema-generator" in result.output

    def test_invalid_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "schema-generator", "--args", "{nope"])

        assert result.exit_code == 1
        assert "Invalid --args JSON" in result.output

    def test_non_object_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "schema-generator", "--args", "[1]"])

        assert result.exit_code == 1
        assert "expected an object" in result.output
