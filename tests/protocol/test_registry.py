"""Tests for ToolRegistry."""

from __future__ import annotations

import pytest

from geomcp.config import Settings
from geomcp.protocol.registry import ToolRegistry
from geomcp.tools.catalog import build_registry
from geomcp.tools.inputs import INPUT_MODELS
from geomcp.tools.schema_generator import SchemaGeneratorTool
from geomcp.tools.search_audit import SearchAuditTool


class TestToolRegistry:
    def test_order_preserved(self, empty_settings: Settings) -> None:
        registry = build_registry(empty_settings)
        assert registry.names() == (
            "ai-search-audit",
            "content-reader",
            "schema-generator",
            "cms-bridge",
        )
        assert [d.name for d in registry.list()] == list(registry.names())

    def test_lookup(self, empty_settings: Settings) -> None:
        registry = build_registry(empty_settings)
        assert "cms-bridge" in registry
        assert registry.get("cms-bridge") is not None
        assert registry.get("nope") is None
        assert len(registry) == 4

    def test_descriptors_are_stable(self, empty_settings: Settings) -> None:
        registry = build_registry(empty_settings)
        assert registry.list() == registry.list()

    def test_every_schema_is_an_object(self, empty_settings: Settings) -> None:
        for desc in build_registry(empty_settings).list():
            assert desc.input_schema["type"] == "object"
            assert desc.input_schema["required"]
            assert desc.description

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate tool name"):
            ToolRegistry([SchemaGeneratorTool(), SchemaGeneratorTool()])

    def test_every_tool_has_an_input_model(self, empty_settings: Settings) -> None:
        assert set(build_registry(empty_settings).names()) == set(INPUT_MODELS)

    def test_listed_schemas_are_copies(self, empty_settings: Settings) -> None:
        registry = build_registry(empty_settings)
        registry.list()[0].input_schema["properties"].clear()

        assert "query" in registry.list()[0].input_schema["properties"]
        assert "query" in SearchAuditTool.input_schema["properties"]

    def test_descriptor_does_not_share_class_schema(self) -> None:
        descriptor = SchemaGeneratorTool().descriptor()
        assert descriptor.input_schema == SchemaGeneratorTool.input_schema
        assert descriptor.input_schema is not SchemaGeneratorTool.input_schema
