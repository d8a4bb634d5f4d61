"""The registry of GEO tools bound to the process settings."""

from __future__ import annotations

from geomcp.config import Settings
from geomcp.protocol.registry import ToolRegistry
from geomcp.tools.cms_bridge import CmsBridgeTool
from geomcp.tools.content_reader import ContentReaderTool
from geomcp.tools.schema_generator import SchemaGeneratorTool
from geomcp.tools.search_audit import SearchAuditTool


def build_registry(settings: Settings) -> ToolRegistry:
    """Construct the four tools in their advertised order."""
    return ToolRegistry([
        SearchAuditTool(settings),
        ContentReaderTool(),
        SchemaGeneratorTool(),
        CmsBridgeTool(settings),
    ])
