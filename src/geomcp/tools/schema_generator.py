"""schema-generator — Schema.org JSON-LD from core entity data."""

from __future__ import annotations

import json
import re
from typing import Any

from geomcp.tools.base import Tool
from geomcp.tools.inputs import SCHEMA_ORG, SchemaGeneratorInput

_UPPER_RUN_RE = re.compile(r"([A-Z]+)")
_SEPARATOR_RE = re.compile(r"[_\-\s]+([a-z0-9])")


def to_schema_key(key: str) -> str:
    """Normalize a field name to Schema.org lowerCamelCase.

    ``date_published``, ``DatePublished`` and ``datePublished`` all become
    ``datePublished``; a run of capitals counts as one word (``imageURL`` →
    ``imageUrl``). Keywords such as ``@id`` are left alone.
    """
    if key.startswith("@"):
        return key
    snake = _UPPER_RUN_RE.sub(lambda m: "_" + m.group(1).lower(), key).lstrip("_")
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), snake.strip("_- "))


def generate_json_ld(schema_type: str, entity: dict[str, Any], context: str = SCHEMA_ORG) -> dict[str, Any]:
    """Build the JSON-LD document, dropping ``None`` values."""
    graph: dict[str, Any] = {"@context": context, "@type": schema_type.strip()}
    for key, value in entity.items():
        if value is None:
            continue
        graph[to_schema_key(key)] = value
    return graph


def dump_json_ld(graph: dict[str, Any]) -> str:
    return json.dumps(graph, indent=2, ensure_ascii=False, default=str)


class SchemaGeneratorTool(Tool):
    name = "schema-generator"
    description = (
        "Generates Schema.org JSON-LD structured data from core entity facts (product, price, "
        "expert name, review score, ...) so AI search engines can understand and cite the page."
    )
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "description": "Schema.org type, e.g. Article, Product, FAQPage, HowTo, Organization",
            },
            "entity": {
                "type": "object",
                "description": "Entity data, e.g. name, description, price, author, datePublished",
            },
            "context": {"type": "string", "description": "JSON-LD @context", "default": SCHEMA_ORG},
        },
        "required": ["type", "entity"],
    }

    async def run(self, payload: SchemaGeneratorInput) -> str:
        graph = generate_json_ld(payload.schema_type, payload.entity, payload.context)
        return "\n".join([
            'Generated JSON-LD (place it in <script type="application/ld+json">):',
            "```json",
            dump_json_ld(graph),
            "```",
        ])
