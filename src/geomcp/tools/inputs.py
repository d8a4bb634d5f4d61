"""Typed per-tool input records.

Each model turns the untyped ``arguments`` bag of a ``tools/call`` into a
validated record. The models share one policy:

- unknown fields are ignored;
- missing required fields fail;
- values are coerced where that is safe (digit strings to integers);
- enum fields silently fall back to their default;
- bounded numbers are clamped, non-numeric ones fall back to the default.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, ClassVar, Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_ORG = "https://schema.org"

_INT_RE = re.compile(r"[+-]?[0-9]+")

_INPUT_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


def _as_int(value: object) -> int | None:
    """Best-effort integer conversion; ``None`` when the value is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if _INT_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # beyond the interpreter's digit limit
                return None
    return None


def _is_web_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _optional_text(value: object) -> str | None:
    return value if isinstance(value, str) else None


# ---------------------------------------------------------------------------
# ai-search-audit
# ---------------------------------------------------------------------------


class SearchAuditInput(BaseModel):
    """Arguments for ``ai-search-audit``."""

    model_config = _INPUT_CONFIG
    tool_name: ClassVar[str] = "ai-search-audit"

    query: str
    max_results: int = Field(default=10, alias="maxResults")
    search_depth: Literal["basic", "advanced"] = Field(default="advanced", alias="searchDepth")

    @field_validator("query", mode="before")
    @classmethod
    def _stringify_numbers(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("query")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("max_results", mode="before")
    @classmethod
    def _clamp_results(cls, value: object) -> int:
        number = _as_int(value)
        if number is None:
            return 10
        return min(max(number, 1), 20)

    @field_validator("search_depth", mode="before")
    @classmethod
    def _depth_or_default(cls, value: object) -> str:
        if isinstance(value, str) and value.strip().lower() in ("basic", "advanced"):
            return value.strip().lower()
        return "advanced"


# ---------------------------------------------------------------------------
# content-reader
# ---------------------------------------------------------------------------


class ContentReaderInput(BaseModel):
    """Arguments for ``content-reader``."""

    model_config = _INPUT_CONFIG
    tool_name: ClassVar[str] = "content-reader"

    url: str
    wait_for_selector: str | None = Field(default=None, alias="waitForSelector")
    wait_for_timeout: int | None = Field(default=None, alias="waitForTimeout")

    @field_validator("url")
    @classmethod
    def _web_url(cls, value: str) -> str:
        value = value.strip()
        if not _is_web_url(value):
            raise ValueError("must be an absolute http(s) URL")
        return value

    @field_validator("wait_for_selector", mode="before")
    @classmethod
    def _selector(cls, value: object) -> str | None:
        text = _optional_text(value)
        if text is None or not text.strip():
            return None
        return text.strip()

    @field_validator("wait_for_timeout", mode="before")
    @classmethod
    def _non_negative(cls, value: object) -> int | None:
        number = _as_int(value)
        if number is None:
            return None
        return max(number, 0)


# ---------------------------------------------------------------------------
# schema-generator
# ---------------------------------------------------------------------------


class SchemaGeneratorInput(BaseModel):
    """Arguments for ``schema-generator``."""

    model_config = _INPUT_CONFIG
    tool_name: ClassVar[str] = "schema-generator"

    schema_type: str = Field(alias="type")
    entity: dict[str, Any]
    context: str = SCHEMA_ORG

    @field_validator("schema_type")
    @classmethod
    def _type_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("context", mode="before")
    @classmethod
    def _context_default(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return SCHEMA_ORG
        return value

    @field_validator("context")
    @classmethod
    def _context_url(cls, value: str) -> str:
        value = value.strip()
        if not _is_web_url(value):
            raise ValueError("must be an absolute http(s) URL")
        return value


# ---------------------------------------------------------------------------
# cms-bridge
# ---------------------------------------------------------------------------


class CmsBridgeInput(BaseModel):
    """Arguments for ``cms-bridge``."""

    model_config = _INPUT_CONFIG
    tool_name: ClassVar[str] = "cms-bridge"

    post_id: int = Field(alias="postId")
    post_type: Literal["post", "page"] = Field(default="post", alias="postType")
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    meta: dict[str, str] | None = None

    @field_validator("post_id", mode="before")
    @classmethod
    def _numeric_id(cls, value: object) -> int:
        number = _as_int(value)
        if number is None or (isinstance(value, float) and not value.is_integer()):
            raise ValueError("must be an integer or a numeric string")
        return number

    @field_validator("post_id")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("post_type", mode="before")
    @classmethod
    def _type_or_default(cls, value: object) -> str:
        if isinstance(value, str) and value.strip().lower() in ("post", "page"):
            return value.strip().lower()
        return "post"

    @field_validator("title", "content", "excerpt", mode="before")
    @classmethod
    def _text_only(cls, value: object) -> str | None:
        return _optional_text(value)

    @field_validator("meta", mode="before")
    @classmethod
    def _string_map(cls, value: object) -> dict[str, str] | None:
        if not isinstance(value, dict):
            return None
        meta: dict[str, str] = {}
        for key, item in value.items():
            if item is None:
                continue
            if isinstance(item, str):
                meta[str(key)] = item
            elif isinstance(item, (dict, list)):
                meta[str(key)] = json.dumps(item, ensure_ascii=False)
            else:
                meta[str(key)] = str(item)
        return meta

    def update_fields(self) -> dict[str, Any]:
        """Fields actually supplied for the update, in WordPress naming."""
        fields: dict[str, Any] = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.content is not None:
            fields["content"] = self.content
        if self.excerpt is not None:
            fields["excerpt"] = self.excerpt
        if self.meta:
            fields["meta"] = dict(self.meta)
        return fields


ToolInput = SearchAuditInput | ContentReaderInput | SchemaGeneratorInput | CmsBridgeInput

# Keyed by the tool name each model validates for; the only lookup coercion uses
INPUT_MODELS: dict[str, type[BaseModel]] = {
    model.tool_name: model
    for model in (SearchAuditInput, ContentReaderInput, SchemaGeneratorInput, CmsBridgeInput)
}
