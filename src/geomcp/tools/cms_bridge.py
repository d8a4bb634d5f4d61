"""cms-bridge — update a WordPress post or page (title, body, excerpt, meta)."""

from __future__ import annotations

import logging
from typing import Any

from geomcp.clients.wordpress import PublishedPost, WordPressClient
from geomcp.config import Settings
from geomcp.markup import markdown_to_html
from geomcp.tools.base import Tool
from geomcp.tools.inputs import CmsBridgeInput

logger = logging.getLogger(__name__)

NO_FIELDS_MESSAGE = (
    "No fields to update were provided (title/content/excerpt/meta); no update was performed."
)


def format_published(post: PublishedPost) -> str:
    lines = ["Update succeeded.", f"- ID: {post.id}"]
    if post.title is not None:
        lines.append(f"- Title: {post.title}")
    if post.link is not None:
        lines.append(f"- Link: {post.link}")
    return "\n".join(lines)


class CmsBridgeTool(Tool):
    name = "cms-bridge"
    description = (
        "Updates the body, title, excerpt and meta data of a WordPress post or page through the "
        "REST API. Requires WORDPRESS_URL, WORDPRESS_USER and WORDPRESS_APP_PASSWORD."
    )
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            "postId": {"type": ["number", "string"], "description": "WordPress post or page ID"},
            "postType": {"type": "string", "enum": ["post", "page"], "default": "post"},
            "title": {"type": "string"},
            "content": {
                "type": "string",
                "description": "New body as HTML, or Markdown (converted with simple rules)",
            },
            "excerpt": {"type": "string"},
            "meta": {"type": "object", "description": "Meta fields, e.g. meta_description"},
        },
        "required": ["postId"],
    }

    def __init__(self, settings: Settings, client: WordPressClient | None = None) -> None:
        self._settings = settings
        self._client = client

    def _get_client(self) -> WordPressClient:
        if self._client is not None:
            return self._client
        creds = self._settings.require_wordpress()
        return WordPressClient(creds.url, creds.user, creds.password, timeout=self._settings.http_timeout)

    async def run(self, payload: CmsBridgeInput) -> str:
        fields = payload.update_fields()
        if not fields:
            return NO_FIELDS_MESSAGE

        content = fields.get("content")
        if isinstance(content, str) and not content.startswith("<"):
            fields["content"] = markdown_to_html(content)

        client = self._get_client()
        logger.info("Updating WordPress %s %s (%s)", payload.post_type, payload.post_id, ", ".join(fields))
        post = await client.update(payload.post_type, payload.post_id, fields)
        return format_published(post)
