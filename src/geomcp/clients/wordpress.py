"""WordPressClient — CMS backend over the WordPress REST API (``/wp-json/wp/v2``)."""

from __future__ import annotations

import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel

from geomcp.errors import UpstreamError
from geomcp.utils.telemetry import ATTR_UPSTREAM_SERVICE, ATTR_UPSTREAM_STATUS, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SERVICE = "WordPress"

_ENDPOINTS = {"post": "posts", "page": "pages"}


class PublishedPost(BaseModel):
    """The updated resource as echoed back by WordPress."""

    id: int
    title: str | None = None
    link: str | None = None


class WordPressClient:
    """Updates posts and pages using Application Password basic auth."""

    def __init__(self, base_url: str, user: str, password: str, *, timeout: float = 60.0) -> None:
        self._api_root = f"{base_url.rstrip('/')}/wp-json/wp/v2"
        self._auth = httpx.BasicAuth(user, password)
        self._timeout = timeout

    def endpoint(self, post_type: Literal["post", "page"], post_id: int) -> str:
        return f"{self._api_root}/{_ENDPOINTS[post_type]}/{post_id}"

    async def update(
        self,
        post_type: Literal["post", "page"],
        post_id: int,
        fields: dict[str, Any],
    ) -> PublishedPost:
        """POST *fields* to the resource and return its id, title and link."""
        url = self.endpoint(post_type, post_id)
        with _tracer.start_as_current_span("wordpress.update") as span:
            span.set_attribute(ATTR_UPSTREAM_SERVICE, SERVICE)
            try:
                async with httpx.AsyncClient(timeout=self._timeout, auth=self._auth) as client:
                    response = await client.post(url, json=fields)
            except httpx.HTTPError as exc:
                raise UpstreamError(SERVICE, None, str(exc)) from exc

            span.set_attribute(ATTR_UPSTREAM_STATUS, response.status_code)
            if not response.is_success:
                logger.warning("WordPress update of %s failed with status %s", url, response.status_code)
                raise UpstreamError(SERVICE, response.status_code, response.text)

            data: dict[str, Any] = response.json()

        title = data.get("title")
        rendered = title.get("rendered") if isinstance(title, dict) else None
        return PublishedPost(id=data["id"], title=rendered, link=data.get("link"))
