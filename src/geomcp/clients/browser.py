"""BrowserPageReader — headless Chromium page extraction via Playwright."""

from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright
from pydantic import BaseModel

from geomcp.errors import UpstreamError
from geomcp.utils.telemetry import ATTR_UPSTREAM_SERVICE, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SERVICE = "Browser"

MAIN_CONTENT_SELECTOR = (
    "main, article, [role='main'], #content, .content, .post-content, .entry-content"
)

_HEADINGS_JS = """
nodes => nodes.map(el => ({
    level: parseInt(el.tagName.substring(1), 10),
    text: (el.innerText || '').trim()
}))
"""

_JSON_LD_JS = """
nodes => nodes.map(el => (el.textContent || '').trim()).filter(Boolean)
"""


class Heading(BaseModel):
    level: int
    text: str


class PageSnapshot(BaseModel):
    """Everything extracted from one rendered page."""

    url: str
    title: str = ""
    meta_description: str = ""
    headings: list[Heading] = []
    schemas: list[str] = []
    main_text: str = ""
    html: str = ""


class BrowserPageReader:
    """Navigates to a URL in a fresh headless browser and extracts its structure.

    The browser is launched per call and always closed afterwards.
    """

    def __init__(
        self,
        *,
        navigation_timeout_ms: int = 30_000,
        default_wait_ms: int = 10_000,
        headless: bool = True,
    ) -> None:
        self.navigation_timeout_ms = navigation_timeout_ms
        self.default_wait_ms = default_wait_ms
        self.headless = headless

    async def read(
        self,
        url: str,
        *,
        wait_for_selector: str | None = None,
        wait_for_timeout: int | None = None,
    ) -> PageSnapshot:
        with _tracer.start_as_current_span("browser.read") as span:
            span.set_attribute(ATTR_UPSTREAM_SERVICE, SERVICE)
            try:
                async with async_playwright() as pw:
                    browser = await pw.chromium.launch(headless=self.headless)
                    try:
                        page = await browser.new_page()
                        await page.goto(
                            url,
                            wait_until="domcontentloaded",
                            timeout=self.navigation_timeout_ms,
                        )

                        if wait_for_selector:
                            await page.wait_for_selector(
                                wait_for_selector,
                                timeout=wait_for_timeout if wait_for_timeout is not None else self.default_wait_ms,
                            )
                        elif wait_for_timeout:
                            await page.wait_for_timeout(wait_for_timeout)

                        title = await page.title()
                        meta_el = await page.query_selector('meta[name="description"]')
                        meta_description = ""
                        if meta_el is not None:
                            meta_description = await meta_el.get_attribute("content") or ""

                        headings = await page.eval_on_selector_all("h1, h2, h3, h4, h5, h6", _HEADINGS_JS)
                        schemas = await page.eval_on_selector_all(
                            'script[type="application/ld+json"]', _JSON_LD_JS
                        )

                        main = await page.query_selector(MAIN_CONTENT_SELECTOR)
                        if main is None:
                            main = await page.query_selector("body")
                        if main is None:
                            raise UpstreamError(SERVICE, None, f"no body content found at {url}")
                        main_text = await main.inner_text()
                        html = await page.content()
                    finally:
                        await browser.close()
            except PlaywrightError as exc:
                logger.warning("Browser extraction of %s failed: %s", url, exc)
                raise UpstreamError(SERVICE, None, str(exc)) from exc

        return PageSnapshot(
            url=url,
            title=title,
            meta_description=meta_description,
            headings=[Heading.model_validate(h) for h in headings],
            schemas=list(schemas),
            main_text=main_text,
            html=html,
        )
