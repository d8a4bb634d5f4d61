"""Clients for the external collaborators: search, browser, CMS and chat model."""

from geomcp.clients.browser import BrowserPageReader, Heading, PageSnapshot
from geomcp.clients.model import ChatModel
from geomcp.clients.tavily import SearchHit, SearchResponse, TavilyClient
from geomcp.clients.wordpress import PublishedPost, WordPressClient

__all__ = [
    "BrowserPageReader",
    "ChatModel",
    "Heading",
    "PageSnapshot",
    "PublishedPost",
    "SearchHit",
    "SearchResponse",
    "TavilyClient",
    "WordPressClient",
]
