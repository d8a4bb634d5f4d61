"""GEO MCP Agent — generative engine optimization tools over the Model Context Protocol."""

from __future__ import annotations

__version__ = "1.0.0"
