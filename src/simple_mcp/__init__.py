"""Simple MCP server: a minimal Model Context Protocol server over stdio."""

from __future__ import annotations

__version__ = "0.1.0"
