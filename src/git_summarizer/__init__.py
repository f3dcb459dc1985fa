"""git-summarizer: an MCP stdio server exposing git staging and commit tools."""

from __future__ import annotations

__version__ = "0.1.0"
