"""Tool layer: catalog rendering and tool execution."""

from git_summarizer.tools.executor import ToolExecutor
from git_summarizer.tools.registry import build_catalog, render_staged_diff_description

__all__ = [
    "ToolExecutor",
    "build_catalog",
    "render_staged_diff_description",
]
