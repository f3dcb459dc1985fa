"""Shared CLI output formatters and logging setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from git_summarizer.protocol.models import ToolDef

console = Console()
# Stdout is the protocol channel while serving; diagnostics go here.
err_console = Console(stderr=True)


def configure_logging(*, verbose: bool = False) -> None:
    """Route all log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )
    # GitPython logs every spawned command at DEBUG.
    logging.getLogger("git").setLevel(logging.INFO)


def print_tools_table(tools: list[ToolDef]) -> None:
    """Pretty-print the tool catalog as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Description")

    for tool in tools:
        properties = tool.input_schema.get("properties", {})
        table.add_row(
            tool.name,
            ", ".join(properties) or "-",
            _truncate(tool.description.splitlines()[0] if tool.description else ""),
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
