"""``git-summarizer tools``: inspect the advertised tool catalog."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from git_summarizer.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """Inspect the tool catalog."""


@tools.command("list")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file seeding commitFormat / extraConstraints.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def list_tools(config_path: str | None, as_json: bool) -> None:
    """Show the catalog exactly as ``tools/list`` would render it."""
    from git_summarizer.errors import ConfigError
    from git_summarizer.session import SessionConfig, load_session_config
    from git_summarizer.tools.registry import build_catalog

    try:
        config = load_session_config(Path(config_path)) if config_path else SessionConfig()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    catalog = build_catalog(config)
    if as_json:
        console.print_json(json.dumps({"tools": [tool.model_dump() for tool in catalog]}))
        return

    print_tools_table(catalog)
