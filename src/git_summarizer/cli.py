"""git-summarizer CLI entrypoint."""

from __future__ import annotations

import click

from git_summarizer import __version__


@click.group()
@click.version_option(version=__version__, prog_name="git-summarizer")
def main() -> None:
    """git-summarizer: git staging and commit tools over MCP stdio."""


# Register subcommands
from git_summarizer.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
