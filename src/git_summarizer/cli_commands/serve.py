"""``git-summarizer serve``: run the MCP stdio server."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from git_summarizer.cli_commands._output import configure_logging, err_console


@click.command()
@click.option(
    "--repo",
    "-C",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Repository the tools operate on.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file seeding commitFormat / extraConstraints.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every message at DEBUG level.")
@click.option("--telemetry", is_flag=True, help="Export trace spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export trace spans via OTLP/gRPC.")
def serve(
    repo: str,
    config_path: str | None,
    verbose: bool,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve the git tools over stdin/stdout until end of input."""
    from git_summarizer.errors import ConfigError
    from git_summarizer.protocol.transport import StdioTransport
    from git_summarizer.server.dispatcher import Dispatcher
    from git_summarizer.session import SessionState, load_session_config
    from git_summarizer.vcs.git_adapter import GitAdapter

    configure_logging(verbose=verbose)

    try:
        config = load_session_config(Path(config_path)) if config_path else None
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    if telemetry or otlp_endpoint:
        from git_summarizer.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    dispatcher = Dispatcher(GitAdapter(repo), session=SessionState(config))
    transport = StdioTransport(
        click.get_text_stream("stdin", encoding="utf-8", errors="replace"),
        click.get_text_stream("stdout", encoding="utf-8", errors="replace"),
    )
    try:
        dispatcher.serve(transport)
    finally:
        transport.close()
