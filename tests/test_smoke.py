"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import git_summarizer

    assert git_summarizer.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from git_summarizer.cli import main

    assert callable(main)


def test_package_exports() -> None:
    from git_summarizer.protocol import JsonRpcRequest, StdioTransport, ToolCallResult
    from git_summarizer.server import Dispatcher
    from git_summarizer.tools import ToolExecutor, build_catalog
    from git_summarizer.vcs import GitAdapter, VCSAdapter, VCSError

    assert Dispatcher is not None
    assert JsonRpcRequest is not None
    assert StdioTransport is not None
    assert ToolCallResult is not None
    assert ToolExecutor is not None
    assert build_catalog is not None
    assert GitAdapter is not None
    assert VCSAdapter is not None
    assert VCSError is not None
