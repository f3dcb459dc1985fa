"""Server layer: the stdio JSON-RPC dispatch loop."""

from git_summarizer.server.dispatcher import Dispatcher

__all__ = ["Dispatcher"]
