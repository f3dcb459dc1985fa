"""Tracing for the dispatch loop and tool calls.

Spans are opened unconditionally; they cost nothing until `serve --telemetry`
or `serve --otlp-endpoint` installs an SDK tracer provider.  Stdout is the
protocol channel, so console spans go to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

ATTR_RPC_METHOD = "git_summarizer.rpc.method"
ATTR_RPC_NOTIFICATION = "git_summarizer.rpc.notification"
ATTR_TOOL_NAME = "git_summarizer.tool.name"
ATTR_TOOL_IS_ERROR = "git_summarizer.tool.is_error"

_INSTRUMENTATION_NAME = "git_summarizer"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*, a no-op until :func:`configure_telemetry` runs."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "git-summarizer",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider exporting to stderr and/or *otlp_endpoint*.

    Raises :class:`ImportError` naming the ``otel`` extra when the SDK or the
    OTLP exporter is missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install git-summarizer[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))

    if export_to_console:
        from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports]

        # One span per protocol message; export as each one ends.
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))

    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    trace.set_tracer_provider(provider)


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required for --otlp-endpoint. "
            "Install it with: pip install git-summarizer[otel]"
        )
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
