"""Tracing for the GEO server: span names, attribute keys and exporter setup.

Modules create spans through :func:`get_tracer`; until
:func:`configure_telemetry` installs an SDK provider those spans are the
OpenTelemetry API's no-ops. ``geo serve --trace-console`` or
``--otlp-endpoint`` turns export on.

Spans in use: ``rpc.request`` (server), ``tool.dispatch`` (dispatcher),
``tavily.search``, ``wordpress.update``, ``browser.read`` and
``model.complete`` (clients).
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

ATTR_RPC_METHOD = "geo.rpc.method"
ATTR_RPC_ID = "geo.rpc.id"
ATTR_TOOL_NAME = "geo.tool.name"
ATTR_TOOL_OUTCOME = "geo.tool.outcome"
ATTR_UPSTREAM_SERVICE = "geo.upstream.service"
ATTR_UPSTREAM_STATUS = "geo.upstream.status"
ATTR_MODEL = "geo.model"

_INSTRUMENTATION_NAME = "geomcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*, falling back to the package-wide instrumentation name."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "geo-mcp-agent",
    export_to_console: bool = False,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider with the requested exporters.

    Stdout is reserved for protocol messages, so console spans are written
    to stderr.

    Raises:
        ImportError: ``opentelemetry-sdk`` (or, for OTLP, the exporter
            package) is not installed; both come with ``geo-mcp-agent[otel]``.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install geo-mcp-agent[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if export_to_console:
        _add_console_exporter(provider, SimpleSpanProcessor)
    if otlp_endpoint:
        _add_otlp_exporter(provider, BatchSpanProcessor, otlp_endpoint)
    trace.set_tracer_provider(provider)


def _add_console_exporter(provider: Any, processor_cls: Any) -> None:
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports]

    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))


def _add_otlp_exporter(provider: Any, processor_cls: Any, endpoint: str) -> None:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required for OTLP export. "
            "Install it with: pip install geo-mcp-agent[otel]"
        )
        raise ImportError(msg) from exc

    provider.add_span_processor(processor_cls(OTLPSpanExporter(endpoint=endpoint)))
