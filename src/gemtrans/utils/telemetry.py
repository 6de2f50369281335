"""OpenTelemetry tracing helpers for gemtrans.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from gemtrans.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("gemtrans.encode") as span:
        span.set_attribute(ATTR_MESSAGE_COUNT, 3)

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install gemtrans[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_MODEL = "gemtrans.model"
ATTR_MESSAGE_COUNT = "gemtrans.messages"
ATTR_CONTENT_COUNT = "gemtrans.contents"
ATTR_TOOL_COUNT = "gemtrans.tools"
ATTR_TARGET = "gemtrans.decode.target"
ATTR_CANDIDATE_COUNT = "gemtrans.decode.candidates"
ATTR_ERROR_COUNT = "gemtrans.decode.errors"

_INSTRUMENTATION_NAME = "gemtrans"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "gemtrans",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> Any:
    """Install an SDK tracer provider (requires ``gemtrans[otel]``).

    Console export uses a synchronous processor so CLI runs flush before
    exit; OTLP export is batched. Returns the installed provider.

    Raises
    ------
    ImportError
        If ``opentelemetry-sdk`` (or, with *otlp_endpoint*, the OTLP
        exporter) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install gemtrans[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)  # pyright: ignore[reportUnknownMemberType]

    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]
    return provider


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        except ImportError as exc:
            msg = (
                "opentelemetry-exporter-otlp is required for OTLP export. "
                "Install it with: pip install gemtrans[otel]"
            )
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    return processors
