"""OpenTelemetry bootstrap for the client."""

from __future__ import annotations

import os

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

_TRACING_CONFIGURED = False


def configure_tracing(*, service_name: str) -> bool:
    """Install an OTLP tracer provider when an endpoint is configured.

    Returns whether a provider was installed. Without an OTLP endpoint this is a
    no-op; an explicit exporter setting without an endpoint fails loudly.
    """

    global _TRACING_CONFIGURED
    if _TRACING_CONFIGURED:
        return False

    traces_exporter = (os.getenv("OTEL_TRACES_EXPORTER") or "").strip().lower()
    if traces_exporter == "none":
        _TRACING_CONFIGURED = True
        return False

    otlp_endpoint = (
        os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT") or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    )
    if not otlp_endpoint:
        if traces_exporter:
            raise RuntimeError(
                "Tracing enabled but OTLP endpoint missing: set OTEL_EXPORTER_OTLP_ENDPOINT "
                "(or OTEL_EXPORTER_OTLP_TRACES_ENDPOINT), or set OTEL_TRACES_EXPORTER=none."
            )
        _TRACING_CONFIGURED = True
        return False

    resolved_service_name = (os.getenv("OTEL_SERVICE_NAME") or service_name).strip()
    if not resolved_service_name:
        raise RuntimeError("service_name must be a non-empty string")

    provider = TracerProvider(resource=Resource.create({"service.name": resolved_service_name}))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    trace.set_tracer_provider(provider)

    _TRACING_CONFIGURED = True
    return True


def reset_tracing_state() -> None:
    """Allow ``configure_tracing`` to run again (tests only)."""
    global _TRACING_CONFIGURED
    _TRACING_CONFIGURED = False


__all__ = ["configure_tracing", "reset_tracing_state"]
