# app/shared/observability.py
"""
OpenTelemetry tracing helpers.

Use cases call `get_tracer(__name__)` at import time and wrap their work in
spans. Until `setup_telemetry()` installs an SDK provider the API hands out
no-op tracers, so tests and CLI runs pay nothing for the instrumentation.
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

_CONFIGURED = False


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


def setup_telemetry(service_name: str, console_export: bool = False) -> None:
    """
    Installs a global tracer provider tagged with `service_name`.

    Idempotent: OpenTelemetry only accepts the first global provider, so
    later calls are ignored.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _CONFIGURED = True
