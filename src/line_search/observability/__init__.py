"""Observability module for structured logging and OpenTelemetry tracing."""

from line_search.observability.logging import JsonFormatter, configure_logging
from line_search.observability.tracing import create_span, current_trace_ids, get_tracer, init_tracing, maybe_span


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "current_trace_ids",
    "get_tracer",
    "init_tracing",
    "maybe_span",
]
