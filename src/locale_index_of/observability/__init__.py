"""Observability module: structured logging, OpenTelemetry spans, Prometheus metrics."""

from locale_index_of.observability.context import get_trace_context, set_trace_context, trace_context
from locale_index_of.observability.logging import JsonFormatter, configure_logging
from locale_index_of.observability.metrics import (
    CONTEXT_BUILD_LATENCY,
    SEARCH_COUNT,
    get_metrics,
    get_metrics_content_type,
    record_search,
    track_latency,
)
from locale_index_of.observability.setup import configure_observability
from locale_index_of.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "CONTEXT_BUILD_LATENCY",
    "SEARCH_COUNT",
    "JsonFormatter",
    "configure_logging",
    "configure_observability",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "record_search",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
