"""Wire logging and tracing from Settings for hosts that have no setup of their own."""

from __future__ import annotations

from typing import TYPE_CHECKING

from locale_index_of.config import Settings
from locale_index_of.observability.logging import configure_logging
from locale_index_of.observability.tracing import init_tracing


if TYPE_CHECKING:
    from opentelemetry.sdk.trace import SpanProcessor, TracerProvider


def configure_observability(
    settings: Settings | None = None,
    *,
    span_processors: list[SpanProcessor] | None = None,
) -> TracerProvider:
    """Configure the root logger and tracer provider from ``LOCALE_INDEX_OF_*`` settings."""
    settings = settings or Settings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)
    return init_tracing(service_name=settings.service_name, span_processors=span_processors)
