"""Prometheus metrics for context construction and search outcomes."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


CONTEXT_BUILD_LATENCY = Histogram(
    "locale_index_of_context_build_seconds",
    "Time spent segmenting and filtering a haystack",
    ["segmenter"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)

SEARCH_COUNT = Counter(
    "locale_index_of_searches_total",
    "Needle searches run against a haystack context",
    ["outcome"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def record_search(found: bool) -> None:
    SEARCH_COUNT.labels(outcome="match" if found else "no_match").inc()


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
