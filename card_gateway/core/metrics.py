"""Prometheus metrics for the Card Gateway service.

Card Metrics:
- card_gateway_card_operations_total: Card operations by outcome
- card_gateway_store_latency_seconds: Store round-trip latency per operation

HTTP Metrics:
- card_gateway_http_requests_total: HTTP requests by endpoint/status
- card_gateway_http_request_latency_seconds: HTTP request latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Card Metrics
# =============================================================================

card_operations_total = Counter(
    "card_gateway_card_operations_total",
    "Total number of card operations",
    ["operation", "outcome"],  # outcome: success, not_found, invalid, error
)

store_latency = Histogram(
    "card_gateway_store_latency_seconds",
    "Card store round-trip latency in seconds",
    ["operation"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# HTTP Metrics
# =============================================================================

http_requests_total = Counter(
    "card_gateway_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "card_gateway_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_card_operation(operation: str, outcome: str) -> None:
    """Record the outcome of a card operation."""
    card_operations_total.labels(operation=operation, outcome=outcome).inc()


@contextmanager
def track_store_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track store latency for one operation."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        store_latency.labels(operation=operation).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
