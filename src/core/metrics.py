"""Prometheus metrics for the credit-card account service.

Query Metrics:
- credit_card_account_query_total: Queries by operation and outcome
- credit_card_account_query_latency_seconds: Query latency by operation
- credit_card_transaction_history_size: Items returned by history queries

HTTP Metrics:
- credit_card_http_requests_total: HTTP requests by endpoint/status
- credit_card_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from src.core.config import settings
from src.domain.exceptions import AccountNotFoundException


# =============================================================================
# Query Metrics
# =============================================================================

account_query_total = Counter(
    "credit_card_account_query_total",
    "Total number of account queries",
    ["operation", "outcome"],  # outcome: success, not_found, error
)

account_query_latency = Histogram(
    "credit_card_account_query_latency_seconds",
    "Account query latency in seconds",
    ["operation"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

transaction_history_size = Histogram(
    "credit_card_transaction_history_size",
    "Number of transactions returned by history queries",
    buckets=[0, 1, 2, 5, 10],
)


# =============================================================================
# HTTP Metrics
# =============================================================================

http_requests_total = Counter(
    "credit_card_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_card_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_account_query(operation: str) -> Generator[None, None, None]:
    """Context manager recording latency and outcome of an account query."""
    start = time.perf_counter()
    outcome = "success"
    try:
        yield
    except AccountNotFoundException:
        outcome = "not_found"
        raise
    except Exception:
        outcome = "error"
        raise
    finally:
        if settings.metrics_enabled:
            duration = time.perf_counter() - start
            account_query_latency.labels(operation=operation).observe(duration)
            account_query_total.labels(operation=operation, outcome=outcome).inc()


def record_history_size(size: int) -> None:
    """Record how many transactions a history query returned."""
    if settings.metrics_enabled:
        transaction_history_size.observe(size)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    if not settings.metrics_enabled:
        return
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
