"""
Prometheus metrics for system monitoring.
"""

import os

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    multiprocess,
)

from skillswapper.config.logging import get_logger

logger = get_logger(__name__)


def _create_registry() -> CollectorRegistry:
    """Create the registry, aggregating worker processes when configured."""
    registry = CollectorRegistry()
    multiproc_dir = os.getenv("PROMETHEUS_MULTIPROC_DIR")

    if multiproc_dir and os.path.isdir(multiproc_dir) and os.access(multiproc_dir, os.W_OK):
        multiprocess.MultiProcessCollector(registry)
        logger.info("Prometheus multiprocess collector enabled", path=multiproc_dir)

    return registry


registry = _create_registry()


def get_registry() -> CollectorRegistry:
    """Get the metrics registry."""
    return registry


def _get_metric(metric_class, *args, **kwargs):
    return metric_class(*args, **kwargs, registry=get_registry())


# API metrics
API_REQUESTS = _get_metric(
    Counter,
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
)

API_REQUEST_DURATION = _get_metric(
    Histogram,
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

# Matching metrics
MATCH_SEARCH_RESULTS = _get_metric(
    Histogram,
    "match_search_results",
    "Number of reciprocal candidates found per search",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100, 250],
)

# Connection workflow metrics
CONNECTION_PROPOSALS = _get_metric(
    Counter,
    "connection_proposals_total",
    "Total number of connection proposals",
    ["outcome"],
)

CONNECTION_TRANSITIONS = _get_metric(
    Counter,
    "connection_transitions_total",
    "Total number of connection status transitions",
    ["status", "outcome"],
)

# Notification and email metrics
NOTIFICATIONS_CREATED = _get_metric(
    Counter,
    "notifications_created_total",
    "Total number of notifications created",
    ["type"],
)

EMAILS_SENT = _get_metric(
    Counter,
    "emails_sent_total",
    "Total number of transactional emails attempted",
    ["template", "status"],
)

# Error metrics
ERRORS_TOTAL = _get_metric(
    Counter,
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
)

RATE_LIMIT_HITS = _get_metric(
    Counter,
    "rate_limit_hits_total",
    "Total number of rate limit hits",
    ["scope"],
)


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record an API request and its duration."""
    API_REQUESTS.labels(method=method, endpoint=endpoint, status_code=str(status_code)).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def record_match_search(result_count: int):
    """Record how many candidates a search produced."""
    MATCH_SEARCH_RESULTS.observe(result_count)


def record_connection_proposal(outcome: str):
    """Record a proposal outcome (created, refreshed or a failure kind)."""
    CONNECTION_PROPOSALS.labels(outcome=outcome).inc()


def record_connection_transition(status: str, outcome: str):
    """Record an accept/decline attempt."""
    CONNECTION_TRANSITIONS.labels(status=status, outcome=outcome).inc()


def record_notification(notification_type: str):
    """Record notification creation."""
    NOTIFICATIONS_CREATED.labels(type=notification_type).inc()


def record_email(template: str, status: str):
    """Record an email delivery attempt."""
    EMAILS_SENT.labels(template=template, status=status).inc()


def record_error(error_type: str, component: str):
    """Record an error."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def record_rate_limit_hit(scope: str):
    """Record a rejected request."""
    RATE_LIMIT_HITS.labels(scope=scope).inc()


def get_metrics() -> bytes:
    """Get metrics in Prometheus exposition format."""
    return generate_latest(get_registry())


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
