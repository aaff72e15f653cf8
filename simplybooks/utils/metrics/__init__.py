"""
Prometheus metrics definitions.

Metrics are grouped in submodules by subsystem (HTTP, database) and
re-exported here:

    from simplybooks.utils.metrics import http_requests_total
"""

from simplybooks.utils.metrics.database import (
    db_query_duration_seconds,
    db_slow_queries_total,
)
from simplybooks.utils.metrics.http import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)

__all__ = [
    "db_query_duration_seconds",
    "db_slow_queries_total",
    "http_request_duration_seconds",
    "http_requests_in_progress",
    "http_requests_total",
]
