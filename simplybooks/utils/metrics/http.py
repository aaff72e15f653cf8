"""Request metrics fed by simplybooks.middlewares.prometheus."""

from simplybooks.utils.metrics._helpers import counter, gauge, histogram

# "endpoint" is the route template (/api/books/{book_id}), not the raw path
http_requests_total = counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

http_requests_in_progress = gauge(
    "http_requests_in_progress",
    "HTTP requests being handled right now",
    ["method", "endpoint"],
)
