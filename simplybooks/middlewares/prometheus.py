"""Request metrics middleware."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

from simplybooks.utils.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)


UNMATCHED = "unmatched"


def _endpoint_label(request: Request) -> str:
    """
    Route template the request is dispatched to, e.g. ``/api/books/{book_id}``.

    Resolved before the request reaches the router so that every metric of
    a request shares one label. A method mismatch (405) still names the
    route; requests no route accepts are labelled "unmatched", so label
    cardinality stays bounded by the number of routes.
    """
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return route.path
        if match == Match.PARTIAL and partial is None:
            partial = route.path
    return partial or UNMATCHED


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Count, time and track in-flight HTTP requests.

    All three metrics are labelled with the route template. An exception
    raised by the app is counted as a 500.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        endpoint = _endpoint_label(request)
        in_flight = http_requests_in_progress.labels(
            method=method, endpoint=endpoint
        )
        in_flight.inc()

        status_code = 500
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = time.perf_counter() - started_at
            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(elapsed)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()
            in_flight.dec()
