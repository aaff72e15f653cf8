"""Exposes the process metrics registry for Prometheus scraping."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_class=Response, summary="Prometheus metrics")
async def metrics() -> Response:
    """
    Render every registered metric in the text exposition format.

    Covers the HTTP request metrics and the SQL timing metrics, e.g.::

        http_requests_total{method="DELETE",endpoint="/api/authors/{author_id}",status_code="200"} 3.0
        db_slow_queries_total{operation="select"} 1.0
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
