"""Per-request correlation IDs for grouping log lines."""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from simplybooks.constants import CORRELATION_ID_LENGTH

HEADER = "X-Correlation-ID"

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Correlation ID of the request being handled, "" outside a request."""
    return correlation_id.get()


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Attach a short correlation ID to every request.

    A caller-supplied ``X-Correlation-ID`` is reused (cut to
    CORRELATION_ID_LENGTH characters), otherwise one is derived from a
    random UUID. The ID is visible to log formatters through the context
    variable, stored on ``request.state.request_id`` and echoed in the
    response header.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        cid = (request.headers.get(HEADER) or uuid.uuid4().hex)[
            :CORRELATION_ID_LENGTH
        ]
        request.state.request_id = cid

        token = correlation_id.set(cid)
        try:
            response = await call_next(request)
        finally:
            correlation_id.reset(token)

        response.headers[HEADER] = cid
        return response
