"""Translation of command errors into HTTP responses for the REST endpoints."""

from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from simplybooks.exceptions import AppException
from simplybooks.logging import logger

R = TypeVar("R")

DATABASE_ERROR_DETAIL = "Database error occurred"


def handle_http_errors(
    func: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    Wrap an endpoint so that errors raised by commands become HTTPException.

    ``AppException`` subclasses keep their status and message
    (``NotFoundError`` -> 404 ``{"detail": "Book with ID 3 not found."}``).
    ``SQLAlchemyError`` covers foreign key and NOT NULL violations as well
    as lost connections; it is logged with its traceback and answered with
    a bare 500. Anything else propagates.

    Place it below the route decorator so FastAPI sees the wrapped
    signature through ``functools.wraps``.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> R:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"{func.__name__} failed: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(status_code=ex.http_status, detail=ex.message)
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=DATABASE_ERROR_DETAIL,
            )

    return wrapper


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Answer 500 for database errors raised outside an endpoint body.

    The request commit runs in the session dependency after the endpoint
    returned, so ``handle_http_errors`` never sees its failures.
    """
    logger.error(
        f"Database error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": DATABASE_ERROR_DETAIL},
    )
