"""Liveness and database readiness probe."""

from typing import Literal

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from simplybooks.logging import logger
from simplybooks.storage.db import engine

router = APIRouter(tags=["health"])

Status = Literal["healthy", "unhealthy"]


class HealthResponse(BaseModel):
    status: Status
    database: Status


async def _database_status() -> Status:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.error(f"Health check could not reach the database: {e}")
        return "unhealthy"
    return "healthy"


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(response: Response) -> HealthResponse:
    """
    Report whether the service can talk to its database.

    The database is the only dependency, so the overall status mirrors it.
    An unreachable database answers 503.
    """
    database = await _database_status()
    if database == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status=database, database=database)
