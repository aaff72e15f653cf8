"""
Database engine, session factory and the request-scoped session.

The schema is owned by Alembic (``alembic upgrade head``); nothing here
creates tables.
"""

import asyncio
from collections.abc import AsyncIterator

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.exceptions import DatabaseError
from simplybooks.logging import logger
from simplybooks.settings import app_settings
from simplybooks.utils.query_monitor import enable_query_monitoring

enable_query_monitoring()

engine: AsyncEngine = create_async_engine(
    app_settings.DATABASE_URL,
    pool_size=app_settings.DB_POOL_SIZE,
    max_overflow=app_settings.DB_MAX_OVERFLOW,
    pool_recycle=app_settings.DB_POOL_RECYCLE,
    pool_pre_ping=app_settings.DB_POOL_PRE_PING,
)

# Objects stay usable after commit; responses are built from them
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Block application startup until PostgreSQL accepts connections.

    Args:
        retry_interval: Seconds between attempts, DB_INIT_RETRY_INTERVAL
            when omitted.
        max_retries: Number of attempts, DB_INIT_MAX_RETRIES when omitted.

    Raises:
        DatabaseError: No attempt succeeded.
    """
    interval = (
        app_settings.DB_INIT_RETRY_INTERVAL
        if retry_interval is None
        else retry_interval
    )
    attempts = (
        app_settings.DB_INIT_MAX_RETRIES if max_retries is None else max_retries
    )

    for attempt in range(1, attempts + 1):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
        except (OperationalError, OSError) as e:
            logger.warning(
                f"Database unavailable ({e.__class__.__name__}), "
                f"attempt {attempt}/{attempts}, next try in {interval}s"
            )
            await asyncio.sleep(interval)
        else:
            logger.info("Database connection established")
            return

    logger.error(f"Database still unavailable after {attempts} attempts")
    raise DatabaseError("Database connection could not be established.")


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one session per request.

    Repositories only flush; the session is committed here after the
    endpoint returns and before the response goes out (SessionDep uses
    function scope). A database error escaping the endpoint rolls the
    whole request back, so a half-finished author delete never persists.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Request transaction rolled back: {ex}")
            raise
