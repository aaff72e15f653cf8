# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from simplybooks.logging import logger
from simplybooks.middlewares.correlation_id import CorrelationIDMiddleware
from simplybooks.middlewares.prometheus import PrometheusMiddleware
from simplybooks.routing import collect_subrouters
from simplybooks.settings import app_settings
from simplybooks.storage.db import engine, wait_and_init_db
from simplybooks.utils.error_handler import database_exception_handler

__version__ = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown handler.

    Startup waits until the database accepts connections; the schema and
    seed data are applied separately with Alembic. Shutdown disposes of
    the connection pool.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Sets up the application with:
    - Lifespan handler waiting for the database and closing the pool
    - Routers collected by `simplybooks.routing.collect_subrouters()`
    - A 500 handler for database errors raised outside the endpoints
    - Middlewares: CORS, correlation IDs and Prometheus metrics
    """
    app = FastAPI(
        title="SimplyBooks API",
        description="Authors and their books",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → CORSMiddleware → PrometheusMiddleware
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
