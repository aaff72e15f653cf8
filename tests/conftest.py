"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database, the HTTP client
and model instances.
"""

import logging
import os
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Database credentials are required by the settings
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")

from fastapi.testclient import TestClient  # noqa: E402

from simplybooks import app  # noqa: E402
from simplybooks.models import Author, Book  # noqa: E402
from simplybooks.storage.db import get_session  # noqa: E402

SQLITE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Silence application logs below CRITICAL for the test run."""
    logging.disable(logging.ERROR)
    yield
    logging.disable(logging.NOTSET)


def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_test_engine():
    """
    Create an in-memory SQLite engine shared by all sessions of a test.

    Returns:
        AsyncEngine: Engine with foreign key enforcement enabled.
    """
    test_engine = create_async_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(test_engine.sync_engine, "connect", _enable_foreign_keys)
    return test_engine


async def create_tables(test_engine) -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


@pytest.fixture
def client():
    """
    Provides a TestClient backed by an in-memory SQLite database.

    The request-scoped session dependency is replaced by one bound to the
    SQLite engine, with the same commit/rollback behaviour. The startup
    wait for PostgreSQL is patched out.

    Yields:
        TestClient: Client for the full application.
    """
    test_engine = create_test_engine()
    test_session = sessionmaker(
        test_engine, expire_on_commit=False, class_=AsyncSession
    )

    async def override_get_session():
        async with test_session() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session

    with patch("simplybooks.wait_and_init_db", new=AsyncMock()):
        with TestClient(app) as test_client:
            test_client.portal.call(create_tables, test_engine)
            yield test_client
            test_client.portal.call(test_engine.dispose)

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    """
    Provides a session on a fresh in-memory SQLite database.

    Yields:
        AsyncSession: Session with the schema created; nothing is seeded.
    """
    test_engine = create_test_engine()
    await create_tables(test_engine)
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        yield session
    await test_engine.dispose()


@pytest.fixture
def author():
    """
    Provides a persisted-looking Author instance.

    Returns:
        Author: Author with ID 1.
    """
    return Author(
        id=1,
        first_name="Ann",
        last_name="Lee",
        email="ann@example.com",
        favorite=True,
        image="http://example.com/ann.jpg",
        uid="u1",
    )


@pytest.fixture
def book():
    """
    Provides a persisted-looking Book instance written by `author`.

    Returns:
        Book: Book with ID 1.
    """
    return Book(
        id=1,
        title="X",
        description="First book",
        image="http://example.com/x.jpg",
        price=Decimal("12.50"),
        sale=True,
        uid="u1",
        author_id=1,
    )
