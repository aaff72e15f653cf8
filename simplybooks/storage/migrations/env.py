"""
Alembic environment for the SimplyBooks schema.

The connection URL always comes from app_settings (DB_* environment
variables); the value in alembic.ini is a placeholder. Online migrations
run through asyncpg with a throwaway NullPool engine.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel

import simplybooks.models  # noqa: F401  registers authors and books
from simplybooks.settings import app_settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def _migrate(connection: Connection | None = None) -> None:
    if connection is None:
        # Offline mode renders SQL instead of executing it
        context.configure(
            url=app_settings.DATABASE_URL,
            target_metadata=target_metadata,
            literal_binds=True,
            dialect_opts={"paramstyle": "named"},
        )
    else:
        context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    migration_engine = create_async_engine(
        app_settings.DATABASE_URL, poolclass=pool.NullPool
    )
    try:
        async with migration_engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await migration_engine.dispose()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
