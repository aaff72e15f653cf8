"""
Fixture data loaded once into a fresh database.

The same rows are inserted by the ``002`` Alembic migration; ``seed_initial_data``
exists for databases created without Alembic (``python cli.py seed``).
Both paths are idempotent: rows are keyed by their fixed IDs and only
missing ones are inserted.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import text
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.logging import logger
from simplybooks.models.author import Author
from simplybooks.models.book import Book

SEED_AUTHORS: list[dict[str, Any]] = [
    {
        "id": 1,
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "favorite": True,
        "image": "http://example.com/john.jpg",
        "uid": "googleUid1",
    },
    {
        "id": 2,
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@example.com",
        "favorite": False,
        "image": "http://example.com/jane.jpg",
        "uid": "googleUid2",
    },
]

SEED_BOOKS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Learning C#",
        "description": "A great book to get started with C# programming.",
        "image": "http://example.com/learning-csharp.jpg",
        "price": Decimal("0"),
        "sale": False,
        "uid": "googleUid1",
        "author_id": 1,
    },
    {
        "id": 2,
        "title": "Advanced C#",
        "description": "An in-depth guide to advanced C# concepts.",
        "image": "http://example.com/advanced-csharp.jpg",
        "price": Decimal("0"),
        "sale": False,
        "uid": "googleUid1",
        "author_id": 1,
    },
    {
        "id": 3,
        "title": "Mastering .NET",
        "description": "A comprehensive guide to .NET framework and libraries.",
        "image": "http://example.com/mastering-dotnet.jpg",
        "price": Decimal("0"),
        "sale": False,
        "uid": "googleUid2",
        "author_id": 2,
    },
]

# Moves a serial sequence past explicitly inserted IDs (PostgreSQL only)
SYNC_SEQUENCE_SQL = (
    "SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
    "COALESCE((SELECT MAX(id) FROM {table}), 1))"
)


async def seed_initial_data(session: AsyncSession) -> tuple[int, int]:
    """
    Insert the fixture authors and books that are not present yet.

    Args:
        session: Database session; the caller commits.

    Returns:
        Number of authors and books inserted.
    """
    existing_authors = set(
        (
            await session.exec(
                select(Author.id).where(
                    Author.id.in_([a["id"] for a in SEED_AUTHORS])  # type: ignore[union-attr]
                )
            )
        ).all()
    )
    new_authors = [
        Author(**data)
        for data in SEED_AUTHORS
        if data["id"] not in existing_authors
    ]
    session.add_all(new_authors)
    await session.flush()

    existing_books = set(
        (
            await session.exec(
                select(Book.id).where(
                    Book.id.in_([b["id"] for b in SEED_BOOKS])  # type: ignore[union-attr]
                )
            )
        ).all()
    )
    new_books = [
        Book(**data) for data in SEED_BOOKS if data["id"] not in existing_books
    ]
    session.add_all(new_books)
    await session.flush()

    conn = await session.connection()
    if conn.dialect.name == "postgresql":
        for table in ("authors", "books"):
            await conn.execute(text(SYNC_SEQUENCE_SQL.format(table=table)))

    logger.info(
        f"Seeded {len(new_authors)} authors and {len(new_books)} books"
    )
    return len(new_authors), len(new_books)
