"""
Generic data access for SQLModel tables.

Repositories never commit. They add, flush and refresh inside the session
they were given; the request-scoped session from
simplybooks.storage.db.get_session commits once the endpoint has returned,
so several repository calls made by one request form a single transaction.

Subclasses bind the model and add their own queries::

    class BookRepository(BaseRepository[Book]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Book)

        async def get_on_sale(self, uid: str) -> list[Book]:
            return await self.get_all(uid=uid, sale=True)
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    CRUD operations over one table.

    Attributes:
        session: Session shared with the rest of the request.
        model: SQLModel table class handled by the repository.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    @property
    def _name(self) -> str:
        return self.model.__name__

    async def get_by_id(self, id: int) -> T | None:
        """Look up a row by primary key; None when it does not exist."""
        return await self.session.get(self.model, id)

    async def get_all(self, **filters: Any) -> list[T]:
        """
        List rows matching every given column value, ordered by ID.

        Filters whose value is None are ignored, so optional query
        parameters can be passed through unchanged::

            await repo.get_all(uid="googleUid1", favorite=True)

        Raises:
            SQLAlchemyError: If the query fails.
        """
        stmt = select(self.model)
        for column, value in filters.items():
            if value is None:
                continue
            stmt = stmt.where(getattr(self.model, column) == value)
        stmt = stmt.order_by(self.model.id)  # type: ignore[attr-defined]

        try:
            result = await self.session.exec(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Error listing {self._name} rows: {e}")
            raise
        return list(result.all())

    async def _save(self, entity: T, action: str) -> T:
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error {action} {self._name}: {e}")
            raise
        return entity

    async def create(self, entity: T) -> T:
        """
        Insert a new row and load database generated values (the ID).

        Raises:
            SQLAlchemyError: On constraint violations, e.g. a book whose
                ``author_id`` matches no author. The session is rolled back.
        """
        return await self._save(entity, "creating")

    async def update(self, entity: T) -> T:
        """
        Write the changed attributes of a loaded row.

        Raises:
            SQLAlchemyError: On constraint violations. The session is
                rolled back.
        """
        return await self._save(entity, "updating")

    async def delete(self, entity: T) -> None:
        """
        Delete a loaded row.

        Raises:
            SQLAlchemyError: If the delete fails. The session is rolled back.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self._name}: {e}")
            raise
