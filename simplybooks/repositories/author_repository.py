"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from simplybooks.repositories.author_repository import AuthorRepository
    from simplybooks.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        favorites = await repo.get_favorites("googleUid1")
        found = await repo.get_with_books(1)
    ```
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.logging import logger
from simplybooks.models.author import Author
from simplybooks.models.book import Book
from simplybooks.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Author-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def get_favorites(self, uid: str) -> list[Author]:
        """
        Get the authors owned by a user and marked as favorite.

        Args:
            uid: External user identifier.

        Returns:
            Matching authors, possibly empty.
        """
        return await self.get_all(uid=uid, favorite=True)

    async def get_with_books(
        self, author_id: int
    ) -> tuple[Author, list[Book]] | None:
        """
        Get an author together with the books referencing it.

        Books are looked up by ``author_id``; the author model holds no
        reference to them.

        Args:
            author_id: Author primary key.

        Returns:
            Tuple of the author and its books, None if the author is missing.
        """
        author = await self.get_by_id(author_id)
        if author is None:
            return None

        stmt = (
            select(Book)
            .where(Book.author_id == author_id)
            .order_by(Book.id)  # type: ignore[arg-type]
        )
        result = await self.session.exec(stmt)
        return author, list(result.all())

    async def delete_with_books(self, author: Author) -> int:
        """
        Delete an author and every book that references it.

        Books are removed first, then the author. Both steps are flushed in
        the current transaction, so they are committed (or rolled back)
        together.

        Args:
            author: The author to delete.

        Returns:
            Number of deleted books.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            result = await self.session.exec(
                select(Book).where(Book.author_id == author.id)
            )
            books = list(result.all())
            for book in books:
                await self.session.delete(book)
            await self.session.flush()

            await self.session.delete(author)
            await self.session.flush()
            return len(books)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting Author {author.id} with books: {e}")
            raise
