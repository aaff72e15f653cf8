"""Repository for Book entity with specialized query methods."""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.models.author import Author
from simplybooks.models.book import Book
from simplybooks.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """
    Repository for Book entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Book-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_on_sale(self, uid: str) -> list[Book]:
        """
        Get the books owned by a user that are on sale.

        Args:
            uid: External user identifier.

        Returns:
            Matching books, possibly empty.
        """
        return await self.get_all(uid=uid, sale=True)

    async def get_with_author(self, book_id: int) -> tuple[Book, Author] | None:
        """
        Get a book joined with its author.

        Args:
            book_id: Book primary key.

        Returns:
            Tuple of the book and its author, None if the book is missing.
        """
        stmt = (
            select(Book, Author)
            .join(Author, Author.id == Book.author_id)  # type: ignore[arg-type]
            .where(Book.id == book_id)
        )
        result = await self.session.exec(stmt)
        row = result.first()
        if row is None:
            return None
        book, author = row
        return book, author
