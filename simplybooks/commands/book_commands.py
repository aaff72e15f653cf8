"""Commands for Book business operations."""

from decimal import Decimal

from pydantic import Field

from simplybooks.commands.base import BaseCommand
from simplybooks.exceptions import NotFoundError
from simplybooks.models.book import Book
from simplybooks.protocols import Repository
from simplybooks.repositories.book_repository import BookRepository
from simplybooks.schemas.author import AuthorSummary
from simplybooks.schemas.base import CamelModel
from simplybooks.schemas.book import BookDetail


# ============================================================================
# Input/Output Models
# ============================================================================


class CreateBookInput(CamelModel):
    """Input model for creating a book. Any ``id`` in the payload is ignored."""

    title: str = Field(..., min_length=1, description="Book title")
    description: str | None = Field(default=None, description="Description")
    image: str | None = Field(default=None, description="Cover URL")
    price: Decimal = Field(default=Decimal("0"), description="Price")
    sale: bool = Field(default=False, description="On sale flag")
    uid: str | None = Field(default=None, description="Owning user identifier")
    author_id: int = Field(..., description="ID of an existing author")


class UpdateBookInput(CreateBookInput):
    """
    Input model for updating a book.

    Every editable field replaces the stored value; ``uid`` is not editable.
    """

    id: int = Field(..., description="Book ID to update")


# ============================================================================
# Commands
# ============================================================================


class GetBooksCommand(BaseCommand[None, list[Book]]):
    """Command to list every book."""

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Book]:
        return await self.repository.get_all()


class CreateBookCommand(BaseCommand[CreateBookInput, Book]):
    """
    Command to create a new book.

    The author reference is checked by the database foreign key only; an
    unknown ``author_id`` surfaces as a SQLAlchemy IntegrityError.
    """

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, input_data: CreateBookInput) -> Book:
        book = Book(**input_data.model_dump())
        return await self.repository.create(book)


class UpdateBookCommand(BaseCommand[UpdateBookInput, Book]):
    """Command to overwrite an existing book."""

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, input_data: UpdateBookInput) -> Book:
        """
        Execute command to update book.

        Args:
            input_data: Book ID and new data.

        Returns:
            Updated book.

        Raises:
            NotFoundError: If book not found.
        """
        book = await self.repository.get_by_id(input_data.id)
        if not book:
            raise NotFoundError(f"Book with ID {input_data.id} not found.")

        book.title = input_data.title
        book.description = input_data.description
        book.image = input_data.image
        book.price = input_data.price
        book.sale = input_data.sale
        book.author_id = input_data.author_id

        return await self.repository.update(book)


class GetBooksOnSaleCommand(BaseCommand[str, list[Book]]):
    """
    Command to get the books of a user that are on sale.

    An empty result is reported as NotFoundError rather than an empty list.
    """

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def execute(self, uid: str) -> list[Book]:
        books = await self.repository.get_on_sale(uid)
        if not books:
            raise NotFoundError("No books on sale found for this user.")
        return books


class GetBookDetailsCommand(BaseCommand[int, BookDetail]):
    """Command to get a book with a summary of its author."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def execute(self, book_id: int) -> BookDetail:
        """
        Execute command to get book details.

        Args:
            book_id: ID of the book.

        Returns:
            Book fields plus the embedded author.

        Raises:
            NotFoundError: If book not found.
        """
        found = await self.repository.get_with_author(book_id)
        if found is None:
            raise NotFoundError(f"Book with ID {book_id} not found.")

        book, author = found
        return BookDetail(
            id=book.id,
            title=book.title,
            description=book.description,
            price=book.price,
            sale=book.sale,
            author=AuthorSummary.model_validate(author),
        )


class DeleteBookCommand(BaseCommand[int, str]):
    """Command to delete a single book."""

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, book_id: int) -> str:
        """
        Execute command to delete book.

        Args:
            book_id: ID of book to delete.

        Returns:
            Confirmation message.

        Raises:
            NotFoundError: If book not found.
        """
        book = await self.repository.get_by_id(book_id)
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found.")

        await self.repository.delete(book)
        return f"Book with ID {book_id} has been deleted."
