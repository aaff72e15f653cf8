"""
Commands for Author business operations.

Example:
    ```python
    from simplybooks.commands.author_commands import (
        GetFavoriteAuthorsCommand,
    )
    from simplybooks.repositories.author_repository import AuthorRepository

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await GetFavoriteAuthorsCommand(repo).execute("googleUid1")
    ```
"""

from pydantic import Field

from simplybooks.commands.base import BaseCommand
from simplybooks.exceptions import NotFoundError
from simplybooks.models.author import Author
from simplybooks.protocols import Repository
from simplybooks.repositories.author_repository import AuthorRepository
from simplybooks.schemas.author import AuthorBookSummary, AuthorDetail
from simplybooks.schemas.base import CamelModel


# ============================================================================
# Input/Output Models
# ============================================================================


class CreateAuthorInput(CamelModel):
    """Input model for creating an author. Any ``id`` in the payload is ignored."""

    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str | None = Field(default=None, description="Contact email")
    favorite: bool = Field(default=False, description="Favorite flag")
    image: str | None = Field(default=None, description="Portrait URL")
    uid: str = Field(..., min_length=1, description="Owning user identifier")


class UpdateAuthorInput(CreateAuthorInput):
    """
    Input model for updating an author.

    Every field replaces the stored value, omitted optional fields
    included (they are reset to their defaults).
    """

    id: int = Field(..., description="Author ID to update")


# ============================================================================
# Commands
# ============================================================================


class GetAuthorsCommand(BaseCommand[None, list[Author]]):
    """Command to list every author."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Author]:
        return await self.repository.get_all()


class CreateAuthorCommand(BaseCommand[CreateAuthorInput, Author]):
    """Command to create a new author."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: CreateAuthorInput) -> Author:
        """
        Execute command to create author.

        Args:
            input_data: Author data to create.

        Returns:
            Created author with generated ID.
        """
        author = Author(**input_data.model_dump())
        return await self.repository.create(author)


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, Author]):
    """
    Command to overwrite an existing author.

    All editable fields are replaced; there is no merge with the stored
    values and no concurrency check (last write wins).
    """

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Author:
        """
        Execute command to update author.

        Args:
            input_data: Author ID and new data.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If author not found.
        """
        author = await self.repository.get_by_id(input_data.id)
        if not author:
            raise NotFoundError(f"Author with ID {input_data.id} not found.")

        author.first_name = input_data.first_name
        author.last_name = input_data.last_name
        author.email = input_data.email
        author.favorite = input_data.favorite
        author.image = input_data.image
        author.uid = input_data.uid

        return await self.repository.update(author)


class GetFavoriteAuthorsCommand(BaseCommand[str, list[Author]]):
    """
    Command to get the favorite authors of a user.

    An empty result is reported as NotFoundError rather than an empty list.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, uid: str) -> list[Author]:
        """
        Execute command to get favorite authors.

        Args:
            uid: External user identifier.

        Returns:
            Authors of the user with the favorite flag set.

        Raises:
            NotFoundError: If the user has no favorite authors.
        """
        authors = await self.repository.get_favorites(uid)
        if not authors:
            raise NotFoundError("No favorite authors found.")
        return authors


class GetAuthorDetailsCommand(BaseCommand[int, AuthorDetail]):
    """Command to get an author with summaries of its books."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: int) -> AuthorDetail:
        """
        Execute command to get author details.

        Args:
            author_id: ID of the author.

        Returns:
            Author fields plus the list of its books.

        Raises:
            NotFoundError: If author not found.
        """
        found = await self.repository.get_with_books(author_id)
        if found is None:
            raise NotFoundError(f"Author with ID {author_id} not found.")

        author, books = found
        return AuthorDetail(
            id=author.id,
            first_name=author.first_name,
            last_name=author.last_name,
            email=author.email,
            favorite=author.favorite,
            image=author.image,
            books=[AuthorBookSummary.model_validate(book) for book in books],
        )


class DeleteAuthorCommand(BaseCommand[int, str]):
    """
    Command to delete an author and all of its books.

    The books and the author are removed in a single transaction.
    """

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: int) -> str:
        """
        Execute command to delete author.

        Args:
            author_id: ID of author to delete.

        Returns:
            Confirmation message.

        Raises:
            NotFoundError: If author not found.
        """
        author = await self.repository.get_by_id(author_id)
        if not author:
            raise NotFoundError(f"Author with ID {author_id} not found.")

        await self.repository.delete_with_books(author)
        return f"Author with ID {author_id} and their books have been deleted."
