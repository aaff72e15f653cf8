"""
Tests for Author commands.

These tests verify that commands correctly encapsulate business logic
and can be tested independently of the HTTP handlers.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from simplybooks.commands.author_commands import (
    CreateAuthorCommand,
    CreateAuthorInput,
    DeleteAuthorCommand,
    GetAuthorDetailsCommand,
    GetAuthorsCommand,
    GetFavoriteAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from simplybooks.exceptions import NotFoundError
from simplybooks.models.author import Author
from simplybooks.models.book import Book


class TestGetAuthorsCommand:
    """Tests for GetAuthorsCommand."""

    @pytest.mark.asyncio
    async def test_get_all_authors(self, author):
        """Test listing authors without filters."""
        mock_repo = AsyncMock()
        mock_repo.get_all.return_value = [
            author,
            Author(id=2, first_name="Bo", last_name="Ng", uid="u2"),
        ]

        result = await GetAuthorsCommand(mock_repo).execute()

        assert [a.id for a in result] == [1, 2]
        mock_repo.get_all.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_get_all_authors_empty(self):
        """Test that an empty store yields an empty list, not an error."""
        mock_repo = AsyncMock()
        mock_repo.get_all.return_value = []

        assert await GetAuthorsCommand(mock_repo).execute() == []


class TestCreateAuthorCommand:
    """Tests for CreateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_create_author(self):
        """Test creating a new author from camelCase input."""
        mock_repo = AsyncMock()
        mock_repo.create.side_effect = lambda a: a

        input_data = CreateAuthorInput.model_validate(
            {"firstName": "Ann", "lastName": "Lee", "uid": "u1"}
        )
        result = await CreateAuthorCommand(mock_repo).execute(input_data)

        assert result.first_name == "Ann"
        assert result.last_name == "Lee"
        assert result.uid == "u1"
        assert result.favorite is False
        assert result.email is None
        mock_repo.create.assert_called_once()

    def test_create_input_ignores_id(self):
        """Test that a client supplied ID never reaches the model."""
        input_data = CreateAuthorInput.model_validate(
            {"id": 99, "firstName": "Ann", "lastName": "Lee", "uid": "u1"}
        )

        assert "id" not in input_data.model_dump()

    def test_create_input_requires_names(self):
        """Test that empty names are rejected."""
        with pytest.raises(ValueError):
            CreateAuthorInput(first_name="", last_name="Lee", uid="u1")


class TestUpdateAuthorCommand:
    """Tests for UpdateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_update_author_overwrites_fields(self, author):
        """Test that every field is replaced, omitted ones included."""
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = author
        mock_repo.update.side_effect = lambda a: a

        input_data = UpdateAuthorInput(
            id=1, first_name="Jane", last_name="Doe", uid="u9"
        )
        result = await UpdateAuthorCommand(mock_repo).execute(input_data)

        assert result.first_name == "Jane"
        assert result.last_name == "Doe"
        assert result.uid == "u9"
        assert result.email is None
        assert result.image is None
        assert result.favorite is False
        mock_repo.get_by_id.assert_called_once_with(1)
        mock_repo.update.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_update_author_not_found(self):
        """Test updating an author that does not exist."""
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = None

        input_data = UpdateAuthorInput(
            id=999, first_name="Jane", last_name="Doe", uid="u1"
        )

        with pytest.raises(NotFoundError) as exc_info:
            await UpdateAuthorCommand(mock_repo).execute(input_data)

        assert exc_info.value.message == "Author with ID 999 not found."
        assert exc_info.value.http_status == 404
        mock_repo.update.assert_not_called()


class TestGetFavoriteAuthorsCommand:
    """Tests for GetFavoriteAuthorsCommand."""

    @pytest.mark.asyncio
    async def test_get_favorites(self, author):
        mock_repo = AsyncMock()
        mock_repo.get_favorites.return_value = [author]

        result = await GetFavoriteAuthorsCommand(mock_repo).execute("u1")

        assert result == [author]
        mock_repo.get_favorites.assert_called_once_with("u1")

    @pytest.mark.asyncio
    async def test_no_favorites_is_not_found(self):
        """Test that an empty favorites list is reported as NotFoundError."""
        mock_repo = AsyncMock()
        mock_repo.get_favorites.return_value = []

        with pytest.raises(NotFoundError, match="No favorite authors found."):
            await GetFavoriteAuthorsCommand(mock_repo).execute("nope")


class TestGetAuthorDetailsCommand:
    """Tests for GetAuthorDetailsCommand."""

    @pytest.mark.asyncio
    async def test_author_details_with_books(self, author, book):
        """Test that the detail carries author fields and book summaries."""
        second = Book(
            id=2,
            title="Y",
            price=Decimal("0"),
            sale=False,
            uid="u1",
            author_id=1,
        )
        mock_repo = AsyncMock()
        mock_repo.get_with_books.return_value = (author, [book, second])

        result = await GetAuthorDetailsCommand(mock_repo).execute(1)

        assert result.id == 1
        assert result.first_name == "Ann"
        assert result.favorite is True
        assert [b.title for b in result.books] == ["X", "Y"]
        assert result.books[0].price == Decimal("12.50")
        assert result.books[0].sale is True

    @pytest.mark.asyncio
    async def test_author_details_without_books(self, author):
        mock_repo = AsyncMock()
        mock_repo.get_with_books.return_value = (author, [])

        result = await GetAuthorDetailsCommand(mock_repo).execute(1)

        assert result.books == []

    @pytest.mark.asyncio
    async def test_author_details_not_found(self):
        mock_repo = AsyncMock()
        mock_repo.get_with_books.return_value = None

        with pytest.raises(NotFoundError, match="Author with ID 5 not found."):
            await GetAuthorDetailsCommand(mock_repo).execute(5)


class TestDeleteAuthorCommand:
    """Tests for DeleteAuthorCommand."""

    @pytest.mark.asyncio
    async def test_delete_author_with_books(self, author):
        """Test deleting an existing author removes its books too."""
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = author
        mock_repo.delete_with_books.return_value = 2

        message = await DeleteAuthorCommand(mock_repo).execute(1)

        assert message == "Author with ID 1 and their books have been deleted."
        mock_repo.delete_with_books.assert_called_once_with(author)
        mock_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_author_not_found(self):
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await DeleteAuthorCommand(mock_repo).execute(999)

        mock_repo.delete_with_books.assert_not_called()
