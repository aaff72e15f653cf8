"""
Tests for AuthorRepository.

These tests verify that the repository correctly interacts with the
database session and provides the expected CRUD operations using mocks.
"""

from unittest.mock import AsyncMock, MagicMock, call

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.models.author import Author
from simplybooks.models.book import Book
from simplybooks.protocols import Repository
from simplybooks.repositories.author_repository import AuthorRepository


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.commit = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


def _exec_result(rows):
    result = MagicMock()
    result.all.return_value = rows
    return result


def test_repository_satisfies_protocol(mock_session):
    assert isinstance(AuthorRepository(mock_session), Repository)


class TestAuthorRepositoryCreate:
    """Tests for repository create operations."""

    @pytest.mark.asyncio
    async def test_create_author(self, mock_session):
        """Test creating an author."""
        repo = AuthorRepository(mock_session)
        author = Author(first_name="Ann", last_name="Lee", uid="u1")

        created = await repo.create(author)

        assert created == author
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)
        mock_session.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_author_error_rolls_back(self, mock_session):
        """Test that a failed flush is rolled back and re-raised."""
        mock_session.flush.side_effect = SQLAlchemyError("boom")
        repo = AuthorRepository(mock_session)

        with pytest.raises(SQLAlchemyError):
            await repo.create(Author(first_name="A", last_name="B", uid="u"))

        mock_session.rollback.assert_called_once()


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_session, author):
        mock_session.get.return_value = author
        repo = AuthorRepository(mock_session)

        result = await repo.get_by_id(1)

        assert result == author
        mock_session.get.assert_called_once_with(Author, 1)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_session):
        mock_session.get.return_value = None
        repo = AuthorRepository(mock_session)

        assert await repo.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_get_all(self, mock_session, author):
        mock_session.exec.return_value = _exec_result([author])
        repo = AuthorRepository(mock_session)

        result = await repo.get_all()

        assert result == [author]
        mock_session.exec.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_favorites_filters_uid_and_flag(self, mock_session, author):
        """Test that favorites are filtered by uid and favorite flag."""
        mock_session.exec.return_value = _exec_result([author])
        repo = AuthorRepository(mock_session)

        result = await repo.get_favorites("u1")

        assert result == [author]
        stmt = mock_session.exec.call_args.args[0]
        compiled = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "authors.uid = 'u1'" in compiled
        assert "authors.favorite" in compiled

    @pytest.mark.asyncio
    async def test_get_with_books(self, mock_session, author, book):
        mock_session.get.return_value = author
        mock_session.exec.return_value = _exec_result([book])
        repo = AuthorRepository(mock_session)

        found = await repo.get_with_books(1)

        assert found == (author, [book])

    @pytest.mark.asyncio
    async def test_get_with_books_missing_author(self, mock_session):
        mock_session.get.return_value = None
        repo = AuthorRepository(mock_session)

        assert await repo.get_with_books(1) is None
        mock_session.exec.assert_not_called()


class TestAuthorRepositoryUpdate:
    @pytest.mark.asyncio
    async def test_update_author(self, mock_session, author):
        repo = AuthorRepository(mock_session)
        author.first_name = "Jane"

        updated = await repo.update(author)

        assert updated.first_name == "Jane"
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()


class TestAuthorRepositoryDelete:
    """Tests for repository delete operations."""

    @pytest.mark.asyncio
    async def test_delete_with_books_order(self, mock_session, author):
        """Test that books are deleted and flushed before the author."""
        books = [
            Book(id=1, title="X", author_id=1),
            Book(id=2, title="Y", author_id=1),
        ]
        mock_session.exec.return_value = _exec_result(books)

        # Record delete and flush calls on one timeline
        manager = MagicMock()
        manager.attach_mock(mock_session.delete, "delete")
        manager.attach_mock(mock_session.flush, "flush")

        repo = AuthorRepository(mock_session)
        deleted = await repo.delete_with_books(author)

        assert deleted == 2
        assert manager.mock_calls == [
            call.delete(books[0]),
            call.delete(books[1]),
            call.flush(),
            call.delete(author),
            call.flush(),
        ]
        mock_session.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_with_books_error_rolls_back(self, mock_session, author):
        """Test that a failure leaves nothing half-deleted."""
        mock_session.exec.return_value = _exec_result([])
        mock_session.flush.side_effect = [None, SQLAlchemyError("boom")]
        repo = AuthorRepository(mock_session)

        with pytest.raises(SQLAlchemyError):
            await repo.delete_with_books(author)

        mock_session.rollback.assert_called_once()
