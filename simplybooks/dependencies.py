"""
FastAPI dependencies: the request session and the repositories over it.

Both repositories of a request share the one session yielded by
get_session, so everything a request changes is committed together.
Tests swap the database by overriding get_session::

    app.dependency_overrides[get_session] = sqlite_session
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from simplybooks.repositories.author_repository import AuthorRepository
from simplybooks.repositories.book_repository import BookRepository
from simplybooks.storage.db import get_session

# Function scope: the commit finishes before the response is sent
SessionDep = Annotated[AsyncSession, Depends(get_session, scope="function")]


def get_author_repository(session: SessionDep) -> AuthorRepository:
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    return BookRepository(session)


AuthorRepoDep = Annotated[
    AuthorRepository, Depends(get_author_repository, scope="function")
]
BookRepoDep = Annotated[
    BookRepository, Depends(get_book_repository, scope="function")
]
