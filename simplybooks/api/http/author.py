"""
Author endpoints using Repository + Command + Dependency Injection.

Each endpoint builds one command over the injected repository; errors
raised by commands are translated by handle_http_errors.
"""

from fastapi import APIRouter, Response, status

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
from simplybooks.dependencies import AuthorRepoDep
from simplybooks.schemas.author import AuthorDetail, AuthorRead
from simplybooks.schemas.response import MessageModel
from simplybooks.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/api", tags=["authors"])


@router.get(
    "/authors",
    response_model=list[AuthorRead],
    summary="Get all authors",
)
@handle_http_errors
async def get_authors(repo: AuthorRepoDep) -> list[AuthorRead]:
    """
    Get all authors, unfiltered and unpaginated.

    Example:
        GET /api/authors
    """
    authors = await GetAuthorsCommand(repo).execute()
    return [AuthorRead.model_validate(author) for author in authors]


@router.post(
    "/authors",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
@handle_http_errors
async def create_author(
    author_data: CreateAuthorInput,
    repo: AuthorRepoDep,
    response: Response,
) -> AuthorRead:
    """
    Create a new author.

    Args:
        author_data: Author data to create.
        repo: Author repository (injected via dependency).
        response: Outgoing response, used to set the Location header.

    Returns:
        Created author with generated ID.

    Example:
        POST /api/authors
        {
            "firstName": "Ann",
            "lastName": "Lee",
            "uid": "u1"
        }
    """
    author = await CreateAuthorCommand(repo).execute(author_data)
    response.headers["Location"] = f"/api/authors/{author.id}"
    return AuthorRead.model_validate(author)


@router.patch(
    "/authors/{author_id}",
    response_model=AuthorRead,
    summary="Overwrite an author",
)
@handle_http_errors
async def update_author(
    author_id: int,
    author_data: CreateAuthorInput,
    repo: AuthorRepoDep,
) -> AuthorRead:
    """
    Overwrite the fields of an existing author.

    Fields missing from the payload are reset, not kept.

    Raises:
        HTTPException: 404 if author not found.

    Example:
        PATCH /api/authors/1
        {
            "firstName": "Jane",
            "lastName": "Doe",
            "favorite": true,
            "uid": "u1"
        }
    """
    input_data = UpdateAuthorInput(id=author_id, **author_data.model_dump())
    author = await UpdateAuthorCommand(repo).execute(input_data)
    return AuthorRead.model_validate(author)


@router.get(
    "/favorite-authors",
    response_model=list[AuthorRead],
    summary="Get favorite authors of a user",
)
@handle_http_errors
async def get_favorite_authors(
    uid: str,
    repo: AuthorRepoDep,
) -> list[AuthorRead]:
    """
    Get the authors of a user that are marked as favorite.

    Raises:
        HTTPException: 404 if the user has no favorite authors.

    Example:
        GET /api/favorite-authors?uid=googleUid1
    """
    authors = await GetFavoriteAuthorsCommand(repo).execute(uid)
    return [AuthorRead.model_validate(author) for author in authors]


@router.get(
    "/authors/{author_id}",
    response_model=AuthorDetail,
    summary="Get author details with books",
)
@handle_http_errors
async def get_author_details(
    author_id: int,
    repo: AuthorRepoDep,
) -> AuthorDetail:
    """
    Get an author with summaries of its books.

    Raises:
        HTTPException: 404 if author not found.

    Example:
        GET /api/authors/1
    """
    return await GetAuthorDetailsCommand(repo).execute(author_id)


@router.delete(
    "/authors/{author_id}",
    response_model=MessageModel,
    summary="Delete an author and its books",
)
@handle_http_errors
async def delete_author(
    author_id: int,
    repo: AuthorRepoDep,
) -> MessageModel:
    """
    Delete an author together with all of its books.

    Raises:
        HTTPException: 404 if author not found.

    Example:
        DELETE /api/authors/1
    """
    message = await DeleteAuthorCommand(repo).execute(author_id)
    return MessageModel(message=message)
