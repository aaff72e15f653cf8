"""Book endpoints using Repository + Command + Dependency Injection."""

from fastapi import APIRouter, Response, status

from simplybooks.commands.book_commands import (
    CreateBookCommand,
    CreateBookInput,
    DeleteBookCommand,
    GetBookDetailsCommand,
    GetBooksCommand,
    GetBooksOnSaleCommand,
    UpdateBookCommand,
    UpdateBookInput,
)
from simplybooks.dependencies import BookRepoDep
from simplybooks.schemas.book import BookDetail, BookRead
from simplybooks.schemas.response import MessageModel
from simplybooks.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/api", tags=["books"])


@router.get(
    "/books",
    response_model=list[BookRead],
    summary="Get all books",
)
@handle_http_errors
async def get_books(repo: BookRepoDep) -> list[BookRead]:
    books = await GetBooksCommand(repo).execute()
    return [BookRead.model_validate(book) for book in books]


@router.post(
    "/books",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
)
@handle_http_errors
async def create_book(
    book_data: CreateBookInput,
    repo: BookRepoDep,
    response: Response,
) -> BookRead:
    """
    Create a new book.

    Raises:
        HTTPException: 500 if ``authorId`` does not reference an author.

    Example:
        POST /api/books
        {
            "title": "X",
            "price": 12.5,
            "authorId": 1,
            "uid": "u1"
        }
    """
    book = await CreateBookCommand(repo).execute(book_data)
    response.headers["Location"] = f"/api/books/{book.id}"
    return BookRead.model_validate(book)


@router.patch(
    "/books/{book_id}",
    response_model=BookRead,
    summary="Overwrite a book",
)
@handle_http_errors
async def update_book(
    book_id: int,
    book_data: CreateBookInput,
    repo: BookRepoDep,
) -> BookRead:
    """
    Overwrite the fields of an existing book.

    Fields missing from the payload are reset, not kept. The owning
    ``uid`` is never changed.

    Raises:
        HTTPException: 404 if book not found.
    """
    input_data = UpdateBookInput(id=book_id, **book_data.model_dump())
    book = await UpdateBookCommand(repo).execute(input_data)
    return BookRead.model_validate(book)


# Declared before /books/{book_id} so "on-sale" is not parsed as an ID
@router.get(
    "/books/on-sale",
    response_model=list[BookRead],
    summary="Get books on sale of a user",
)
@handle_http_errors
async def get_books_on_sale(
    uid: str,
    repo: BookRepoDep,
) -> list[BookRead]:
    """
    Get the books of a user that are on sale.

    Raises:
        HTTPException: 404 if the user has no books on sale.

    Example:
        GET /api/books/on-sale?uid=googleUid1
    """
    books = await GetBooksOnSaleCommand(repo).execute(uid)
    return [BookRead.model_validate(book) for book in books]


@router.get(
    "/books/{book_id}",
    response_model=BookDetail,
    summary="Get book details with author",
)
@handle_http_errors
async def get_book_details(
    book_id: int,
    repo: BookRepoDep,
) -> BookDetail:
    return await GetBookDetailsCommand(repo).execute(book_id)


@router.delete(
    "/books/{book_id}",
    response_model=MessageModel,
    summary="Delete a book",
)
@handle_http_errors
async def delete_book(
    book_id: int,
    repo: BookRepoDep,
) -> MessageModel:
    message = await DeleteBookCommand(repo).execute(book_id)
    return MessageModel(message=message)
