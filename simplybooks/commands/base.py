"""
Business operations as command objects.

A command wraps exactly one use case ("delete an author and its books",
"list the books a user has on sale"). It receives its repository in the
constructor, takes one input value in ``execute`` and reports failures
with simplybooks.exceptions, never with HTTP types. Endpoints stay thin::

    @router.get("/books/{book_id}")
    @handle_http_errors
    async def get_book_details(book_id: int, repo: BookRepoDep) -> BookDetail:
        return await GetBookDetailsCommand(repo).execute(book_id)
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Command taking a ``TInput`` (an input model, an ID or a uid) and
    producing a ``TOutput``.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Run the use case.

        Raises:
            NotFoundError: The addressed author or book does not exist, or
                a per-user filter matched nothing.
            SQLAlchemyError: The database rejected the change.
        """
