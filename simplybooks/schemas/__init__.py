from simplybooks.schemas.author import (
    AuthorBookSummary,
    AuthorDetail,
    AuthorRead,
    AuthorSummary,
)
from simplybooks.schemas.book import BookDetail, BookRead
from simplybooks.schemas.response import MessageModel

__all__ = [
    "AuthorBookSummary",
    "AuthorDetail",
    "AuthorRead",
    "AuthorSummary",
    "BookDetail",
    "BookRead",
    "MessageModel",
]
