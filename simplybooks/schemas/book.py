from simplybooks.schemas.author import AuthorSummary
from simplybooks.schemas.base import CamelModel, Price


class BookRead(CamelModel):
    id: int
    title: str
    description: str | None = None
    image: str | None = None
    price: Price
    sale: bool = False
    uid: str | None = None
    author_id: int


class BookDetail(CamelModel):
    """Book with its author resolved by join; the author carries no books."""

    id: int
    title: str
    description: str | None = None
    price: Price
    sale: bool = False
    author: AuthorSummary
