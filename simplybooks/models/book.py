from decimal import Decimal

from sqlmodel import Field

from simplybooks.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book entity in the database.

    ``author_id`` is the only link to the author. The foreign key cascades
    on delete, so removing an author at the database level also removes
    its books.

    Attributes:
        id: Primary key identifier, assigned by the database
        title: Book title
        description: Free text description
        image: Cover URL
        price: Price as a decimal currency amount
        sale: Whether the book is on sale
        uid: Identifier of the external user owning the record
        author_id: ID of the author who wrote the book
    """

    __tablename__ = "books"
    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str | None = None
    image: str | None = None
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    sale: bool = False
    uid: str | None = Field(default=None, index=True)
    author_id: int = Field(foreign_key="authors.id", ondelete="CASCADE")
