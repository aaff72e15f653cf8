from sqlmodel import Field

from simplybooks.models.base import BaseModel


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key identifier, assigned by the database
        first_name: Author first name
        last_name: Author last name
        email: Contact email, not validated
        favorite: Whether the owning user marked the author as favorite
        image: Portrait URL
        uid: Identifier of the external user owning the record
    """

    __tablename__ = "authors"
    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    email: str | None = None
    favorite: bool = False
    image: str | None = None
    uid: str = Field(index=True)
