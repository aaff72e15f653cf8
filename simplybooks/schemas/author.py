from simplybooks.schemas.base import CamelModel, Price


class AuthorRead(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str | None = None
    favorite: bool = False
    image: str | None = None
    uid: str


class AuthorSummary(CamelModel):
    """Author fields embedded in a book detail response."""

    id: int
    first_name: str
    last_name: str
    email: str | None = None
    favorite: bool = False
    image: str | None = None


class AuthorBookSummary(CamelModel):
    """Book fields listed in an author detail response."""

    id: int
    title: str
    description: str | None = None
    price: Price
    sale: bool = False


class AuthorDetail(AuthorSummary):
    books: list[AuthorBookSummary] = []
