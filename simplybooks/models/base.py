"""Shared base of the SimplyBooks table models."""

from sqlmodel import SQLModel


class BaseModel(SQLModel):  # type: ignore[misc]
    """
    Base class of every table model.

    Authors and books are related only through the ``Book.author_id``
    foreign key. Neither model declares a ``Relationship``: the
    repositories join at query time, so loaded rows never reference each
    other and serialize without cycles or lazy loads.
    """
