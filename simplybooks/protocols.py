"""
Structural types the commands depend on.

Commands accept anything shaped like a repository instead of the concrete
SQLModel repositories, so unit tests can hand them an ``AsyncMock``::

    command = DeleteBookCommand(AsyncMock())
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """Generic CRUD surface implemented by BaseRepository."""

    async def get_by_id(self, id: int) -> T | None: ...

    async def get_all(self, **filters: Any) -> list[T]: ...

    async def create(self, entity: T) -> T: ...

    async def update(self, entity: T) -> T: ...

    async def delete(self, entity: T) -> None: ...
