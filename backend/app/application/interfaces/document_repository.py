"""Abstract repository interface (port) shared by every collection-backed entity."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

EntityT = TypeVar("EntityT")


@dataclass
class ListQuery:
    """Filter + window for a list read.

    ``filters`` are equality predicates keyed by entity attribute name.
    ``limit=None`` returns every matching record.
    ``newest_first=None`` keeps the repository's default ordering.
    """

    filters: dict[str, Any] = field(default_factory=dict)
    search: str | None = None
    skip: int = 0
    limit: int | None = None
    newest_first: bool | None = None


@dataclass
class Page(Generic[EntityT]):
    """One window of a list read plus the total match count."""

    items: list[EntityT]
    total: int
    page: int = 1
    limit: int | None = None

    @property
    def pages(self) -> int:
        if not self.limit:
            return 1
        return max(1, -(-self.total // self.limit))


class DocumentRepository(ABC, Generic[EntityT]):
    """Port for one entity collection — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> EntityT | None:
        """Retrieve a single record by its generated identifier."""
        ...

    @abstractmethod
    async def get_one_by(self, field_name: str, value: Any) -> EntityT | None:
        """Retrieve the first record whose *field_name* equals *value*."""
        ...

    @abstractmethod
    async def get_all(self, query: ListQuery) -> list[EntityT]:
        """Retrieve a filtered, optionally paginated list of records."""
        ...

    @abstractmethod
    async def count(
        self, filters: dict[str, Any] | None = None, search: str | None = None
    ) -> int:
        """Count records matching the same predicates ``get_all`` accepts."""
        ...

    @abstractmethod
    async def distinct_values(self, field_name: str) -> list[str]:
        """Return the sorted set of non-empty values stored in *field_name*."""
        ...

    @abstractmethod
    async def create(self, entity: EntityT) -> EntityT:
        """Persist a new record and return it."""
        ...

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """Write every mutable field of an existing record."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable. Replaced assets are removed only afterwards."""
        ...
