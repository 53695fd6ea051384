"""Abstract repository interface (port) for fixed-key configuration records."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

EntityT = TypeVar("EntityT")


class SingletonRepository(ABC, Generic[EntityT]):
    """Port for single-row aggregates such as theme settings and contact info.

    Writes are upserts keyed by the entity's fixed ``id``; there is no insert
    path that could create a second row for the same key.
    """

    @abstractmethod
    async def get(self, key: str) -> EntityT | None:
        ...

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """Insert or overwrite the record stored under ``entity.id``."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make the saved record durable before its replaced assets are removed."""
        ...
