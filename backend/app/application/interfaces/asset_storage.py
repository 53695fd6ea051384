"""Abstract storage interface (port) for binary assets referenced by records."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredAsset:
    """Result of storing a single binary."""

    reference: str  # public path written into records, e.g. /testimonials/x.png
    filename: str
    file_size: int
    mime_type: str


class AssetStorage(ABC):
    """Port for asset persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def save(self, content: bytes, folder: str, filename: str) -> StoredAsset:
        """Write *content* under *folder*; raises StorageError on failure."""
        ...

    @abstractmethod
    def owns(self, reference: str) -> bool:
        """True when *reference* points into this storage (not an external URL)."""
        ...

    @abstractmethod
    def exists(self, reference: str) -> bool:
        ...

    @abstractmethod
    async def delete(self, reference: str) -> bool:
        """Remove a stored asset.

        Returns False when the asset is already gone; raises StorageError
        when it exists but cannot be removed.
        """
        ...
