from .asset_storage import AssetStorage, StoredAsset
from .document_repository import DocumentRepository, ListQuery, Page
from .singleton_repository import SingletonRepository

__all__ = [
    "AssetStorage",
    "StoredAsset",
    "DocumentRepository",
    "ListQuery",
    "Page",
    "SingletonRepository",
]
