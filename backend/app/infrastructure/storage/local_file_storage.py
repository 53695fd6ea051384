"""Local filesystem storage for uploaded assets under the public directory.

Storage layout:
    <public_dir>/<folder>/<sanitised stem><ext>

Records reference an asset by its public path, ``/<folder>/<file>``, which
is also the URL the static-files mount serves it under.
"""

import logging
import mimetypes
import re
from pathlib import Path, PurePosixPath

from app.application.interfaces import AssetStorage, StoredAsset
from app.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


class LocalFileStorage(AssetStorage):
    """Infrastructure adapter for the AssetStorage port."""

    def __init__(self, public_dir: str | Path):
        self._root = Path(public_dir).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, reference: str) -> Path | None:
        """Map a public reference to a path inside the root, or None if it escapes."""
        relative = PurePosixPath(reference.lstrip("/"))
        if not relative.parts or ".." in relative.parts:
            return None
        path = (self._root / Path(*relative.parts)).resolve()
        if self._root not in path.parents:
            return None
        return path

    async def save(self, content: bytes, folder: str, filename: str) -> StoredAsset:
        target_dir = self._root / folder
        source = PurePosixPath(filename)
        stem, suffix = _sanitise(source.stem), source.suffix.lower()

        dest_path = target_dir / f"{stem}{suffix}"
        counter = 1
        while dest_path.exists():
            dest_path = target_dir / f"{stem}-{counter}{suffix}"
            counter += 1

        reference = "/" + dest_path.relative_to(self._root).as_posix()
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            dest_path.write_bytes(content)
        except OSError as exc:
            raise StorageError(reference, str(exc)) from exc

        logger.info("Stored asset: %s (%d bytes)", dest_path, len(content))
        return StoredAsset(
            reference=reference,
            filename=dest_path.name,
            file_size=len(content),
            mime_type=mimetypes.guess_type(dest_path.name)[0] or "application/octet-stream",
        )

    def owns(self, reference: str) -> bool:
        return (
            isinstance(reference, str)
            and reference.startswith("/")
            and not reference.startswith("//")
            and self._resolve(reference) is not None
        )

    def exists(self, reference: str) -> bool:
        path = self._resolve(reference)
        return path is not None and path.is_file()

    async def delete(self, reference: str) -> bool:
        """Delete a stored asset from disk.

        Returns True if deleted, False if not found. Empty folders are kept.
        """
        path = self._resolve(reference)
        if path is None or not path.exists():
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(reference, str(exc)) from exc
        logger.info("Deleted asset from disk: %s", reference)
        return True
