"""Asset lifecycle helper shared by every service that owns binary references.

Writes new binaries (multipart uploads or inline ``data:`` URLs) into one
storage folder and removes binaries a record no longer references. Removal
is best effort: failures are collected in an ``AssetCleanupReport`` and
logged, never raised.
"""

import base64
import binascii
import logging
import mimetypes
import re
import time
from dataclasses import dataclass, field
from typing import Iterable

from app.application.interfaces import AssetStorage, StoredAsset
from app.application.schemas.payload import UploadedAsset
from app.domain.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]+)*),(?P<data>.*)$", re.S)


def is_data_url(value: object) -> bool:
    return isinstance(value, str) and value.startswith("data:")


def decode_data_url(value: str, field_name: str) -> tuple[bytes, str]:
    """Return ``(content, mime_type)`` for a base64 ``data:`` URL."""
    match = _DATA_URL.match(value)
    if not match or ";base64" not in (match.group("params") or ""):
        raise ValidationError.single(field_name, "must be a base64 data URL")
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError.single(field_name, "contains invalid base64 data") from exc
    return content, match.group("mime") or "application/octet-stream"


def inline_asset(value: str, field_name: str) -> UploadedAsset:
    """Decode a ``data:`` URL into the same shape a multipart upload arrives in."""
    content, mime_type = decode_data_url(value, field_name)
    extension = mimetypes.guess_extension(mime_type) or ".bin"
    if extension == ".jpe":
        extension = ".jpg"
    return UploadedAsset(content=content, filename=f"inline{extension}", content_type=mime_type)


def timestamp_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class AssetCleanupReport:
    """Outcome of removing the assets a deleted or updated record used to reference."""

    deleted: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.failed

    def warnings(self) -> list[str]:
        return [f"Could not remove {ref}: {reason}" for ref, reason in self.failed.items()]

    def merge(self, other: "AssetCleanupReport") -> None:
        self.deleted.extend(other.deleted)
        self.missing.extend(other.missing)
        self.failed.update(other.failed)
        self.skipped.extend(other.skipped)


class AssetManager:
    """Writes and removes the binaries of one entity type under one storage folder."""

    def __init__(self, storage: AssetStorage, folder: str):
        self._storage = storage
        self._folder = folder
        self._written: list[str] = []

    @property
    def folder(self) -> str:
        return self._folder

    async def persist_upload(self, upload: UploadedAsset, filename: str) -> StoredAsset:
        stored = await self._storage.save(upload.content, self._folder, filename)
        self._written.append(stored.reference)
        logger.info("Stored upload %s (%d bytes)", stored.reference, stored.file_size)
        return stored

    async def persist_inline(self, value: str, field_name: str, stem: str) -> str:
        """Write a ``data:`` URL to storage and return the new reference."""
        asset = inline_asset(value, field_name)
        stored = await self._storage.save(
            asset.content, self._folder, f"{stem}-{timestamp_ms()}{asset.suffix}"
        )
        self._written.append(stored.reference)
        logger.info("Stored inline %s as %s", field_name, stored.reference)
        return stored.reference

    async def cleanup(self, references: Iterable[str | None]) -> AssetCleanupReport:
        report = AssetCleanupReport()
        for reference in references:
            if not reference:
                continue
            if not self._storage.owns(reference):
                report.skipped.append(reference)
                continue
            try:
                removed = await self._storage.delete(reference)
            except StorageError as exc:
                logger.warning("Asset cleanup failed for %s: %s", reference, exc.reason)
                report.failed[reference] = exc.reason
                continue
            if removed:
                report.deleted.append(reference)
            else:
                logger.info("Asset %s already absent", reference)
                report.missing.append(reference)
        return report

    async def discard(self) -> AssetCleanupReport:
        """Remove everything written through this manager since the last ``commit``."""
        written, self._written = self._written, []
        if written:
            logger.info("Discarding %d asset(s) written by a failed request", len(written))
        return await self.cleanup(written)

    def commit(self) -> None:
        """Forget the written list once the owning record has been stored."""
        self._written = []
