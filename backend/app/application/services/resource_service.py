"""Generic application service for collection-backed resources.

Each concrete service binds an entity class, its create/update schemas and
(optionally) an ``AssetManager``. The base class implements the shared
create / get / list / update / delete flow including asset reconciliation:

* create: validate (inline ``data:`` URLs go through the same upload checks as
  multipart files), check business rules, write new assets, insert and
  commit. If that fails the assets written for the request are removed again.
* update: validate the partial payload, merge it onto the stored record,
  re-validate the merged record, write new assets, store and commit, then
  remove any asset the old record referenced and the new one does not.
* delete: remove and commit the record, then remove its assets best effort.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from app.application.interfaces import DocumentRepository, ListQuery, Page
from app.application.schemas.payload import IncomingPayload, UploadedAsset
from app.application.services.asset_manager import (
    AssetCleanupReport,
    AssetManager,
    inline_asset,
    is_data_url,
    timestamp_ms,
)
from app.application.validation import validate_changes, validate_record
from app.domain.exceptions import EntityNotFoundError, ValidationError
from app.domain.slug import is_identity, slugify

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


@dataclass
class DeleteOutcome:
    entity_id: str
    cleanup: AssetCleanupReport = field(default_factory=AssetCleanupReport)


class ResourceService(Generic[EntityT]):
    """Shared CRUD use cases. Depends on the repository port and asset manager (DI)."""

    entity_name: ClassVar[str]
    entity_cls: ClassVar[type]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    # identifiers that are not UUIDs are matched against the stored slug
    slug_lookup: ClassVar[bool] = False
    # single-reference fields that accept an upload or a data URL
    asset_fields: ClassVar[tuple[str, ...]] = ()
    # list-of-reference fields whose items may be data URLs
    gallery_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        repository: DocumentRepository[EntityT],
        assets: AssetManager | None = None,
        page_size: int = 10,
        max_page_size: int = 100,
    ):
        self._repository = repository
        self._assets = assets
        self._page_size = page_size
        self._max_page_size = max_page_size

    # ── Reads ───────────────────────────────────────────────────────

    async def get(self, identifier: str) -> EntityT:
        """Fetch by generated id, or by slug for title-bearing resources."""
        if self.slug_lookup and not is_identity(identifier):
            entity = await self._repository.get_one_by("slug", slugify(identifier))
        else:
            entity = await self._repository.get_by_id(identifier)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, identifier)
        return entity

    async def get_by_id(self, entity_id: str) -> EntityT:
        entity = await self._repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def list_records(
        self,
        filters: dict[str, Any] | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int | None = None,
        all_records: bool = False,
    ) -> Page[EntityT]:
        filters = {name: value for name, value in (filters or {}).items() if value is not None}
        search = search.strip() if search else None

        if all_records:
            items = await self._repository.get_all(ListQuery(filters=filters, search=search))
            return Page(items=items, total=len(items))

        page = max(page, 1)
        limit = min(max(limit or self._page_size, 1), self._max_page_size)
        total = await self._repository.count(filters, search)
        items = await self._repository.get_all(
            ListQuery(filters=filters, search=search, skip=(page - 1) * limit, limit=limit)
        )
        return Page(items=items, total=total, page=page, limit=limit)

    # ── Writes ──────────────────────────────────────────────────────

    async def create(self, payload: IncomingPayload) -> EntityT:
        fields = validate_record(self.create_schema, payload.fields)
        uploads = self._collect_uploads(fields, payload.uploads)
        await self._check_rules(fields, current=None)

        try:
            await self._store_assets(fields, uploads)
            created = await self._repository.create(self.entity_cls(**fields))
            await self._repository.commit()
        except Exception:
            await self._discard_assets()
            raise
        self._commit_assets()

        logger.info("Created %s %s", self.entity_name, created.id)
        return created

    async def update(self, entity_id: str, payload: IncomingPayload) -> EntityT:
        entity = await self.get_by_id(entity_id)
        changes = validate_changes(self.update_schema, payload.fields)

        merged = validate_record(self.create_schema, {**self._record_fields(entity), **changes})
        uploads = self._collect_uploads(merged, payload.uploads)
        await self._check_rules(merged, current=entity)

        previous = set(self._asset_references(entity))
        try:
            await self._store_assets(merged, uploads)
            entity.update(**merged)
            updated = await self._repository.update(entity)
            await self._repository.commit()
        except Exception:
            await self._discard_assets()
            raise
        self._commit_assets()

        # the old files go only once the record no longer points at them
        await self._cleanup(previous - set(self._asset_references(updated)))
        logger.info("Updated %s %s", self.entity_name, entity_id)
        return updated

    async def delete(self, entity_id: str) -> DeleteOutcome:
        entity = await self.get_by_id(entity_id)
        await self._repository.delete(entity_id)
        await self._repository.commit()
        report = await self._cleanup(self._asset_references(entity))
        logger.info(
            "Deleted %s %s (%d asset(s) removed, %d failed)",
            self.entity_name,
            entity_id,
            len(report.deleted),
            len(report.failed),
        )
        return DeleteOutcome(entity_id=entity_id, cleanup=report)

    # ── Hooks ───────────────────────────────────────────────────────

    async def _check_rules(self, fields: dict[str, Any], current: EntityT | None) -> None:
        """Business rules beyond field validation; raise a domain error to reject."""

    def _validate_upload(self, field_name: str, upload: UploadedAsset) -> None:
        if not upload.content_type.startswith("image/"):
            raise ValidationError.single(field_name, "must be an image file")

    def _asset_stem(self, fields: dict[str, Any]) -> str:
        return slugify(str(fields.get("title", ""))) or self.entity_name.lower()

    # ── Internals ───────────────────────────────────────────────────

    def _record_fields(self, entity: EntityT) -> dict[str, Any]:
        return {name: getattr(entity, name) for name in self.create_schema.model_fields}

    def _collect_uploads(
        self, fields: dict[str, Any], uploads: dict[str, UploadedAsset]
    ) -> dict[str, UploadedAsset]:
        """Multipart uploads plus decoded ``data:`` URLs, all checked by ``_validate_upload``."""
        collected = {name: upload for name, upload in uploads.items() if name in self.asset_fields}
        for name in self.asset_fields:
            if name not in collected and is_data_url(fields.get(name)):
                collected[name] = inline_asset(fields[name], name)
        for upload_name, upload in collected.items():
            self._validate_upload(upload_name, upload)
        for name in self.gallery_fields:
            for index, value in enumerate(fields.get(name) or []):
                if is_data_url(value):
                    self._validate_upload(f"{name}.{index}", inline_asset(value, f"{name}.{index}"))
        return collected

    def _asset_references(self, entity: EntityT) -> list[str]:
        references = getattr(entity, "asset_references", None)
        return references() if references else []

    async def _store_assets(
        self, fields: dict[str, Any], uploads: dict[str, UploadedAsset]
    ) -> None:
        if self._assets is None:
            return
        stem = self._asset_stem(fields)
        for name, upload in uploads.items():
            stored = await self._assets.persist_upload(
                upload, f"{stem}-{timestamp_ms()}{upload.suffix}"
            )
            fields[name] = stored.reference
        for name in self.gallery_fields:
            items = []
            for index, value in enumerate(fields.get(name) or []):
                if is_data_url(value):
                    value = await self._assets.persist_inline(value, f"{name}.{index}", stem)
                items.append(value)
            fields[name] = items

    async def _cleanup(self, references) -> AssetCleanupReport:
        if self._assets is None:
            return AssetCleanupReport()
        return await self._assets.cleanup(references)

    async def _discard_assets(self) -> None:
        if self._assets is not None:
            await self._assets.discard()

    def _commit_assets(self) -> None:
        if self._assets is not None:
            self._assets.commit()
