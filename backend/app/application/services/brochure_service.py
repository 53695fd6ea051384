"""Application service (use case) for downloadable PDF brochures."""

import logging

from app.application.schemas import BrochureRecord, BrochureUpdate
from app.application.schemas.payload import IncomingPayload, UploadedAsset
from app.application.services.asset_manager import timestamp_ms
from app.application.services.resource_service import ResourceService
from app.application.validation import validate_changes, validate_record
from app.domain.entities import Brochure
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


class BrochureService(ResourceService[Brochure]):
    """Brochures are created from a multipart ``file`` upload.

    The stored file is named ``<ms-timestamp>-<original name>`` and the title
    defaults to the original filename without its extension.
    """

    entity_name = "Brochure"
    entity_cls = Brochure
    create_schema = BrochureRecord
    update_schema = BrochureUpdate
    asset_fields = ("file",)

    def _validate_upload(self, field_name: str, upload: UploadedAsset) -> None:
        if upload.content_type != PDF_MIME_TYPE:
            raise ValidationError.single(field_name, "only PDF files are allowed")

    async def create(self, payload: IncomingPayload) -> Brochure:
        upload = payload.uploads.get("file")
        if upload is None:
            raise ValidationError.single("file", "no file uploaded")
        self._validate_upload("file", upload)
        changes = validate_changes(self.update_schema, payload.fields)

        try:
            fields = await self._store_file(upload, changes.get("title"))
            created = await self._repository.create(Brochure(**fields))
            await self._repository.commit()
        except Exception:
            await self._discard_assets()
            raise
        self._commit_assets()

        logger.info("Created brochure %s (%s)", created.id, created.file_path)
        return created

    async def update(self, entity_id: str, payload: IncomingPayload) -> Brochure:
        brochure = await self.get_by_id(entity_id)
        changes = validate_changes(self.update_schema, payload.fields)
        upload = payload.uploads.get("file")
        if upload is not None:
            self._validate_upload("file", upload)

        previous = set(brochure.asset_references())
        try:
            if upload is not None:
                changes = await self._store_file(upload, changes.get("title"))
            merged = validate_record(self.create_schema, {**self._record_fields(brochure), **changes})
            brochure.update(**merged)
            updated = await self._repository.update(brochure)
            await self._repository.commit()
        except Exception:
            await self._discard_assets()
            raise
        self._commit_assets()

        await self._cleanup(previous - set(updated.asset_references()))
        logger.info("Updated brochure %s", entity_id)
        return updated

    async def _store_file(self, upload: UploadedAsset, title: str | None) -> dict:
        stored = await self._assets.persist_upload(upload, f"{timestamp_ms()}-{upload.filename}")
        return validate_record(
            self.create_schema,
            {
                "title": title or upload.stem,
                "file_name": upload.filename,
                "file_path": stored.reference,
            },
        )
