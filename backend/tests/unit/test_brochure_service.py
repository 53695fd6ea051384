"""Unit tests for the BrochureService."""

import pytest

from fakes import PDF_BYTES, FakeAssetStorage, FakeDocumentRepository

from app.application.schemas import IncomingPayload, UploadedAsset
from app.application.services import AssetManager, BrochureService
from app.domain.exceptions import ValidationError


def _pdf(filename: str = "Company Profile.pdf", content_type: str = "application/pdf"):
    return UploadedAsset(content=PDF_BYTES, filename=filename, content_type=content_type)


@pytest.fixture
def storage() -> FakeAssetStorage:
    return FakeAssetStorage()


@pytest.fixture
def brochures(storage) -> BrochureService:
    return BrochureService(
        FakeDocumentRepository(newest_first=True), AssetManager(storage, "brochures")
    )


@pytest.mark.asyncio
async def test_upload_derives_title_and_path(brochures: BrochureService, storage):
    brochure = await brochures.create(IncomingPayload(uploads={"file": _pdf()}))

    assert brochure.title == "Company Profile"
    assert brochure.file_name == "Company Profile.pdf"
    assert brochure.file_path.startswith("/brochures/")
    assert brochure.file_path.endswith("-Company Profile.pdf")
    assert storage.exists(brochure.file_path)


@pytest.mark.asyncio
async def test_upload_requires_a_file(brochures: BrochureService):
    with pytest.raises(ValidationError) as exc_info:
        await brochures.create(IncomingPayload())
    assert exc_info.value.violations[0].field == "file"


@pytest.mark.asyncio
async def test_only_pdf_is_accepted(brochures: BrochureService, storage):
    with pytest.raises(ValidationError):
        await brochures.create(
            IncomingPayload(uploads={"file": _pdf("notes.txt", "text/plain")})
        )
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_replacing_file_removes_old_one(brochures: BrochureService, storage):
    original = await brochures.create(IncomingPayload(uploads={"file": _pdf()}))

    updated = await brochures.update(
        original.id, IncomingPayload(uploads={"file": _pdf("Services 2025.pdf")})
    )

    assert updated.title == "Services 2025"
    assert updated.file_path != original.file_path
    assert not storage.exists(original.file_path)
    assert storage.exists(updated.file_path)


@pytest.mark.asyncio
async def test_rename_without_new_file(brochures: BrochureService, storage):
    original = await brochures.create(IncomingPayload(uploads={"file": _pdf()}))
    renamed = await brochures.update(original.id, IncomingPayload(fields={"title": "Profile"}))

    assert renamed.title == "Profile"
    assert renamed.file_path == original.file_path
    assert storage.exists(original.file_path)


@pytest.mark.asyncio
async def test_list_is_newest_first(brochures: BrochureService):
    await brochures.create(IncomingPayload(uploads={"file": _pdf("first.pdf")}))
    await brochures.create(IncomingPayload(uploads={"file": _pdf("second.pdf")}))

    listed = await brochures.list_records(all_records=True)
    assert [b.title for b in listed.items] == ["second", "first"]


@pytest.mark.asyncio
async def test_delete_removes_file(brochures: BrochureService, storage):
    brochure = await brochures.create(IncomingPayload(uploads={"file": _pdf()}))
    outcome = await brochures.delete(brochure.id)

    assert outcome.cleanup.deleted == [brochure.file_path]
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_failed_commit_keeps_previous_file(storage):
    repository = FakeDocumentRepository(newest_first=True)
    brochures = BrochureService(repository, AssetManager(storage, "brochures"))
    original = await brochures.create(IncomingPayload(uploads={"file": _pdf()}))
    repository.commit_error = RuntimeError("commit failed")

    with pytest.raises(RuntimeError):
        await brochures.update(original.id, IncomingPayload(uploads={"file": _pdf("New.pdf")}))

    assert list(storage.blobs) == [original.file_path]
