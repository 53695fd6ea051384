"""Unit tests for the TestimonialService avatar handling."""

import base64

import pytest

from fakes import PDF_BYTES, PNG_BYTES, PNG_DATA_URL, FakeAssetStorage, FakeDocumentRepository

from app.application.schemas import IncomingPayload, UploadedAsset
from app.application.services import AssetManager, TestimonialService
from app.domain.entities import TestimonialStatus
from app.domain.exceptions import ValidationError

FIELDS = {
    "name": "Rahul Mehta",
    "location": "Pune, India",
    "content": "Excellent simulation work.",
    "rating": "5",
    "servicesType": "FEA Simulation",
}


def _avatar(content: bytes = PNG_BYTES, content_type: str = "image/png") -> UploadedAsset:
    return UploadedAsset(content=content, filename="me.png", content_type=content_type)


@pytest.fixture
def storage() -> FakeAssetStorage:
    return FakeAssetStorage()


@pytest.fixture
def testimonials(storage) -> TestimonialService:
    return TestimonialService(
        FakeDocumentRepository(),
        AssetManager(storage, "testimonials"),
        max_avatar_bytes=1024,
    )


@pytest.mark.asyncio
async def test_create_with_avatar(testimonials: TestimonialService, storage):
    created = await testimonials.create(
        IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar()})
    )

    assert created.rating == 5
    assert created.status == TestimonialStatus.PUBLISHED
    assert created.avatar.startswith("/testimonials/testimonial-")
    assert created.avatar.endswith(".png")
    assert storage.blobs[created.avatar] == PNG_BYTES


@pytest.mark.asyncio
async def test_avatar_must_be_an_image(testimonials: TestimonialService, storage):
    with pytest.raises(ValidationError) as exc_info:
        await testimonials.create(
            IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar(content_type="text/plain")})
        )
    assert exc_info.value.violations[0].field == "avatar"
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_avatar_size_limit(testimonials: TestimonialService, storage):
    with pytest.raises(ValidationError):
        await testimonials.create(
            IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar(b"x" * 2048)})
        )
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_update_without_upload_keeps_avatar(testimonials: TestimonialService, storage):
    created = await testimonials.create(
        IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar()})
    )

    updated = await testimonials.update(
        created.id, IncomingPayload(fields={"content": "Still excellent."})
    )

    assert updated.avatar == created.avatar
    assert updated.content == "Still excellent."
    assert storage.exists(created.avatar)


@pytest.mark.asyncio
async def test_new_avatar_replaces_old_file(testimonials: TestimonialService, storage):
    created = await testimonials.create(
        IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar()})
    )

    updated = await testimonials.update(
        created.id, IncomingPayload(uploads={"avatar": _avatar(b"new-image")})
    )

    assert updated.avatar != created.avatar
    assert storage.blobs[updated.avatar] == b"new-image"
    assert not storage.exists(created.avatar)


@pytest.mark.asyncio
async def test_rejected_update_keeps_record_and_files(testimonials: TestimonialService, storage):
    created = await testimonials.create(
        IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar()})
    )

    with pytest.raises(ValidationError):
        await testimonials.update(
            created.id, IncomingPayload(fields={"rating": 9}, uploads={"avatar": _avatar()})
        )

    assert list(storage.blobs) == [created.avatar]
    assert (await testimonials.get(created.id)).rating == 5


@pytest.mark.asyncio
async def test_delete_with_missing_avatar_succeeds(testimonials: TestimonialService, storage):
    created = await testimonials.create(
        IncomingPayload(fields=dict(FIELDS), uploads={"avatar": _avatar()})
    )
    storage.blobs.clear()

    outcome = await testimonials.delete(created.id)

    assert outcome.cleanup.missing == [created.avatar]
    assert outcome.cleanup.warnings() == []


def _data_url(content: bytes, content_type: str) -> str:
    return f"data:{content_type};base64," + base64.b64encode(content).decode()


@pytest.mark.asyncio
async def test_inline_avatar_is_stored(testimonials: TestimonialService, storage):
    created = await testimonials.create(IncomingPayload(fields={**FIELDS, "avatar": PNG_DATA_URL}))

    assert created.avatar.endswith(".png")
    assert storage.blobs[created.avatar] == PNG_BYTES


@pytest.mark.asyncio
async def test_inline_avatar_must_be_an_image(testimonials: TestimonialService, storage):
    with pytest.raises(ValidationError) as exc_info:
        await testimonials.create(
            IncomingPayload(fields={**FIELDS, "avatar": _data_url(PDF_BYTES, "application/pdf")})
        )
    assert exc_info.value.violations[0].field == "avatar"
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_inline_avatar_size_limit(testimonials: TestimonialService, storage):
    oversized = _data_url(b"\x89PNG" + b"\x00" * 2048, "image/png")

    with pytest.raises(ValidationError) as exc_info:
        await testimonials.create(IncomingPayload(fields={**FIELDS, "avatar": oversized}))

    assert exc_info.value.violations[0].field == "avatar"
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_inline_avatar_checked_on_update(testimonials: TestimonialService, storage):
    created = await testimonials.create(IncomingPayload(fields=dict(FIELDS)))

    with pytest.raises(ValidationError):
        await testimonials.update(
            created.id,
            IncomingPayload(fields={"avatar": _data_url(PDF_BYTES, "application/pdf")}),
        )

    assert storage.blobs == {}
    assert (await testimonials.get(created.id)).avatar == ""
