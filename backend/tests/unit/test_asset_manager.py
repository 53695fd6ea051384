"""Unit tests for data-URL decoding and best-effort asset cleanup."""

import pytest

from fakes import PNG_BYTES, PNG_DATA_URL, FakeAssetStorage

from app.application.schemas import UploadedAsset
from app.application.services import AssetManager
from app.application.services.asset_manager import decode_data_url, is_data_url
from app.domain.exceptions import ValidationError


def test_decode_data_url():
    content, mime_type = decode_data_url(PNG_DATA_URL, "logo")
    assert content == PNG_BYTES
    assert mime_type == "image/png"


@pytest.mark.parametrize(
    "value",
    [
        "data:image/png,not-base64-flagged",
        "data:image/png;base64,%%%",
        "not a data url",
    ],
)
def test_decode_data_url_rejects(value):
    with pytest.raises(ValidationError) as exc_info:
        decode_data_url(value, "logo")
    assert exc_info.value.violations[0].field == "logo"


def test_is_data_url():
    assert is_data_url(PNG_DATA_URL)
    assert not is_data_url("/services/a.png")
    assert not is_data_url(None)


@pytest.mark.asyncio
async def test_cleanup_report_categories():
    storage = FakeAssetStorage()
    manager = AssetManager(storage, "services")
    kept = await manager.persist_inline(PNG_DATA_URL, "image", "kept")
    stuck = await manager.persist_inline(PNG_DATA_URL, "image", "stuck")
    storage.undeletable.add(stuck)

    report = await manager.cleanup(
        [kept, stuck, "/services/gone.png", "https://cdn.example.com/x.png", "", None]
    )

    assert report.deleted == [kept]
    assert report.missing == ["/services/gone.png"]
    assert list(report.failed) == [stuck]
    assert report.skipped == ["https://cdn.example.com/x.png"]
    assert len(report.warnings()) == 1


@pytest.mark.asyncio
async def test_discard_removes_only_uncommitted_writes():
    storage = FakeAssetStorage()
    manager = AssetManager(storage, "testimonials")
    upload = UploadedAsset(content=PNG_BYTES, filename="a.png", content_type="image/png")

    committed = await manager.persist_upload(upload, "committed.png")
    manager.commit()
    await manager.persist_upload(upload, "pending.png")

    await manager.discard()

    assert list(storage.blobs) == [committed.reference]
