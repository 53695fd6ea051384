"""Unit tests for the ThemeService singleton."""

import pytest

from fakes import PNG_DATA_URL, FakeAssetStorage, FakeSingletonRepository

from app.application.schemas import IncomingPayload
from app.application.services import AssetManager, ThemeService
from app.domain.entities import DEFAULT_THEME_KEY
from app.domain.exceptions import ValidationError


@pytest.fixture
def storage() -> FakeAssetStorage:
    return FakeAssetStorage()


@pytest.fixture
def repository() -> FakeSingletonRepository:
    return FakeSingletonRepository()


@pytest.fixture
def theme(repository, storage) -> ThemeService:
    return ThemeService(repository, AssetManager(storage, "admin/logo"))


@pytest.mark.asyncio
async def test_load_seeds_defaults(theme: ThemeService, repository):
    loaded = await theme.load()

    assert loaded.id == DEFAULT_THEME_KEY
    assert loaded.site_name == "Filigree Solutions"
    assert loaded.primary_color == "#2563EB"
    assert loaded.secondary_color == "#9333EA"
    assert loaded.gradient_direction == "135deg"
    assert list(repository.records) == [DEFAULT_THEME_KEY]


@pytest.mark.asyncio
async def test_update_is_an_upsert_on_one_record(theme: ThemeService, repository):
    await theme.update(IncomingPayload(fields={"siteName": "Filigree"}))
    saved = await theme.update(IncomingPayload(fields={"primaryColor": "#ff0000"}))

    assert saved.site_name == "Filigree"
    assert saved.primary_color == "#FF0000"
    assert list(repository.records) == [DEFAULT_THEME_KEY]


@pytest.mark.asyncio
async def test_invalid_colour_changes_nothing(theme: ThemeService):
    with pytest.raises(ValidationError):
        await theme.update(IncomingPayload(fields={"primaryColor": "blue"}))
    assert (await theme.load()).primary_color == "#2563EB"


@pytest.mark.asyncio
async def test_logo_data_url_is_stored(theme: ThemeService, storage):
    saved = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))

    assert saved.logo.startswith("/admin/logo/logo-")
    assert saved.logo.endswith(".png")
    assert storage.exists(saved.logo)
    assert saved.favicon is None


@pytest.mark.asyncio
async def test_non_image_data_url_is_rejected(theme: ThemeService, storage):
    with pytest.raises(ValidationError):
        await theme.update(IncomingPayload(fields={"favicon": "data:text/plain;base64,aGk="}))
    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_replacing_logo_removes_old_file(theme: ThemeService, storage):
    first = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))
    second = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))

    assert second.logo != first.logo
    assert not storage.exists(first.logo)
    assert storage.exists(second.logo)


@pytest.mark.asyncio
async def test_keeping_logo_reference_keeps_file(theme: ThemeService, storage):
    first = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))
    second = await theme.update(
        IncomingPayload(fields={"logo": first.logo, "siteName": "Renamed"})
    )
    assert second.logo == first.logo
    assert storage.exists(first.logo)


@pytest.mark.asyncio
async def test_empty_logo_clears_it(theme: ThemeService, storage):
    first = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))
    cleared = await theme.update(IncomingPayload(fields={"logo": ""}))

    assert cleared.logo is None
    assert not storage.exists(first.logo)


@pytest.mark.asyncio
async def test_reset_restores_defaults_and_removes_images(theme: ThemeService, storage):
    customised = await theme.update(
        IncomingPayload(
            fields={"siteName": "Custom", "primaryColor": "#000000", "favicon": PNG_DATA_URL}
        )
    )

    reset = await theme.reset()

    assert reset.site_name == "Filigree Solutions"
    assert reset.primary_color == "#2563EB"
    assert reset.favicon is None
    assert not storage.exists(customised.favicon)


@pytest.mark.asyncio
async def test_failed_commit_keeps_old_logo(theme: ThemeService, repository, storage):
    first = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))
    repository.commit_error = RuntimeError("commit failed")

    with pytest.raises(RuntimeError):
        await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))

    assert list(storage.blobs) == [first.logo]


@pytest.mark.asyncio
async def test_failed_commit_on_reset_keeps_logo(theme: ThemeService, repository, storage):
    first = await theme.update(IncomingPayload(fields={"logo": PNG_DATA_URL}))
    repository.commit_error = RuntimeError("commit failed")

    with pytest.raises(RuntimeError):
        await theme.reset()

    assert storage.exists(first.logo)
