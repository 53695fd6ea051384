"""Unit tests for the LocalFileStorage adapter."""

import pytest

from app.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest.fixture
def storage(tmp_path) -> LocalFileStorage:
    return LocalFileStorage(tmp_path / "public")


@pytest.mark.asyncio
async def test_save_writes_under_folder(storage: LocalFileStorage):
    stored = await storage.save(b"%PDF", "brochures", "1700000000000-Company Profile.pdf")

    assert stored.reference == "/brochures/1700000000000-Company_Profile.pdf"
    assert stored.file_size == 4
    assert stored.mime_type == "application/pdf"
    assert (storage.root / "brochures" / stored.filename).read_bytes() == b"%PDF"
    assert storage.exists(stored.reference)


@pytest.mark.asyncio
async def test_save_never_overwrites(storage: LocalFileStorage):
    first = await storage.save(b"one", "admin/logo", "logo.png")
    second = await storage.save(b"two", "admin/logo", "logo.png")

    assert first.reference == "/admin/logo/logo.png"
    assert second.reference == "/admin/logo/logo-1.png"


@pytest.mark.asyncio
async def test_delete(storage: LocalFileStorage):
    stored = await storage.save(b"x", "testimonials", "avatar.png")

    assert await storage.delete(stored.reference) is True
    assert not storage.exists(stored.reference)
    assert await storage.delete(stored.reference) is False


def test_owns_only_local_references(storage: LocalFileStorage):
    assert storage.owns("/services/a.png")
    assert not storage.owns("https://cdn.example.com/a.png")
    assert not storage.owns("//cdn.example.com/a.png")
    assert not storage.owns("/../outside.txt")
    assert not storage.owns("relative/path.png")


@pytest.mark.asyncio
async def test_delete_refuses_paths_outside_root(storage: LocalFileStorage, tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_text("keep")

    assert await storage.delete("/../secret.txt") is False
    assert outside.exists()
