"""Unit tests for the SeoService."""

import pytest

from fakes import FakeDocumentRepository

from app.application.schemas import IncomingPayload
from app.application.services import SeoService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError


def _page(page_id: str, **extra) -> IncomingPayload:
    return IncomingPayload(
        fields={
            "pageId": page_id,
            "pageName": page_id.title(),
            "title": f"{page_id} title",
            "description": f"{page_id} description",
            **extra,
        }
    )


@pytest.fixture
def seo() -> SeoService:
    return SeoService(FakeDocumentRepository())


@pytest.mark.asyncio
async def test_get_by_page_id(seo: SeoService):
    created = await seo.create(_page("home", keywords="cad, cae"))

    found = await seo.get_by_page_id("Home")
    assert found.id == created.id
    assert found.keywords == "cad, cae"
    with pytest.raises(EntityNotFoundError):
        await seo.get_by_page_id("missing")


@pytest.mark.asyncio
async def test_page_id_must_be_unique(seo: SeoService):
    await seo.create(_page("home"))
    with pytest.raises(DuplicateEntityError):
        await seo.create(_page("HOME"))


@pytest.mark.asyncio
async def test_update_keeps_own_page_id(seo: SeoService):
    created = await seo.create(_page("home"))
    updated = await seo.update(created.id, _page("home", title="New title"))
    assert updated.title == "New title"


@pytest.mark.asyncio
async def test_update_cannot_take_another_page_id(seo: SeoService):
    await seo.create(_page("home"))
    contact = await seo.create(_page("contact"))
    with pytest.raises(DuplicateEntityError):
        await seo.update(contact.id, IncomingPayload(fields={"pageId": "home"}))
