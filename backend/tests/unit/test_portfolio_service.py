"""Unit tests for the PortfolioService."""

import pytest

from fakes import FakeAssetStorage, FakeDocumentRepository

from app.application.schemas import IncomingPayload
from app.application.services import AssetManager, PortfolioService
from app.domain.entities import PortfolioStatus


def _item(title: str, category: str, **extra) -> IncomingPayload:
    return IncomingPayload(
        fields={"title": title, "category": category, "description": "Case study", **extra}
    )


@pytest.fixture
def portfolio() -> PortfolioService:
    return PortfolioService(FakeDocumentRepository(), AssetManager(FakeAssetStorage(), "portfolio"))


@pytest.mark.asyncio
async def test_create_defaults(portfolio: PortfolioService):
    item = await portfolio.create(_item("Chassis Stiffness Study", "Automotive"))
    assert item.slug == "chassis-stiffness-study"
    assert item.status == PortfolioStatus.PUBLISHED
    assert item.technologies == []


@pytest.mark.asyncio
async def test_categories_are_distinct_and_sorted(portfolio: PortfolioService):
    await portfolio.create(_item("A", "Industrial"))
    await portfolio.create(_item("B", "Automotive"))
    await portfolio.create(_item("C", "Automotive"))

    assert await portfolio.categories() == ["Automotive", "Industrial"]


@pytest.mark.asyncio
async def test_filter_by_category_and_status(portfolio: PortfolioService):
    await portfolio.create(_item("A", "Industrial"))
    await portfolio.create(_item("B", "Automotive", status="draft"))
    await portfolio.create(_item("C", "Automotive"))

    published = await portfolio.list_records(
        filters={"category": "Automotive", "status": PortfolioStatus.PUBLISHED}, all_records=True
    )
    assert [item.title for item in published.items] == ["C"]


@pytest.mark.asyncio
async def test_lookup_by_slug(portfolio: PortfolioService):
    created = await portfolio.create(_item("Pump Housing CFD", "Industrial"))
    assert (await portfolio.get("pump-housing-cfd")).id == created.id
