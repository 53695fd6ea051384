"""Application service (use case) for Portfolio items."""

from app.application.schemas import PortfolioItemCreate, PortfolioItemUpdate
from app.application.services.resource_service import ResourceService
from app.domain.entities import PortfolioItem


class PortfolioService(ResourceService[PortfolioItem]):
    entity_name = "PortfolioItem"
    entity_cls = PortfolioItem
    create_schema = PortfolioItemCreate
    update_schema = PortfolioItemUpdate
    slug_lookup = True
    asset_fields = ("image",)
    gallery_fields = ("gallery",)

    async def categories(self) -> list[str]:
        """Distinct non-empty categories, for the public filter bar."""
        return await self._repository.distinct_values("category")
