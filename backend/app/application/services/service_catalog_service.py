"""Application service (use case) for the Service catalog."""

import logging

from app.application.interfaces import DocumentRepository
from app.application.schemas import ServiceCreate, ServiceUpdate
from app.application.services.asset_manager import AssetManager
from app.application.services.resource_service import ResourceService
from app.domain.entities import Service
from app.domain.exceptions import CapacityError

logger = logging.getLogger(__name__)


class ServiceCatalogService(ResourceService[Service]):
    """Services addressable by id or slug, with a cap on featured entries."""

    entity_name = "Service"
    entity_cls = Service
    create_schema = ServiceCreate
    update_schema = ServiceUpdate
    slug_lookup = True
    asset_fields = ("image",)
    gallery_fields = ("gallery",)

    def __init__(
        self,
        repository: DocumentRepository[Service],
        assets: AssetManager | None = None,
        featured_limit: int = 3,
        **kwargs,
    ):
        super().__init__(repository, assets, **kwargs)
        self._featured_limit = featured_limit

    async def _check_rules(self, fields, current: Service | None) -> None:
        # only a transition into "featured" consumes a slot
        if not fields.get("featured") or (current is not None and current.featured):
            return
        featured = await self._repository.count({"featured": True})
        if featured >= self._featured_limit:
            logger.info("Rejected featuring %r: %d already featured", fields.get("title"), featured)
            raise CapacityError(
                "Service",
                self._featured_limit,
                f"Maximum limit of {self._featured_limit} featured services reached. "
                "Please unfeature an existing service to feature this one.",
            )
