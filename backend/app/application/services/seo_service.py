"""Application service (use case) for per-page SEO metadata."""

from app.application.schemas import SeoPageCreate, SeoPageUpdate
from app.application.services.resource_service import ResourceService
from app.domain.entities import SeoPage
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.domain.slug import slugify


class SeoService(ResourceService[SeoPage]):
    """SEO pages keyed by a unique logical ``page_id`` (``home``, ``contact`` ...)."""

    entity_name = "SeoPage"
    entity_cls = SeoPage
    create_schema = SeoPageCreate
    update_schema = SeoPageUpdate

    async def get_by_page_id(self, page_id: str) -> SeoPage:
        page = await self._repository.get_one_by("page_id", slugify(page_id))
        if page is None:
            raise EntityNotFoundError(self.entity_name, page_id)
        return page

    async def _check_rules(self, fields, current: SeoPage | None) -> None:
        existing = await self._repository.get_one_by("page_id", fields["page_id"])
        if existing is not None and (current is None or existing.id != current.id):
            raise DuplicateEntityError(self.entity_name, "pageId", fields["page_id"])
