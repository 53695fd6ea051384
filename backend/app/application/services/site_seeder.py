"""Idempotent startup seeding of default site content from a YAML file.

The file may contain two top-level keys::

    seo_pages:        # list of SEO page records (camelCase or snake_case keys)
      - pageId: home
        pageName: Home
        ...
    contact:          # ContactInfo fields, applied only when none are stored

Existing records are never overwritten. The theme singleton is always
ensured so the public site has branding on first boot.
"""

import logging
from pathlib import Path

import yaml

from app.application.schemas.payload import IncomingPayload
from app.application.services.contact_service import ContactService
from app.application.services.seo_service import SeoService
from app.application.services.theme_service import ThemeService
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def load_seed_file(path: Path) -> dict:
    if not path.exists():
        logger.info("Seed file %s not found; skipping content seed", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a mapping at the top level")
    return data


class SiteSeeder:
    def __init__(self, seo: SeoService, contact: ContactService, theme: ThemeService):
        self._seo = seo
        self._contact = contact
        self._theme = theme

    async def seed(self, data: dict) -> int:
        """Insert missing defaults; returns the number of records created."""
        created = 0
        for page in data.get("seo_pages") or []:
            page_id = page.get("pageId") or page.get("page_id") or ""
            try:
                await self._seo.get_by_page_id(page_id)
                continue
            except EntityNotFoundError:
                pass
            await self._seo.create(IncomingPayload(fields=dict(page)))
            created += 1

        contact = data.get("contact")
        if contact and not await self._contact.exists():
            await self._contact.save(IncomingPayload(fields=dict(contact)))
            created += 1

        await self._theme.load()
        logger.info("Seeded %d default record(s)", created)
        return created
