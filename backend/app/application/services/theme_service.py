"""Application service for the site theme singleton."""

import logging
from dataclasses import asdict

from app.application.interfaces import SingletonRepository
from app.application.schemas import ThemeSettingsRecord, ThemeSettingsUpdate
from app.application.schemas.payload import IncomingPayload
from app.application.services.asset_manager import AssetManager, is_data_url
from app.application.validation import validate_changes, validate_record
from app.domain.entities import DEFAULT_THEME_KEY, ThemeSettings
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

_IMAGE_FIELDS = ("logo", "favicon")


class ThemeService:
    """Loads, saves and resets the single ``default`` theme record.

    ``logo`` and ``favicon`` arrive as ``data:image/...`` URLs; they are
    written to storage and the record keeps the public reference. The file a
    replaced image pointed to is removed after the record is saved.
    """

    def __init__(
        self,
        repository: SingletonRepository[ThemeSettings],
        assets: AssetManager,
        defaults: ThemeSettings | None = None,
    ):
        self._repository = repository
        self._assets = assets
        self._defaults = defaults or ThemeSettings()

    def _default_theme(self) -> ThemeSettings:
        fields = asdict(self._defaults)
        fields.pop("last_updated")
        return ThemeSettings(**fields)

    async def load(self) -> ThemeSettings:
        """Return the stored theme, seeding it with the defaults when absent."""
        theme = await self._repository.get(DEFAULT_THEME_KEY)
        if theme is None:
            logger.info("No theme stored; seeding defaults")
            theme = await self._repository.save(self._default_theme())
        return theme

    async def update(self, payload: IncomingPayload) -> ThemeSettings:
        theme = await self.load()
        changes = validate_changes(ThemeSettingsUpdate, payload.fields)
        for name in _IMAGE_FIELDS:
            value = changes.get(name)
            if is_data_url(value) and not value.startswith("data:image/"):
                raise ValidationError.single(name, "must be an image data URL")

        current = {name: getattr(theme, name) for name in ThemeSettingsRecord.model_fields}
        merged = validate_record(ThemeSettingsRecord, {**current, **changes})

        previous = set(theme.asset_references())
        try:
            for name in _IMAGE_FIELDS:
                if is_data_url(merged[name]):
                    merged[name] = await self._assets.persist_inline(merged[name], name, name)
                # empty string clears the image
                merged[name] = merged[name] or None
            theme.update(**merged)
            saved = await self._repository.save(theme)
            await self._repository.commit()
        except Exception:
            await self._assets.discard()
            raise
        self._assets.commit()

        await self._assets.cleanup(previous - set(saved.asset_references()))
        logger.info("Theme settings updated")
        return saved

    async def reset(self) -> ThemeSettings:
        """Restore the default theme; stored logo and favicon files are removed."""
        current = await self._repository.get(DEFAULT_THEME_KEY)
        saved = await self._repository.save(self._default_theme())
        await self._repository.commit()
        if current is not None:
            await self._assets.cleanup(
                set(current.asset_references()) - set(saved.asset_references())
            )
        logger.info("Theme settings reset to defaults")
        return saved
