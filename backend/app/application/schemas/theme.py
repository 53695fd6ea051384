"""Pydantic DTOs for the site theme singleton."""

from datetime import datetime

from app.application.schemas.common import CamelModel, HexColor, OptionalText, RequiredText


class ThemeSettingsRecord(CamelModel):
    """Full theme record, used to re-check the merged state on every save.

    ``logo`` and ``favicon`` hold either a stored reference or, on input, a
    ``data:image/...;base64,`` URL that the service writes to disk.
    """

    site_name: RequiredText
    logo: OptionalText = ""
    favicon: OptionalText = ""
    primary_color: HexColor
    secondary_color: HexColor
    gradient_direction: RequiredText
    is_active: bool = True


class ThemeSettingsUpdate(CamelModel):
    site_name: RequiredText | None = None
    logo: OptionalText | None = None
    favicon: OptionalText | None = None
    primary_color: HexColor | None = None
    secondary_color: HexColor | None = None
    gradient_direction: RequiredText | None = None
    is_active: bool | None = None


class ThemeSettingsResponse(CamelModel):
    id: str
    site_name: str
    logo: str | None
    favicon: str | None
    primary_color: str
    secondary_color: str
    gradient_direction: str
    is_active: bool
    last_updated: datetime
