"""Domain entity for the site-wide theme — a singleton keyed by ``default``."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

DEFAULT_THEME_KEY = "default"


@dataclass
class ThemeSettings:
    """Branding configuration: site name, logo, favicon and gradient colours.

    There is at most one record; it is always addressed by ``DEFAULT_THEME_KEY``
    and written with upsert semantics.
    """

    site_name: str = "Filigree Solutions"
    logo: str | None = None
    favicon: str | None = None
    primary_color: str = "#2563EB"
    secondary_color: str = "#9333EA"
    gradient_direction: str = "135deg"
    is_active: bool = True
    id: str = DEFAULT_THEME_KEY
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def asset_references(self) -> list[str]:
        return [ref for ref in (self.logo, self.favicon) if ref]

    def update(self, **changes: Any) -> None:
        changes.pop("id", None)
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
