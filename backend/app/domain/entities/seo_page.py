"""Domain entity for per-page SEO metadata."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class SeoPage:
    """Title/description/keywords for one public page, keyed by ``page_id``."""

    page_id: str
    page_name: str
    title: str
    description: str
    keywords: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
