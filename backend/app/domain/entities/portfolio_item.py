"""Domain entity for portfolio case studies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from app.domain.slug import slugify


class PortfolioStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass
class PortfolioItem:
    """A completed project shown on the portfolio pages, addressable by slug."""

    title: str
    category: str
    description: str
    client: str = ""
    content: str = ""
    image: str = ""
    gallery: list[str] = field(default_factory=list)
    technologies: list[str] = field(default_factory=list)
    status: PortfolioStatus = PortfolioStatus.PUBLISHED
    id: str = field(default_factory=lambda: str(uuid4()))
    slug: str = field(init=False, default="")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.slug = slugify(self.title)

    def asset_references(self) -> list[str]:
        refs = [self.image] if self.image else []
        return refs + [ref for ref in self.gallery if ref]

    def update(self, **changes: Any) -> None:
        changes.pop("slug", None)
        for name, value in changes.items():
            setattr(self, name, value)
        self.slug = slugify(self.title)
        self.last_updated = datetime.now(timezone.utc)
