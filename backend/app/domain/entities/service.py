"""Domain entity for the engineering services catalog."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from app.domain.slug import slugify


class ServiceStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class Service:
    """An offered service (e.g. CAD modelling, CAE analysis).

    ``slug`` is always derived from ``title``; it cannot be passed in and is
    recomputed on every update.
    """

    title: str
    description: str
    short_description: str = ""
    category: str = ""
    image: str = ""
    gallery: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    status: ServiceStatus = ServiceStatus.ACTIVE
    featured: bool = False
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
