"""Domain entity for customer testimonials shown on the home page."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class TestimonialStatus(str, Enum):
    PUBLISHED = "published"
    DRAFT = "draft"


@dataclass
class Testimonial:
    """A customer quote with an optional avatar image."""

    name: str
    location: str
    content: str
    rating: int
    services_type: str
    avatar: str = ""
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: TestimonialStatus = TestimonialStatus.PUBLISHED
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def asset_references(self) -> list[str]:
        return [self.avatar] if self.avatar else []

    def update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
