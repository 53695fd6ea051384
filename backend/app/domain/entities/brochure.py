"""Domain entity for downloadable PDF brochures."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class Brochure:
    title: str
    file_name: str
    file_path: str
    id: str = field(default_factory=lambda: str(uuid4()))
    upload_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def asset_references(self) -> list[str]:
        return [self.file_path] if self.file_path else []

    def update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
