"""Domain entity for the company contact details — a singleton keyed by ``default``."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

DEFAULT_CONTACT_KEY = "default"


@dataclass
class ContactInfo:
    """Address, social links and contact-page copy shown across the public site."""

    phone: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    country: str = ""

    facebook: str = ""
    twitter: str = ""
    linkedin: str = ""
    instagram: str = ""
    youtube: str = ""
    whatsapp: str = ""
    telegram: str = ""
    github: str = ""
    behance: str = ""
    dribbble: str = ""

    map_embed_code: str = ""
    page_title: str = ""
    page_description: str = ""
    office_title: str = ""
    office_description: str = ""

    id: str = DEFAULT_CONTACT_KEY
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        changes.pop("id", None)
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
