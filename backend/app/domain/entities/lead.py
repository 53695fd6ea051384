"""Domain entity for leads captured from the public site and the admin area."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class LeadStatus(str, Enum):
    """Sales pipeline position. Transitions are unconstrained."""

    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    CONVERTED = "converted"
    CLOSED = "closed"


class LeadPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LeadSource(str, Enum):
    """Which form produced the lead."""

    CONTACT = "contact"
    QUOTATION = "quotation"
    LEAD = "lead"
    BROCHURE = "brochure"


@dataclass
class Lead:
    """A prospective customer enquiry."""

    full_name: str
    email: str
    phone: str = ""
    company: str = ""
    service: str = ""
    message: str = ""
    project_description: str = ""
    additional_requirements: str = ""
    status: LeadStatus = LeadStatus.NEW
    priority: LeadPriority = LeadPriority.MEDIUM
    form_source: LeadSource = LeadSource.CONTACT
    id: str = field(default_factory=lambda: str(uuid4()))
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply validated field changes and refresh last_updated."""
        for name, value in changes.items():
            setattr(self, name, value)
        self.last_updated = datetime.now(timezone.utc)
