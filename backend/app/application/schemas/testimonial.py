"""Pydantic DTOs for the Testimonial feature."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from app.application.schemas.common import CamelModel, OptionalText, RequiredText
from app.domain.entities import TestimonialStatus


def _date_or_now(value: Any) -> Any:
    # HTML date inputs post an empty string when left blank
    if value is None or (isinstance(value, str) and not value.strip()):
        return datetime.now(timezone.utc)
    return value


TestimonialDate = Annotated[datetime, BeforeValidator(_date_or_now)]


class TestimonialCreate(CamelModel):
    """Schema for a new testimonial (the avatar arrives as a separate upload)."""

    name: RequiredText = Field(..., examples=["Rahul Mehta"])
    location: RequiredText = Field(..., examples=["Pune, India"])
    content: RequiredText
    rating: int = Field(..., ge=1, le=5)
    services_type: RequiredText = Field(..., examples=["FEA Simulation"])
    avatar: OptionalText = ""
    date: TestimonialDate = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: TestimonialStatus = TestimonialStatus.PUBLISHED


class TestimonialUpdate(CamelModel):
    name: RequiredText | None = None
    location: RequiredText | None = None
    content: RequiredText | None = None
    rating: int | None = Field(None, ge=1, le=5)
    services_type: RequiredText | None = None
    avatar: OptionalText | None = None
    date: TestimonialDate | None = None
    status: TestimonialStatus | None = None


class TestimonialResponse(CamelModel):
    id: str
    name: str
    location: str
    content: str
    rating: int
    services_type: str
    avatar: str
    date: datetime
    status: TestimonialStatus
    created_at: datetime
    last_updated: datetime
