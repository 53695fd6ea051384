"""Pydantic DTOs for the contact-details singleton."""

from datetime import datetime

from app.application.schemas.common import CamelModel, OptionalEmail, OptionalText


class ContactInfoRecord(CamelModel):
    """Every field is optional text; ``email`` is checked only when non-empty."""

    phone: OptionalText = ""
    email: OptionalEmail = ""
    address: OptionalText = ""
    city: OptionalText = ""
    state: OptionalText = ""
    pincode: OptionalText = ""
    country: OptionalText = ""
    facebook: OptionalText = ""
    twitter: OptionalText = ""
    linkedin: OptionalText = ""
    instagram: OptionalText = ""
    youtube: OptionalText = ""
    whatsapp: OptionalText = ""
    telegram: OptionalText = ""
    github: OptionalText = ""
    behance: OptionalText = ""
    dribbble: OptionalText = ""
    map_embed_code: OptionalText = ""
    page_title: OptionalText = ""
    page_description: OptionalText = ""
    office_title: OptionalText = ""
    office_description: OptionalText = ""


class ContactInfoUpdate(CamelModel):
    phone: OptionalText | None = None
    email: OptionalEmail | None = None
    address: OptionalText | None = None
    city: OptionalText | None = None
    state: OptionalText | None = None
    pincode: OptionalText | None = None
    country: OptionalText | None = None
    facebook: OptionalText | None = None
    twitter: OptionalText | None = None
    linkedin: OptionalText | None = None
    instagram: OptionalText | None = None
    youtube: OptionalText | None = None
    whatsapp: OptionalText | None = None
    telegram: OptionalText | None = None
    github: OptionalText | None = None
    behance: OptionalText | None = None
    dribbble: OptionalText | None = None
    map_embed_code: OptionalText | None = None
    page_title: OptionalText | None = None
    page_description: OptionalText | None = None
    office_title: OptionalText | None = None
    office_description: OptionalText | None = None


class ContactInfoResponse(ContactInfoRecord):
    id: str
    last_updated: datetime
