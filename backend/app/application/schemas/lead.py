"""Pydantic DTOs (Data Transfer Objects) for the Lead feature."""

from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator, EmailStr, Field

from app.application.schemas.common import CamelModel, OptionalText, RequiredText
from app.domain.entities import LeadPriority, LeadSource, LeadStatus


def _strip(value):
    return value.strip() if isinstance(value, str) else value


LeadEmail = Annotated[EmailStr, BeforeValidator(_strip)]


class LeadCreate(CamelModel):
    """Schema for a new lead — also the full-record schema re-checked on update."""

    full_name: RequiredText = Field(..., examples=["Asha Verma"])
    email: LeadEmail = Field(..., examples=["asha@example.com"])
    phone: OptionalText = ""
    company: OptionalText = ""
    service: OptionalText = Field("", examples=["CAE Analysis"])
    message: OptionalText = ""
    project_description: OptionalText = ""
    additional_requirements: OptionalText = ""
    status: LeadStatus = LeadStatus.NEW
    priority: LeadPriority = LeadPriority.MEDIUM
    form_source: LeadSource = LeadSource.CONTACT


class LeadUpdate(CamelModel):
    """Schema for updating an existing lead — all fields optional."""

    full_name: RequiredText | None = None
    email: LeadEmail | None = None
    phone: OptionalText | None = None
    company: OptionalText | None = None
    service: OptionalText | None = None
    message: OptionalText | None = None
    project_description: OptionalText | None = None
    additional_requirements: OptionalText | None = None
    status: LeadStatus | None = None
    priority: LeadPriority | None = None
    form_source: LeadSource | None = None


class LeadResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    full_name: str
    email: str
    phone: str
    company: str
    service: str
    message: str
    project_description: str
    additional_requirements: str
    status: LeadStatus
    priority: LeadPriority
    form_source: LeadSource
    submitted_at: datetime
    last_updated: datetime
