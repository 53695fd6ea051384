"""Pydantic DTOs for the Service catalog feature.

``slug`` is deliberately absent from the input schemas: it is derived from the
title by the entity and cannot be set by clients.
"""

from datetime import datetime

from pydantic import Field

from app.application.schemas.common import CamelModel, OptionalText, RequiredText, TextList
from app.domain.entities import ServiceStatus


class ServiceCreate(CamelModel):
    """Schema for a new service; ``image``/``gallery`` take references or data URLs."""

    title: RequiredText = Field(..., examples=["CAD & CAE Services"])
    description: RequiredText
    short_description: OptionalText = ""
    category: OptionalText = ""
    image: OptionalText = ""
    gallery: TextList = []
    features: TextList = []
    status: ServiceStatus = ServiceStatus.ACTIVE
    featured: bool = False


class ServiceUpdate(CamelModel):
    title: RequiredText | None = None
    description: RequiredText | None = None
    short_description: OptionalText | None = None
    category: OptionalText | None = None
    image: OptionalText | None = None
    gallery: TextList | None = None
    features: TextList | None = None
    status: ServiceStatus | None = None
    featured: bool | None = None


class ServiceResponse(CamelModel):
    id: str
    title: str
    slug: str
    description: str
    short_description: str
    category: str
    image: str
    gallery: list[str]
    features: list[str]
    status: ServiceStatus
    featured: bool
    created_at: datetime
    last_updated: datetime
