"""Pydantic DTOs for the Portfolio feature."""

from datetime import datetime

from pydantic import Field

from app.application.schemas.common import CamelModel, OptionalText, RequiredText, TextList
from app.domain.entities import PortfolioStatus


class PortfolioItemCreate(CamelModel):
    title: RequiredText = Field(..., examples=["Chassis Stiffness Study"])
    category: RequiredText = Field(..., examples=["Automotive"])
    description: RequiredText
    client: OptionalText = ""
    content: OptionalText = ""
    image: OptionalText = ""
    gallery: TextList = []
    technologies: TextList = []
    status: PortfolioStatus = PortfolioStatus.PUBLISHED


class PortfolioItemUpdate(CamelModel):
    title: RequiredText | None = None
    category: RequiredText | None = None
    description: RequiredText | None = None
    client: OptionalText | None = None
    content: OptionalText | None = None
    image: OptionalText | None = None
    gallery: TextList | None = None
    technologies: TextList | None = None
    status: PortfolioStatus | None = None


class PortfolioItemResponse(CamelModel):
    id: str
    title: str
    slug: str
    category: str
    description: str
    client: str
    content: str
    image: str
    gallery: list[str]
    technologies: list[str]
    status: PortfolioStatus
    created_at: datetime
    last_updated: datetime
