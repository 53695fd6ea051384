"""Pydantic DTOs for per-page SEO metadata."""

from datetime import datetime

from pydantic import Field

from app.application.schemas.common import CamelModel, OptionalText, RequiredText, SlugKey


class SeoPageCreate(CamelModel):
    """``pageId`` is normalised to slug form, so ``"About Us"`` is stored as ``about-us``."""

    page_id: SlugKey = Field(..., examples=["home"])
    page_name: RequiredText = Field(..., examples=["Home"])
    title: RequiredText
    description: RequiredText
    keywords: OptionalText = ""


class SeoPageUpdate(CamelModel):
    page_id: SlugKey | None = None
    page_name: RequiredText | None = None
    title: RequiredText | None = None
    description: RequiredText | None = None
    keywords: OptionalText | None = None


class SeoPageResponse(CamelModel):
    id: str
    page_id: str
    page_name: str
    title: str
    description: str
    keywords: str
    created_at: datetime
    last_updated: datetime
