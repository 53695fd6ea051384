"""Pydantic DTOs for downloadable brochures."""

from datetime import datetime

from app.application.schemas.common import CamelModel, RequiredText


class BrochureRecord(CamelModel):
    """Stored brochure fields; ``file_name``/``file_path`` come from the upload."""

    title: RequiredText
    file_name: RequiredText
    file_path: RequiredText


class BrochureUpdate(CamelModel):
    title: RequiredText | None = None


class BrochureResponse(CamelModel):
    id: str
    title: str
    file_name: str
    file_path: str
    upload_date: datetime
    last_updated: datetime
