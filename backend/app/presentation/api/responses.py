"""Envelope builders shared by the v1 endpoints."""

from typing import Any

from pydantic import BaseModel

from app.application.interfaces import Page
from app.application.schemas import ApiResponse, DeleteResult, PaginationMeta
from app.application.services import DeleteOutcome


def ok(data: Any, message: str) -> ApiResponse:
    return ApiResponse(data=data, message=message)


def paginated(page: Page, schema: type[BaseModel], message: str) -> ApiResponse:
    """List envelope; ``pagination`` is omitted for ``all=true`` reads."""
    items = [schema.model_validate(item) for item in page.items]
    pagination = None
    if page.limit is not None:
        pagination = PaginationMeta(
            page=page.page, limit=page.limit, total=page.total, pages=page.pages
        )
    return ApiResponse(data=items, message=message, pagination=pagination)


def deleted(outcome: DeleteOutcome, message: str) -> ApiResponse[DeleteResult]:
    return ApiResponse(
        data=DeleteResult(id=outcome.entity_id, warnings=outcome.cleanup.warnings()),
        message=message,
    )
