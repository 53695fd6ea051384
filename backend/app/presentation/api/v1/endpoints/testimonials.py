"""Testimonial endpoints — accept JSON or multipart with an ``avatar`` file."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    DeleteResult,
    IncomingPayload,
    TestimonialResponse,
)
from app.application.services import TestimonialService
from app.domain.entities import TestimonialStatus
from app.infrastructure.dependencies import get_testimonial_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/testimonials", tags=["Testimonials"])


@router.get("", response_model=ApiResponse[list[TestimonialResponse]])
async def list_testimonials(
    all_records: bool = Query(False, alias="all"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    status_filter: TestimonialStatus | None = Query(None, alias="status"),
    service: TestimonialService = Depends(get_testimonial_service),
):
    result = await service.list_records(
        filters={"status": status_filter}, page=page, limit=limit, all_records=all_records
    )
    return paginated(result, TestimonialResponse, "Testimonials retrieved successfully")


@router.get("/{testimonial_id}", response_model=ApiResponse[TestimonialResponse])
async def get_testimonial(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
):
    testimonial = await service.get(testimonial_id)
    return ok(TestimonialResponse.model_validate(testimonial), "Testimonial retrieved successfully")


@router.post(
    "", response_model=ApiResponse[TestimonialResponse], status_code=status.HTTP_201_CREATED
)
async def create_testimonial(
    payload: IncomingPayload = Depends(read_payload),
    service: TestimonialService = Depends(get_testimonial_service),
):
    testimonial = await service.create(payload)
    return ok(TestimonialResponse.model_validate(testimonial), "Testimonial created successfully")


@router.put("/{testimonial_id}", response_model=ApiResponse[TestimonialResponse])
async def update_testimonial(
    testimonial_id: str,
    payload: IncomingPayload = Depends(read_payload),
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Update a testimonial; the stored avatar is kept unless a new one is uploaded."""
    testimonial = await service.update(testimonial_id, payload)
    return ok(TestimonialResponse.model_validate(testimonial), "Testimonial updated successfully")


@router.delete("/{testimonial_id}", response_model=ApiResponse[DeleteResult])
async def delete_testimonial(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
):
    outcome = await service.delete(testimonial_id)
    return deleted(outcome, "Testimonial deleted successfully")
