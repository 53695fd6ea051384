"""SEO metadata endpoints. Updates carry the record id in the body, deletes in the query."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import ApiResponse, DeleteResult, IncomingPayload, SeoPageResponse
from app.application.services import SeoService
from app.domain.exceptions import ValidationError
from app.infrastructure.dependencies import get_seo_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/seo", tags=["SEO"])


@router.get("", response_model=ApiResponse[list[SeoPageResponse]])
async def list_seo_pages(service: SeoService = Depends(get_seo_service)):
    result = await service.list_records(all_records=True)
    return paginated(result, SeoPageResponse, "SEO data retrieved successfully")


@router.get("/{page_id}", response_model=ApiResponse[SeoPageResponse])
async def get_seo_page(page_id: str, service: SeoService = Depends(get_seo_service)):
    """Retrieve the SEO record for a logical page key such as ``home``."""
    page = await service.get_by_page_id(page_id)
    return ok(SeoPageResponse.model_validate(page), "SEO data retrieved successfully")


@router.post("", response_model=ApiResponse[SeoPageResponse], status_code=status.HTTP_201_CREATED)
async def create_seo_page(
    payload: IncomingPayload = Depends(read_payload),
    service: SeoService = Depends(get_seo_service),
):
    page = await service.create(payload)
    return ok(SeoPageResponse.model_validate(page), "SEO data created successfully")


@router.put("", response_model=ApiResponse[SeoPageResponse])
async def update_seo_page(
    payload: IncomingPayload = Depends(read_payload),
    service: SeoService = Depends(get_seo_service),
):
    record_id = payload.fields.pop("id", None) or payload.fields.pop("_id", None)
    if not record_id:
        raise ValidationError.single("id", "is required")
    page = await service.update(str(record_id), payload)
    return ok(SeoPageResponse.model_validate(page), "SEO data updated successfully")


@router.delete("", response_model=ApiResponse[DeleteResult])
async def delete_seo_page(
    record_id: str = Query(..., alias="id"),
    service: SeoService = Depends(get_seo_service),
):
    outcome = await service.delete(record_id)
    return deleted(outcome, "SEO data deleted successfully")
