"""Brochure endpoints — multipart PDF uploads, addressed by ``?id=`` on PUT/DELETE."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import ApiResponse, BrochureResponse, DeleteResult, IncomingPayload
from app.application.services import BrochureService
from app.infrastructure.dependencies import get_brochure_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/brochures", tags=["Brochures"])


@router.get("", response_model=ApiResponse[list[BrochureResponse]])
async def list_brochures(service: BrochureService = Depends(get_brochure_service)):
    """All brochures, newest upload first."""
    result = await service.list_records(all_records=True)
    return paginated(result, BrochureResponse, "Brochures retrieved successfully")


@router.post("", response_model=ApiResponse[BrochureResponse], status_code=status.HTTP_201_CREATED)
async def upload_brochure(
    payload: IncomingPayload = Depends(read_payload),
    service: BrochureService = Depends(get_brochure_service),
):
    brochure = await service.create(payload)
    return ok(BrochureResponse.model_validate(brochure), "Brochure uploaded successfully")


@router.put("", response_model=ApiResponse[BrochureResponse])
async def update_brochure(
    brochure_id: str = Query(..., alias="id"),
    payload: IncomingPayload = Depends(read_payload),
    service: BrochureService = Depends(get_brochure_service),
):
    """Replace the brochure file (the old file is removed) and/or rename it."""
    brochure = await service.update(brochure_id, payload)
    return ok(BrochureResponse.model_validate(brochure), "Brochure updated successfully")


@router.delete("", response_model=ApiResponse[DeleteResult])
async def delete_brochure(
    brochure_id: str = Query(..., alias="id"),
    service: BrochureService = Depends(get_brochure_service),
):
    outcome = await service.delete(brochure_id)
    return deleted(outcome, "Brochure deleted successfully")
