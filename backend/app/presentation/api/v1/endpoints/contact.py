"""Contact details endpoints — the single ``default`` record."""

from fastapi import APIRouter, Depends

from app.application.schemas import ApiResponse, ContactInfoResponse, IncomingPayload
from app.application.services import ContactService
from app.infrastructure.dependencies import get_contact_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import ok

router = APIRouter(prefix="/admin/contact", tags=["Contact"])


@router.get("", response_model=ApiResponse[ContactInfoResponse])
async def get_contact(service: ContactService = Depends(get_contact_service)):
    contact = await service.load()
    return ok(ContactInfoResponse.model_validate(contact), "Contact information retrieved successfully")


@router.post("", response_model=ApiResponse[ContactInfoResponse])
async def save_contact(
    payload: IncomingPayload = Depends(read_payload),
    service: ContactService = Depends(get_contact_service),
):
    contact = await service.save(payload)
    return ok(ContactInfoResponse.model_validate(contact), "Contact information saved successfully")
