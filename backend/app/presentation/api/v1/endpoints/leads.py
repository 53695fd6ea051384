"""Lead endpoints — public form submissions and the admin leads table."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import ApiResponse, DeleteResult, IncomingPayload, LeadResponse
from app.application.services import LeadService
from app.domain.entities import LeadPriority, LeadSource, LeadStatus
from app.infrastructure.dependencies import get_lead_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/leads", tags=["Leads"])


@router.get("", response_model=ApiResponse[list[LeadResponse]])
async def list_leads(
    all_records: bool = Query(False, alias="all"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    status_filter: LeadStatus | None = Query(None, alias="status"),
    priority: LeadPriority | None = None,
    source: LeadSource | None = None,
    search: str | None = None,
    service: LeadService = Depends(get_lead_service),
):
    """List leads; ``all=true`` skips pagination."""
    result = await service.list_records(
        filters={"status": status_filter, "priority": priority, "form_source": source},
        search=search,
        page=page,
        limit=limit,
        all_records=all_records,
    )
    return paginated(result, LeadResponse, "Leads retrieved successfully")


@router.get("/{lead_id}", response_model=ApiResponse[LeadResponse])
async def get_lead(lead_id: str, service: LeadService = Depends(get_lead_service)):
    lead = await service.get(lead_id)
    return ok(LeadResponse.model_validate(lead), "Lead retrieved successfully")


@router.post("", response_model=ApiResponse[LeadResponse], status_code=status.HTTP_201_CREATED)
async def create_lead(
    payload: IncomingPayload = Depends(read_payload),
    service: LeadService = Depends(get_lead_service),
):
    """Submit a lead from the contact, quotation or brochure form."""
    lead = await service.create(payload)
    return ok(LeadResponse.model_validate(lead), "Lead submitted successfully")


@router.put("/{lead_id}", response_model=ApiResponse[LeadResponse])
async def update_lead(
    lead_id: str,
    payload: IncomingPayload = Depends(read_payload),
    service: LeadService = Depends(get_lead_service),
):
    lead = await service.update(lead_id, payload)
    return ok(LeadResponse.model_validate(lead), "Lead updated successfully")


@router.delete("/{lead_id}", response_model=ApiResponse[DeleteResult])
async def delete_lead(lead_id: str, service: LeadService = Depends(get_lead_service)):
    outcome = await service.delete(lead_id)
    return deleted(outcome, "Lead deleted successfully")
