"""Service catalog endpoints."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import ApiResponse, DeleteResult, IncomingPayload, ServiceResponse
from app.application.services import ServiceCatalogService
from app.domain.entities import ServiceStatus
from app.infrastructure.dependencies import get_service_catalog_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/services", tags=["Services"])


@router.get("", response_model=ApiResponse[list[ServiceResponse]])
async def list_services(
    all_records: bool = Query(False, alias="all"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    status_filter: ServiceStatus | None = Query(None, alias="status"),
    featured: bool | None = None,
    is_admin: bool = Query(False, alias="isAdmin"),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    """List services. The public site only sees active ones unless a status is given."""
    if status_filter is None and not is_admin:
        status_filter = ServiceStatus.ACTIVE
    result = await service.list_records(
        filters={"status": status_filter, "featured": featured},
        page=page,
        limit=limit,
        all_records=all_records,
    )
    return paginated(result, ServiceResponse, "Services retrieved successfully")


@router.get("/{identifier}", response_model=ApiResponse[ServiceResponse])
async def get_service(
    identifier: str,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    """Retrieve a service by id or by slug."""
    item = await service.get(identifier)
    return ok(ServiceResponse.model_validate(item), "Service retrieved successfully")


@router.post("", response_model=ApiResponse[ServiceResponse], status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: IncomingPayload = Depends(read_payload),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    item = await service.create(payload)
    return ok(ServiceResponse.model_validate(item), "Service created successfully")


@router.put("/{service_id}", response_model=ApiResponse[ServiceResponse])
async def update_service(
    service_id: str,
    payload: IncomingPayload = Depends(read_payload),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    item = await service.update(service_id, payload)
    return ok(ServiceResponse.model_validate(item), "Service updated successfully")


@router.delete("/{service_id}", response_model=ApiResponse[DeleteResult])
async def delete_service(
    service_id: str,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    outcome = await service.delete(service_id)
    return deleted(outcome, "Service deleted successfully")
