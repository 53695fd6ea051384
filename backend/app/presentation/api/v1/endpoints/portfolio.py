"""Portfolio endpoints."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    ApiResponse,
    DeleteResult,
    IncomingPayload,
    PortfolioItemResponse,
)
from app.application.services import PortfolioService
from app.domain.entities import PortfolioStatus
from app.infrastructure.dependencies import get_portfolio_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import deleted, ok, paginated

router = APIRouter(prefix="/admin/portfolio", tags=["Portfolio"])


@router.get("", response_model=ApiResponse[list[PortfolioItemResponse]])
async def list_portfolio(
    all_records: bool = Query(False, alias="all"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    status_filter: PortfolioStatus | None = Query(None, alias="status"),
    category: str | None = None,
    service: PortfolioService = Depends(get_portfolio_service),
):
    result = await service.list_records(
        filters={"status": status_filter, "category": category},
        page=page,
        limit=limit,
        all_records=all_records,
    )
    return paginated(result, PortfolioItemResponse, "Portfolio items retrieved successfully")


@router.get("/categories", response_model=ApiResponse[list[str]])
async def list_categories(service: PortfolioService = Depends(get_portfolio_service)):
    return ok(await service.categories(), "Categories retrieved successfully")


@router.get("/{identifier}", response_model=ApiResponse[PortfolioItemResponse])
async def get_portfolio_item(
    identifier: str,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Retrieve a portfolio item by id or by slug."""
    item = await service.get(identifier)
    return ok(PortfolioItemResponse.model_validate(item), "Portfolio item retrieved successfully")


@router.post(
    "", response_model=ApiResponse[PortfolioItemResponse], status_code=status.HTTP_201_CREATED
)
async def create_portfolio_item(
    payload: IncomingPayload = Depends(read_payload),
    service: PortfolioService = Depends(get_portfolio_service),
):
    item = await service.create(payload)
    return ok(PortfolioItemResponse.model_validate(item), "Portfolio item created successfully")


@router.put("/{item_id}", response_model=ApiResponse[PortfolioItemResponse])
async def update_portfolio_item(
    item_id: str,
    payload: IncomingPayload = Depends(read_payload),
    service: PortfolioService = Depends(get_portfolio_service),
):
    item = await service.update(item_id, payload)
    return ok(PortfolioItemResponse.model_validate(item), "Portfolio item updated successfully")


@router.delete("/{item_id}", response_model=ApiResponse[DeleteResult])
async def delete_portfolio_item(
    item_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
):
    outcome = await service.delete(item_id)
    return deleted(outcome, "Portfolio item deleted successfully")
