"""Admin dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from app.application.schemas import ApiResponse, DashboardResponse
from app.application.services import DashboardService
from app.infrastructure.dependencies import get_dashboard_service
from app.presentation.api.responses import ok

router = APIRouter(prefix="/admin/dashboard", tags=["Dashboard"])


@router.get("", response_model=ApiResponse[DashboardResponse])
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    summary = await service.summary()
    return ok(DashboardResponse.model_validate(summary), "Dashboard data retrieved successfully")
