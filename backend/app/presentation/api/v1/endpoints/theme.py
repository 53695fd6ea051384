"""Theme settings endpoints — the single ``default`` record."""

from fastapi import APIRouter, Depends

from app.application.schemas import ApiResponse, IncomingPayload, ThemeSettingsResponse
from app.application.services import ThemeService
from app.infrastructure.dependencies import get_theme_service
from app.presentation.api.payloads import read_payload
from app.presentation.api.responses import ok

router = APIRouter(prefix="/admin/theme", tags=["Theme"])


@router.get("", response_model=ApiResponse[ThemeSettingsResponse])
async def get_theme(service: ThemeService = Depends(get_theme_service)):
    theme = await service.load()
    return ok(ThemeSettingsResponse.model_validate(theme), "Theme settings retrieved successfully")


@router.put("", response_model=ApiResponse[ThemeSettingsResponse])
async def update_theme(
    payload: IncomingPayload = Depends(read_payload),
    service: ThemeService = Depends(get_theme_service),
):
    """Upsert theme settings; ``logo``/``favicon`` may be base64 image data URLs."""
    theme = await service.update(payload)
    return ok(ThemeSettingsResponse.model_validate(theme), "Theme settings updated successfully")


@router.post("/reset", response_model=ApiResponse[ThemeSettingsResponse])
async def reset_theme(service: ThemeService = Depends(get_theme_service)):
    theme = await service.reset()
    return ok(ThemeSettingsResponse.model_validate(theme), "Theme settings reset to defaults")
