"""Health check endpoint — no database access, always available."""

from fastapi import APIRouter

from app.application.schemas import ApiResponse
from app.config import get_settings
from app.presentation.api.responses import ok

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ApiResponse[dict[str, str]])
async def health_check():
    """Returns the current application health status."""
    settings = get_settings()
    return ok(
        {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.app_env,
        },
        "Service is healthy",
    )
