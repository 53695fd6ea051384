"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from app.presentation.api.v1.endpoints.leads import router as leads_router
from app.presentation.api.v1.endpoints.testimonials import router as testimonials_router
from app.presentation.api.v1.endpoints.services import router as services_router
from app.presentation.api.v1.endpoints.portfolio import router as portfolio_router
from app.presentation.api.v1.endpoints.theme import router as theme_router
from app.presentation.api.v1.endpoints.seo import router as seo_router
from app.presentation.api.v1.endpoints.brochures import router as brochures_router
from app.presentation.api.v1.endpoints.contact import router as contact_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(leads_router)
router.include_router(testimonials_router)
router.include_router(services_router)
router.include_router(portfolio_router)
router.include_router(theme_router)
router.include_router(seo_router)
router.include_router(brochures_router)
router.include_router(contact_router)
