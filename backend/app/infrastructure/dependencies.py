"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AssetStorage
from app.application.services import (
    AssetManager,
    BrochureService,
    ContactService,
    DashboardService,
    LeadService,
    PortfolioService,
    SeoService,
    ServiceCatalogService,
    TestimonialService,
    ThemeService,
)
from app.config import Settings, get_settings
from app.domain.entities import ThemeSettings
from app.infrastructure.database.repositories import (
    SQLAlchemyBrochureRepository,
    SQLAlchemyContactInfoRepository,
    SQLAlchemyLeadRepository,
    SQLAlchemyPortfolioRepository,
    SQLAlchemySeoPageRepository,
    SQLAlchemyServiceRepository,
    SQLAlchemyTestimonialRepository,
    SQLAlchemyThemeSettingsRepository,
)
from app.infrastructure.database.session import get_db_session
from app.infrastructure.storage.local_file_storage import LocalFileStorage

# Storage folders under the public directory
TESTIMONIAL_FOLDER = "testimonials"
BROCHURE_FOLDER = "brochures"
LOGO_FOLDER = "admin/logo"
SERVICE_FOLDER = "services"
PORTFOLIO_FOLDER = "portfolio"


def get_asset_storage() -> AssetStorage:
    """Provides the asset storage adapter rooted at the public directory."""
    return LocalFileStorage(get_settings().public_dir)


def _paging(settings: Settings) -> dict:
    return {
        "page_size": settings.default_page_size,
        "max_page_size": settings.max_page_size,
    }


def default_theme(settings: Settings) -> ThemeSettings:
    return ThemeSettings(
        site_name=settings.default_site_name,
        primary_color=settings.default_primary_color,
        secondary_color=settings.default_secondary_color,
        gradient_direction=settings.default_gradient_direction,
    )


async def get_lead_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LeadService, None]:
    """Provides a LeadService instance with its repository wired up."""
    yield LeadService(SQLAlchemyLeadRepository(session), **_paging(get_settings()))


async def get_testimonial_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AssetStorage = Depends(get_asset_storage),
) -> AsyncGenerator[TestimonialService, None]:
    settings = get_settings()
    yield TestimonialService(
        SQLAlchemyTestimonialRepository(session),
        AssetManager(storage, TESTIMONIAL_FOLDER),
        max_avatar_bytes=settings.max_avatar_size_bytes,
        **_paging(settings),
    )


async def get_service_catalog_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AssetStorage = Depends(get_asset_storage),
) -> AsyncGenerator[ServiceCatalogService, None]:
    settings = get_settings()
    yield ServiceCatalogService(
        SQLAlchemyServiceRepository(session),
        AssetManager(storage, SERVICE_FOLDER),
        featured_limit=settings.featured_service_limit,
        **_paging(settings),
    )


async def get_portfolio_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AssetStorage = Depends(get_asset_storage),
) -> AsyncGenerator[PortfolioService, None]:
    yield PortfolioService(
        SQLAlchemyPortfolioRepository(session),
        AssetManager(storage, PORTFOLIO_FOLDER),
        **_paging(get_settings()),
    )


async def get_seo_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SeoService, None]:
    yield SeoService(SQLAlchemySeoPageRepository(session), **_paging(get_settings()))


async def get_brochure_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AssetStorage = Depends(get_asset_storage),
) -> AsyncGenerator[BrochureService, None]:
    yield BrochureService(
        SQLAlchemyBrochureRepository(session),
        AssetManager(storage, BROCHURE_FOLDER),
        **_paging(get_settings()),
    )


async def get_theme_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AssetStorage = Depends(get_asset_storage),
) -> AsyncGenerator[ThemeService, None]:
    """Provides the ThemeService with default branding taken from settings."""
    yield ThemeService(
        SQLAlchemyThemeSettingsRepository(session),
        AssetManager(storage, LOGO_FOLDER),
        defaults=default_theme(get_settings()),
    )


async def get_contact_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ContactService, None]:
    yield ContactService(SQLAlchemyContactInfoRepository(session))


async def get_dashboard_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(
        leads=SQLAlchemyLeadRepository(session),
        services=SQLAlchemyServiceRepository(session),
        portfolio=SQLAlchemyPortfolioRepository(session),
        testimonials=SQLAlchemyTestimonialRepository(session),
        brochures=SQLAlchemyBrochureRepository(session),
    )
