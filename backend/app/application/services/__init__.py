from .asset_manager import AssetCleanupReport, AssetManager
from .brochure_service import BrochureService
from .contact_service import ContactService
from .dashboard_service import DashboardService, DashboardSummary
from .lead_service import LeadService
from .portfolio_service import PortfolioService
from .resource_service import DeleteOutcome, ResourceService
from .seo_service import SeoService
from .service_catalog_service import ServiceCatalogService
from .site_seeder import SiteSeeder, load_seed_file
from .testimonial_service import TestimonialService
from .theme_service import ThemeService

__all__ = [
    "AssetCleanupReport",
    "AssetManager",
    "BrochureService",
    "ContactService",
    "DashboardService",
    "DashboardSummary",
    "DeleteOutcome",
    "LeadService",
    "PortfolioService",
    "ResourceService",
    "SeoService",
    "ServiceCatalogService",
    "SiteSeeder",
    "load_seed_file",
    "TestimonialService",
    "ThemeService",
]
