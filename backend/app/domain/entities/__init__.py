from .brochure import Brochure
from .contact_info import ContactInfo, DEFAULT_CONTACT_KEY
from .lead import Lead, LeadPriority, LeadSource, LeadStatus
from .portfolio_item import PortfolioItem, PortfolioStatus
from .seo_page import SeoPage
from .service import Service, ServiceStatus
from .testimonial import Testimonial, TestimonialStatus
from .theme_settings import ThemeSettings, DEFAULT_THEME_KEY

__all__ = [
    "Brochure",
    "ContactInfo",
    "DEFAULT_CONTACT_KEY",
    "Lead",
    "LeadPriority",
    "LeadSource",
    "LeadStatus",
    "PortfolioItem",
    "PortfolioStatus",
    "SeoPage",
    "Service",
    "ServiceStatus",
    "Testimonial",
    "TestimonialStatus",
    "ThemeSettings",
    "DEFAULT_THEME_KEY",
]
