from .brochure import BrochureModel
from .lead import LeadModel
from .portfolio_item import PortfolioItemModel
from .seo_page import SeoPageModel
from .service import ServiceModel
from .site_settings import ContactInfoModel, ThemeSettingsModel
from .testimonial import TestimonialModel

__all__ = [
    "BrochureModel",
    "ContactInfoModel",
    "LeadModel",
    "PortfolioItemModel",
    "SeoPageModel",
    "ServiceModel",
    "TestimonialModel",
    "ThemeSettingsModel",
]
