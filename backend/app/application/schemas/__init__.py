from .brochure import BrochureRecord, BrochureResponse, BrochureUpdate
from .common import ApiResponse, CamelModel, DeleteResult, PaginationMeta
from .contact import ContactInfoRecord, ContactInfoResponse, ContactInfoUpdate
from .dashboard import DashboardResponse
from .lead import LeadCreate, LeadResponse, LeadUpdate
from .payload import IncomingPayload, UploadedAsset
from .portfolio import PortfolioItemCreate, PortfolioItemResponse, PortfolioItemUpdate
from .seo import SeoPageCreate, SeoPageResponse, SeoPageUpdate
from .service import ServiceCreate, ServiceResponse, ServiceUpdate
from .testimonial import TestimonialCreate, TestimonialResponse, TestimonialUpdate
from .theme import ThemeSettingsRecord, ThemeSettingsResponse, ThemeSettingsUpdate

__all__ = [
    "ApiResponse",
    "CamelModel",
    "DeleteResult",
    "PaginationMeta",
    "BrochureRecord",
    "BrochureResponse",
    "BrochureUpdate",
    "ContactInfoRecord",
    "ContactInfoResponse",
    "ContactInfoUpdate",
    "DashboardResponse",
    "LeadCreate",
    "LeadResponse",
    "LeadUpdate",
    "IncomingPayload",
    "UploadedAsset",
    "PortfolioItemCreate",
    "PortfolioItemResponse",
    "PortfolioItemUpdate",
    "SeoPageCreate",
    "SeoPageResponse",
    "SeoPageUpdate",
    "ServiceCreate",
    "ServiceResponse",
    "ServiceUpdate",
    "TestimonialCreate",
    "TestimonialResponse",
    "TestimonialUpdate",
    "ThemeSettingsRecord",
    "ThemeSettingsResponse",
    "ThemeSettingsUpdate",
]
