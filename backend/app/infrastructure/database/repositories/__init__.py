from .document_repository import SQLAlchemyDocumentRepository
from .singleton_repository import (
    SQLAlchemyContactInfoRepository,
    SQLAlchemySingletonRepository,
    SQLAlchemyThemeSettingsRepository,
)
from .site_repositories import (
    SQLAlchemyBrochureRepository,
    SQLAlchemyLeadRepository,
    SQLAlchemyPortfolioRepository,
    SQLAlchemySeoPageRepository,
    SQLAlchemyServiceRepository,
    SQLAlchemyTestimonialRepository,
)

__all__ = [
    "SQLAlchemyDocumentRepository",
    "SQLAlchemySingletonRepository",
    "SQLAlchemyContactInfoRepository",
    "SQLAlchemyThemeSettingsRepository",
    "SQLAlchemyBrochureRepository",
    "SQLAlchemyLeadRepository",
    "SQLAlchemyPortfolioRepository",
    "SQLAlchemySeoPageRepository",
    "SQLAlchemyServiceRepository",
    "SQLAlchemyTestimonialRepository",
]
