"""Concrete per-collection repositories backed by SQLAlchemy."""

from app.domain.entities import (
    Brochure,
    Lead,
    LeadPriority,
    LeadSource,
    LeadStatus,
    PortfolioItem,
    PortfolioStatus,
    SeoPage,
    Service,
    ServiceStatus,
    Testimonial,
    TestimonialStatus,
)
from app.infrastructure.database.models import (
    BrochureModel,
    LeadModel,
    PortfolioItemModel,
    SeoPageModel,
    ServiceModel,
    TestimonialModel,
)
from app.infrastructure.database.repositories.document_repository import (
    SQLAlchemyDocumentRepository,
)


class SQLAlchemyLeadRepository(SQLAlchemyDocumentRepository[Lead]):
    model = LeadModel
    entity_name = "Lead"
    search_fields = ("full_name", "email", "company")
    order_field = "submitted_at"

    def _to_entity(self, model: LeadModel) -> Lead:
        return Lead(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone=model.phone,
            company=model.company,
            service=model.service,
            message=model.message,
            project_description=model.project_description,
            additional_requirements=model.additional_requirements,
            status=LeadStatus(model.status),
            priority=LeadPriority(model.priority),
            form_source=LeadSource(model.form_source),
            submitted_at=model.submitted_at,
            last_updated=model.last_updated,
        )


class SQLAlchemyTestimonialRepository(SQLAlchemyDocumentRepository[Testimonial]):
    model = TestimonialModel
    entity_name = "Testimonial"

    def _to_entity(self, model: TestimonialModel) -> Testimonial:
        return Testimonial(
            id=model.id,
            name=model.name,
            location=model.location,
            content=model.content,
            rating=model.rating,
            services_type=model.services_type,
            avatar=model.avatar,
            date=model.date,
            status=TestimonialStatus(model.status),
            created_at=model.created_at,
            last_updated=model.last_updated,
        )


class SQLAlchemyServiceRepository(SQLAlchemyDocumentRepository[Service]):
    model = ServiceModel
    entity_name = "Service"

    def _to_entity(self, model: ServiceModel) -> Service:
        # slug is re-derived from the title by the entity
        return Service(
            id=model.id,
            title=model.title,
            description=model.description,
            short_description=model.short_description,
            category=model.category,
            image=model.image,
            gallery=list(model.gallery or []),
            features=list(model.features or []),
            status=ServiceStatus(model.status),
            featured=model.featured,
            created_at=model.created_at,
            last_updated=model.last_updated,
        )


class SQLAlchemyPortfolioRepository(SQLAlchemyDocumentRepository[PortfolioItem]):
    model = PortfolioItemModel
    entity_name = "PortfolioItem"

    def _to_entity(self, model: PortfolioItemModel) -> PortfolioItem:
        return PortfolioItem(
            id=model.id,
            title=model.title,
            category=model.category,
            description=model.description,
            client=model.client,
            content=model.content,
            image=model.image,
            gallery=list(model.gallery or []),
            technologies=list(model.technologies or []),
            status=PortfolioStatus(model.status),
            created_at=model.created_at,
            last_updated=model.last_updated,
        )


class SQLAlchemySeoPageRepository(SQLAlchemyDocumentRepository[SeoPage]):
    model = SeoPageModel
    entity_name = "SeoPage"

    def _to_entity(self, model: SeoPageModel) -> SeoPage:
        return SeoPage(
            id=model.id,
            page_id=model.page_id,
            page_name=model.page_name,
            title=model.title,
            description=model.description,
            keywords=model.keywords,
            created_at=model.created_at,
            last_updated=model.last_updated,
        )


class SQLAlchemyBrochureRepository(SQLAlchemyDocumentRepository[Brochure]):
    model = BrochureModel
    entity_name = "Brochure"
    order_field = "upload_date"
    newest_first = True

    def _to_entity(self, model: BrochureModel) -> Brochure:
        return Brochure(
            id=model.id,
            title=model.title,
            file_name=model.file_name,
            file_path=model.file_path,
            upload_date=model.upload_date,
            last_updated=model.last_updated,
        )
