"""Read-only summary for the admin dashboard."""

from dataclasses import dataclass, field

from app.application.interfaces import DocumentRepository, ListQuery
from app.domain.entities import (
    Brochure,
    Lead,
    LeadStatus,
    PortfolioItem,
    Service,
    Testimonial,
    TestimonialStatus,
)

RECENT_LEADS = 5


@dataclass
class DashboardSummary:
    total_leads: int
    new_leads: int
    leads_by_status: dict[str, int]
    total_services: int
    featured_services: int
    total_portfolio_items: int
    published_testimonials: int
    total_brochures: int
    recent_leads: list[Lead] = field(default_factory=list)


class DashboardService:
    def __init__(
        self,
        leads: DocumentRepository[Lead],
        services: DocumentRepository[Service],
        portfolio: DocumentRepository[PortfolioItem],
        testimonials: DocumentRepository[Testimonial],
        brochures: DocumentRepository[Brochure],
    ):
        self._leads = leads
        self._services = services
        self._portfolio = portfolio
        self._testimonials = testimonials
        self._brochures = brochures

    async def summary(self) -> DashboardSummary:
        by_status = {
            status.value: await self._leads.count({"status": status}) for status in LeadStatus
        }
        return DashboardSummary(
            total_leads=sum(by_status.values()),
            new_leads=by_status[LeadStatus.NEW.value],
            leads_by_status=by_status,
            total_services=await self._services.count(),
            featured_services=await self._services.count({"featured": True}),
            total_portfolio_items=await self._portfolio.count(),
            published_testimonials=await self._testimonials.count(
                {"status": TestimonialStatus.PUBLISHED}
            ),
            total_brochures=await self._brochures.count(),
            recent_leads=await self._leads.get_all(
                ListQuery(limit=RECENT_LEADS, newest_first=True)
            ),
        )
