"""Pydantic DTOs for the admin dashboard summary."""

from pydantic import Field

from app.application.schemas.common import CamelModel
from app.application.schemas.lead import LeadResponse


class DashboardResponse(CamelModel):
    total_leads: int
    new_leads: int
    leads_by_status: dict[str, int] = Field(default_factory=dict)
    total_services: int
    featured_services: int
    total_portfolio_items: int
    published_testimonials: int
    total_brochures: int
    recent_leads: list[LeadResponse] = Field(default_factory=list)
