"""Application service (use case) for Lead operations."""

from app.application.schemas import LeadCreate, LeadUpdate
from app.application.services.resource_service import ResourceService
from app.domain.entities import Lead


class LeadService(ResourceService[Lead]):
    """Leads from the contact, quotation and brochure forms.

    Status transitions are unconstrained; list reads support free-text search
    over name, email and company (implemented by the repository).
    """

    entity_name = "Lead"
    entity_cls = Lead
    create_schema = LeadCreate
    update_schema = LeadUpdate
