"""Unit tests for the LeadService."""

import pytest

from fakes import FakeDocumentRepository

from app.application.schemas import IncomingPayload
from app.application.services import LeadService
from app.domain.entities import LeadPriority, LeadSource, LeadStatus
from app.domain.exceptions import EntityNotFoundError, ValidationError


def _lead(name="Asha Verma", email="asha@example.com", **extra) -> IncomingPayload:
    return IncomingPayload(fields={"fullName": name, "email": email, **extra})


@pytest.fixture
def repository() -> FakeDocumentRepository:
    return FakeDocumentRepository(search_fields=("full_name", "email", "company"))


@pytest.fixture
def service(repository) -> LeadService:
    return LeadService(repository, page_size=10, max_page_size=100)


@pytest.mark.asyncio
async def test_create_then_get_round_trip(service: LeadService):
    created = await service.create(
        _lead(company=" Acme ", formSource="quotation", projectDescription="Bracket FEA")
    )
    fetched = await service.get(created.id)

    assert fetched.id == created.id
    assert fetched.full_name == "Asha Verma"
    assert fetched.company == "Acme"
    assert fetched.form_source == LeadSource.QUOTATION
    assert fetched.project_description == "Bracket FEA"
    assert fetched.status == LeadStatus.NEW
    assert fetched.submitted_at is not None
    assert fetched.last_updated is not None


@pytest.mark.asyncio
async def test_get_missing_lead(service: LeadService):
    with pytest.raises(EntityNotFoundError):
        await service.get("00000000-0000-0000-0000-000000000000")


@pytest.mark.asyncio
async def test_create_rejects_invalid_email(service: LeadService, repository):
    with pytest.raises(ValidationError):
        await service.create(_lead(email="not-an-email"))
    assert repository.records == {}


@pytest.mark.asyncio
async def test_list_paginates_unless_all(service: LeadService):
    for i in range(15):
        await service.create(_lead(name=f"Lead {i}", email=f"lead{i}@example.com"))

    first = await service.list_records()
    assert len(first.items) == 10
    assert first.total == 15
    assert first.pages == 2

    second = await service.list_records(page=2)
    assert [lead.full_name for lead in second.items] == [f"Lead {i}" for i in range(10, 15)]

    everything = await service.list_records(all_records=True)
    assert len(everything.items) == 15
    assert everything.limit is None


@pytest.mark.asyncio
async def test_list_limit_is_capped(service: LeadService):
    page = await service.list_records(limit=10_000)
    assert page.limit == 100


@pytest.mark.asyncio
async def test_list_filters_and_search(service: LeadService):
    await service.create(_lead(name="Asha", email="asha@acme.com", company="Acme"))
    await service.create(_lead(name="Ben", email="ben@example.com", priority="high"))
    await service.create(_lead(name="Chen", email="chen@example.com", formSource="brochure"))

    high = await service.list_records(filters={"priority": LeadPriority.HIGH})
    assert [lead.full_name for lead in high.items] == ["Ben"]

    brochure = await service.list_records(filters={"form_source": LeadSource.BROCHURE, "status": None})
    assert [lead.full_name for lead in brochure.items] == ["Chen"]

    found = await service.list_records(search="ACME")
    assert [lead.full_name for lead in found.items] == ["Asha"]


@pytest.mark.asyncio
async def test_partial_update_leaves_other_fields(service: LeadService):
    created = await service.create(_lead(company="Acme", message="Need a quote"))

    updated = await service.update(created.id, IncomingPayload(fields={"status": "contacted"}))

    assert updated.status == LeadStatus.CONTACTED
    assert updated.company == "Acme"
    assert updated.message == "Need a quote"
    assert updated.full_name == created.full_name
    assert updated.last_updated >= created.last_updated


@pytest.mark.asyncio
async def test_status_transitions_are_unconstrained(service: LeadService):
    created = await service.create(_lead())
    await service.update(created.id, IncomingPayload(fields={"status": "closed"}))
    reopened = await service.update(created.id, IncomingPayload(fields={"status": "new"}))
    assert reopened.status == LeadStatus.NEW


@pytest.mark.asyncio
async def test_update_rejects_blank_required_field(service: LeadService):
    created = await service.create(_lead())
    with pytest.raises(ValidationError):
        await service.update(created.id, IncomingPayload(fields={"fullName": "  "}))
    assert (await service.get(created.id)).full_name == "Asha Verma"


@pytest.mark.asyncio
async def test_delete_lead(service: LeadService, repository):
    created = await service.create(_lead())
    outcome = await service.delete(created.id)

    assert outcome.entity_id == created.id
    assert outcome.cleanup.clean
    assert repository.records == {}
    with pytest.raises(EntityNotFoundError):
        await service.delete(created.id)
