"""API tests for /api/v1/admin/leads and the dashboard summary."""

import pytest

BASE = "/api/v1/admin/leads"


async def _create(client, **fields):
    payload = {"fullName": "Asha Verma", "email": "asha@example.com", **fields}
    response = await client.post(BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_lead_returns_envelope(client):
    response = await client.post(
        BASE,
        json={"fullName": "Asha Verma", "email": "asha@example.com", "formSource": "brochure"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Lead submitted successfully"
    assert body["data"]["formSource"] == "brochure"
    assert body["data"]["status"] == "new"
    assert body["data"]["id"]
    assert body["data"]["submittedAt"]


@pytest.mark.asyncio
async def test_invalid_lead_is_400_with_violations(client):
    response = await client.post(BASE, json={"fullName": "", "email": "not-an-email"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert {v["field"] for v in body["data"]} == {"fullName", "email"}


@pytest.mark.asyncio
async def test_non_object_body_is_400(client):
    response = await client.post(BASE, json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_missing_lead_is_404(client):
    response = await client.get(f"{BASE}/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Lead not found"


@pytest.mark.asyncio
async def test_list_pagination_and_all(client):
    for i in range(12):
        await _create(client, fullName=f"Lead {i}", email=f"lead{i}@example.com")

    paged = (await client.get(BASE)).json()
    assert len(paged["data"]) == 10
    assert paged["pagination"] == {"page": 1, "limit": 10, "total": 12, "pages": 2}

    everything = (await client.get(BASE, params={"all": "true"})).json()
    assert len(everything["data"]) == 12
    assert everything["pagination"] is None


@pytest.mark.asyncio
async def test_list_filters_and_search(client):
    await _create(client, fullName="Asha", email="asha@acme.com", company="Acme Corp")
    await _create(client, fullName="Ben", email="ben@example.com", priority="high")

    high = (await client.get(BASE, params={"priority": "high"})).json()
    assert [lead["fullName"] for lead in high["data"]] == ["Ben"]

    found = (await client.get(BASE, params={"search": "acme"})).json()
    assert [lead["fullName"] for lead in found["data"]] == ["Asha"]

    bad = await client.get(BASE, params={"status": "won"})
    assert bad.status_code == 400


@pytest.mark.asyncio
async def test_update_and_delete(client):
    lead = await _create(client, company="Acme")

    response = await client.put(f"{BASE}/{lead['id']}", json={"status": "qualified"})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["status"] == "qualified"
    assert updated["company"] == "Acme"

    response = await client.delete(f"{BASE}/{lead['id']}")
    assert response.status_code == 200
    assert response.json()["data"] == {"id": lead["id"], "warnings": []}
    assert (await client.get(f"{BASE}/{lead['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_dashboard_summary(client):
    await _create(client)
    await _create(client, fullName="Ben", email="ben@example.com", status="contacted")

    response = await client.get("/api/v1/admin/dashboard")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totalLeads"] == 2
    assert data["newLeads"] == 1
    assert data["leadsByStatus"]["contacted"] == 1
    assert [lead["fullName"] for lead in data["recentLeads"]] == ["Ben", "Asha Verma"]
