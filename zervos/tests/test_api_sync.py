"""Test the /sync endpoint."""

from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zervos.models import Appointment, Customer, Organization
from zervos.services.organization_svc import ensure_organization

EMPTY = {"inserted": 0, "updated": 0}


@pytest.mark.asyncio
async def test_sync_requires_token(client: AsyncClient, organization: Organization):
    response = await client.post("/sync", json={})
    assert response.status_code == 401
    assert response.json() == {"error": "Missing token"}


@pytest.mark.asyncio
async def test_sync_rejects_bad_token(client: AsyncClient, organization: Organization):
    response = await client.post("/sync", json={}, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


@pytest.mark.asyncio
async def test_sync_end_to_end(client: AsyncClient, db: AsyncSession, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers, json={
        "customers": [{"email": "a@b.com", "name": "A"}],
        "appointments": [{"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"}],
    })

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "summary": {
            "customers": {"inserted": 1, "updated": 0},
            "services": EMPTY,
            "team_members": EMPTY,
            "custom_labels": EMPTY,
            "appointments": {"inserted": 1, "updated": 0},
        },
    }
    customer_ids = (await db.execute(select(Customer.id))).scalars().all()
    appointment_links = (await db.execute(select(Appointment.customer_id))).scalars().all()
    assert len(customer_ids) == 1
    assert appointment_links == customer_ids


@pytest.mark.asyncio
async def test_sync_twice_updates(client: AsyncClient, organization: Organization, auth_headers):
    body = {"team_members": [{"email": "t@b.com", "name": "T"}]}
    await client.post("/sync", headers=auth_headers, json=body)
    response = await client.post("/sync", headers=auth_headers, json=body)
    assert response.json()["summary"]["team_members"] == {"inserted": 0, "updated": 1}


@pytest.mark.asyncio
async def test_sync_non_array_collections_are_empty(client: AsyncClient, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers, json={
        "customers": "not-a-list",
        "services": {"name": "Cut"},
        "custom_labels": [{"label_type": "platform", "label_value": "Zoom"}, 7],
    })
    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["customers"] == EMPTY
    assert summary["services"] == EMPTY
    assert summary["custom_labels"] == {"inserted": 1, "updated": 0}


@pytest.mark.asyncio
async def test_sync_empty_body(client: AsyncClient, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["ok"] is True


@pytest.mark.asyncio
async def test_sync_include_skipped(client: AsyncClient, organization: Organization, auth_headers):
    response = await client.post("/sync?include_skipped=true", headers=auth_headers, json={
        "customers": [{"name": "No Email"}],
        "appointments": [
            {"customer_email": "new@b.com", "date": "2025-01-01", "time": "10:00"},
            {"date": "2025-01-01", "time": "11:00"},
        ],
    })
    summary = response.json()["summary"]
    assert summary["customers"]["skipped"] == {"missing_email": 1}
    assert summary["appointments"] == {
        "inserted": 1,
        "updated": 0,
        "skipped": {"unresolved_customer": 1},
    }
    assert summary["customers_created_by_appointments"] == 1


@pytest.mark.asyncio
async def test_sync_failure_returns_500(client: AsyncClient, db: AsyncSession, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers, json={
        "customers": [{"email": "a@b.com"}],
        "appointments": [{"customer_email": "a@b.com", "time": "10:00"}],
    })
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Sync failed"
    assert body["message"]
    assert (await db.execute(select(func.count(Customer.id)))).scalar() == 0


@pytest.mark.asyncio
async def test_sync_into_named_organization(client: AsyncClient, db: AsyncSession, organization: Organization, auth_headers):
    other = await ensure_organization(db, uuid.uuid4(), "Branch")
    response = await client.post(
        "/sync",
        headers={**auth_headers, "X-Organization-Id": str(other.id)},
        json={"customers": [{"email": "a@b.com"}]},
    )
    assert response.status_code == 200
    org_ids = (await db.execute(select(Customer.organization_id))).scalars().all()
    assert org_ids == [other.id]


@pytest.mark.asyncio
async def test_sync_non_object_body_is_empty_batch(client: AsyncClient, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers, json=[])
    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "summary": {kind: EMPTY for kind in ("customers", "services", "team_members", "custom_labels", "appointments")},
    }


@pytest.mark.asyncio
async def test_sync_invalid_record_fails_batch(client: AsyncClient, db: AsyncSession, organization: Organization, auth_headers):
    response = await client.post("/sync", headers=auth_headers, json={
        "customers": [{"email": "a@b.com"}, {"email": "c@d.com", "total_bookings": "many"}],
    })
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Sync failed"
    assert "total_bookings" in body["message"]
    assert (await db.execute(select(func.count(Customer.id)))).scalar() == 0


@pytest.mark.asyncio
async def test_synced_appointment_does_not_expose_other_organization_service(
    client: AsyncClient, db: AsyncSession, organization: Organization, auth_headers
):
    other = await ensure_organization(db, uuid.uuid4(), "Branch")
    foreign = (await client.post(
        "/api/services",
        headers={"X-Organization-Id": str(other.id)},
        json={"name": "Secret Service", "duration": "30"},
    )).json()

    response = await client.post("/sync", headers=auth_headers, json={
        "appointments": [{
            "customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "service_id": foreign["id"],
        }],
    })
    assert response.json()["summary"]["appointments"] == {"inserted": 1, "updated": 0}

    listing = (await client.get("/api/appointments")).json()
    assert listing["results"][0]["service_id"] is None
    assert listing["results"][0]["service_name"] is None


@pytest.mark.asyncio
async def test_sync_unparseable_json_fails_batch(client: AsyncClient, organization: Organization, auth_headers):
    response = await client.post(
        "/sync",
        headers={**auth_headers, "Content-Type": "application/json"},
        content=b'{"customers": [',
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Sync failed"
