"""Test organization settings and role routes."""

from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from zervos.models import Organization
from zervos.services.organization_svc import ensure_organization


@pytest.mark.asyncio
async def test_settings_defaults(client: AsyncClient, organization: Organization):
    body = (await client.get("/api/organization-settings")).json()
    assert body["company_name"] == "Test Org"
    assert body["brand_color"] == "#6366f1"
    assert body["timezone"] == "Asia/Kolkata"
    assert body["working_days"] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert body["working_hours_start"] == "09:00"
    assert body["working_hours_end"] == "18:00"
    assert body["allow_guest_booking"] is True
    assert body["require_login"] is False


@pytest.mark.asyncio
async def test_settings_partial_update(client: AsyncClient, organization: Organization):
    response = await client.put(
        "/api/organization-settings",
        json={"company_name": "Acme Clinic", "working_days": ["Saturday"], "require_login": True},
    )
    assert response.status_code == 200
    body = (await client.get("/api/organization-settings")).json()
    assert body["company_name"] == "Acme Clinic"
    assert body["working_days"] == ["Saturday"]
    assert body["require_login"] is True
    assert body["brand_color"] == "#6366f1"


@pytest.mark.asyncio
async def test_settings_null_keeps_required_values(client: AsyncClient, organization: Organization):
    await client.put("/api/organization-settings", json={"industry": "Health"})
    body = (await client.put(
        "/api/organization-settings", json={"timezone": None, "industry": None},
    )).json()
    assert body["timezone"] == "Asia/Kolkata"
    assert body["industry"] is None


@pytest.mark.asyncio
async def test_settings_rejects_blank_company_name(client: AsyncClient, organization: Organization):
    response = await client.put("/api/organization-settings", json={"company_name": "  "})
    assert response.status_code == 400
    assert response.json() == {"error": "Company name is required"}


@pytest.mark.asyncio
async def test_settings_are_per_organization(
    client: AsyncClient, db: AsyncSession, organization: Organization,
):
    other = await ensure_organization(db, uuid.uuid4(), "Branch")
    headers = {"X-Organization-Id": str(other.id)}
    await client.put("/api/organization-settings", json={"brand_color": "#000000"}, headers=headers)

    assert (await client.get("/api/organization-settings", headers=headers)).json()["brand_color"] == "#000000"
    assert (await client.get("/api/organization-settings")).json()["brand_color"] == "#6366f1"


@pytest.mark.asyncio
async def test_roles_crud(client: AsyncClient, organization: Organization):
    created = await client.post(
        "/api/roles", json={"name": "Manager", "permissions": ["appointments:write"]},
    )
    assert created.status_code == 201
    role = created.json()
    await client.post("/api/roles", json={"name": "Admin", "permissions": {"all": True}})

    listing = (await client.get("/api/roles")).json()
    assert listing["count"] == 2
    assert [r["name"] for r in listing["results"]] == ["Admin", "Manager"]

    updated = (await client.put(f"/api/roles/{role['id']}", json={"description": "Runs the desk"})).json()
    assert updated["description"] == "Runs the desk"
    assert updated["permissions"] == ["appointments:write"]

    response = await client.delete(f"/api/roles/{role['id']}")
    assert response.json() == {"message": "Role deleted successfully"}
    assert (await client.get(f"/api/roles/{role['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_role_requires_name_and_permissions(client: AsyncClient, organization: Organization):
    response = await client.post("/api/roles", json={"name": "Viewer"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name and permissions are required"}


@pytest.mark.asyncio
async def test_role_name_conflicts(client: AsyncClient, organization: Organization):
    await client.post("/api/roles", json={"name": "Admin", "permissions": []})
    staff = (await client.post("/api/roles", json={"name": "Staff", "permissions": []})).json()

    dup = await client.post("/api/roles", json={"name": "Admin", "permissions": []})
    assert dup.status_code == 409
    assert dup.json() == {"error": "Role with this name already exists"}

    rename = await client.put(f"/api/roles/{staff['id']}", json={"name": "Admin"})
    assert rename.status_code == 409


@pytest.mark.asyncio
async def test_role_names_are_unique_per_organization_only(
    client: AsyncClient, db: AsyncSession, organization: Organization,
):
    other = await ensure_organization(db, uuid.uuid4(), "Branch")
    await client.post("/api/roles", json={"name": "Admin", "permissions": []})
    response = await client.post(
        "/api/roles", json={"name": "Admin", "permissions": []},
        headers={"X-Organization-Id": str(other.id)},
    )
    assert response.status_code == 201
    assert (await client.get("/api/roles")).json()["count"] == 1
