"""Test tenant resolution, notification settings and health routes."""

from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

from zervos.models import Organization


@pytest.mark.asyncio
async def test_invalid_organization_header(client: AsyncClient, organization: Organization):
    response = await client.get("/api/customers", headers={"X-Organization-Id": "nope"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unknown_organization(client: AsyncClient, organization: Organization):
    response = await client.get("/api/customers", headers={"X-Organization-Id": str(uuid.uuid4())})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_missing_default_organization(client: AsyncClient):
    response = await client.get("/api/services")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_notification_settings(client: AsyncClient, organization: Organization):
    response = await client.put(
        "/api/notification-settings/appointment/created", json={"is_enabled": False}
    )
    assert response.json() == {"entity_type": "appointment", "event_type": "created", "is_enabled": False}

    response = await client.put("/api/notification-settings", json={"settings": {
        "appointment": {"created": True, "cancelled": False},
        "customer": {"created": True},
    }})
    assert response.json()["updated"] == 3

    body = (await client.get("/api/notification-settings")).json()
    assert body["count"] == 3
    assert body["results"] == {
        "appointment": {"cancelled": False, "created": True},
        "customer": {"created": True},
    }


@pytest.mark.asyncio
async def test_notification_toggle_requires_boolean(client: AsyncClient, organization: Organization):
    response = await client.put("/api/notification-settings/appointment/created", json={"is_enabled": "yes"})
    assert response.status_code == 400
    response = await client.put("/api/notification-settings", json={"settings": ["bad"]})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.json()["status"] == "ok"
    assert (await client.get("/health")).json()["status"] == "healthy"
    assert (await client.get("/ready")).json()["status"] == "ready"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(client: AsyncClient):
    response = await client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
