"""Integration routes. Responses report ``has_api_key`` instead of the key."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.integration import IntegrationCreate, IntegrationResponse, IntegrationUpdate
from ..services import integration_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/integrations", tags=["integrations"])


def _dump(integration) -> dict:
    data = IntegrationResponse.model_validate(integration).model_dump(mode="json")
    data["has_api_key"] = bool(integration.api_key)
    return data


@router.get("")
async def list_integrations(
    connected: bool | None = None,
    type: str | None = None,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    integrations = await integration_svc.list_integrations(
        db, organization_id, connected=connected, integration_type=type
    )
    return {"count": len(integrations), "results": [_dump(i) for i in integrations]}


@router.get("/{integration_id}")
async def get_integration(
    integration_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    integration = await integration_svc.get_integration(db, organization_id, integration_id)
    if not integration:
        raise HTTPException(status_code=404, detail="Integration not found")
    return _dump(integration)


@router.post("", status_code=201)
async def create_integration(
    data: IntegrationCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or not data.type:
        raise HTTPException(status_code=400, detail="Name and type are required")
    integration = await integration_svc.create_integration(db, organization_id, **data.model_dump())
    return _dump(integration)


@router.put("/{integration_id}")
async def update_integration(
    integration_id: int,
    data: IntegrationUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    integration = await integration_svc.update_integration(
        db, organization_id, integration_id, **data.model_dump(exclude_none=True)
    )
    if not integration:
        raise HTTPException(status_code=404, detail="Integration not found")
    return _dump(integration)


@router.delete("/{integration_id}")
async def delete_integration(
    integration_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await integration_svc.delete_integration(db, organization_id, integration_id):
        raise HTTPException(status_code=404, detail="Integration not found")
    return {"message": "Integration deleted successfully"}
