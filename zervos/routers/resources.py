"""Bookable resource routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.location import ResourceCreate, ResourceResponse, ResourceUpdate
from ..services import location_svc
from ..services.location_svc import UnknownLocationError
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/resources", tags=["resources"])


def _dump(resource) -> dict:
    return ResourceResponse.model_validate(resource).model_dump(mode="json")


@router.get("")
async def list_resources(
    available: bool | None = None,
    type: str | None = None,
    location_id: int | None = None,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    resources = await location_svc.list_resources(
        db, organization_id, available=available, resource_type=type, location_id=location_id
    )
    return {"count": len(resources), "results": [_dump(r) for r in resources]}


@router.get("/{resource_id}")
async def get_resource(
    resource_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    resource = await location_svc.get_resource(db, organization_id, resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")
    return _dump(resource)


@router.post("", status_code=201)
async def create_resource(
    data: ResourceCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or not data.type:
        raise HTTPException(status_code=400, detail="Name and type are required")
    try:
        resource = await location_svc.create_resource(db, organization_id, **data.model_dump())
    except UnknownLocationError:
        raise HTTPException(status_code=400, detail="Location not found")
    return _dump(resource)


@router.put("/{resource_id}")
async def update_resource(
    resource_id: int,
    data: ResourceUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    try:
        resource = await location_svc.update_resource(
            db, organization_id, resource_id, **data.model_dump(exclude_none=True)
        )
    except UnknownLocationError:
        raise HTTPException(status_code=400, detail="Location not found")
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")
    return _dump(resource)


@router.delete("/{resource_id}")
async def delete_resource(
    resource_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await location_svc.delete_resource(db, organization_id, resource_id):
        raise HTTPException(status_code=404, detail="Resource not found")
    return {"message": "Resource deleted successfully"}
