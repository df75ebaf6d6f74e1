"""Location routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.location import LocationCreate, LocationResponse, LocationUpdate
from ..services import location_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/locations", tags=["locations"])


def _dump(location) -> dict:
    return LocationResponse.model_validate(location).model_dump(mode="json")


@router.get("")
async def list_locations(
    active: bool | None = None,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    locations = await location_svc.list_locations(db, organization_id, active=active)
    return {"count": len(locations), "results": [_dump(loc) for loc in locations]}


@router.get("/{location_id}")
async def get_location(
    location_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    location = await location_svc.get_location(db, organization_id, location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return _dump(location)


@router.post("", status_code=201)
async def create_location(
    data: LocationCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name:
        raise HTTPException(status_code=400, detail="Location name is required")
    location = await location_svc.create_location(db, organization_id, **data.model_dump())
    return _dump(location)


@router.put("/{location_id}")
async def update_location(
    location_id: int,
    data: LocationUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    location = await location_svc.update_location(
        db, organization_id, location_id, **data.model_dump(exclude_none=True)
    )
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return _dump(location)


@router.delete("/{location_id}")
async def delete_location(
    location_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await location_svc.delete_location(db, organization_id, location_id):
        raise HTTPException(status_code=404, detail="Location not found")
    return {"message": "Location deleted successfully"}
