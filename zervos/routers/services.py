"""Service catalog routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.common import paginated
from ..schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from ..services import service_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/services", tags=["services"])


def _dump(service) -> dict:
    return ServiceResponse.model_validate(service).model_dump(mode="json")


@router.get("")
async def list_services(
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    services, total = await service_svc.list_services(
        db, organization_id, offset=(page - 1) * limit, limit=limit
    )
    return paginated([_dump(s) for s in services], total, page=page, limit=limit)


@router.get("/active")
async def list_active_services(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    return [_dump(s) for s in await service_svc.list_active_services(db, organization_id)]


@router.get("/{service_id}")
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    service = await service_svc.get_service(db, organization_id, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return _dump(service)


@router.post("", status_code=201)
async def create_service(
    data: ServiceCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or not data.duration:
        raise HTTPException(status_code=400, detail="name and duration are required")
    fields = data.model_dump(exclude_none=True)
    service = await service_svc.create_service(db, organization_id, **fields)
    return _dump(service)


@router.put("/{service_id}")
async def update_service(
    service_id: int,
    data: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    service = await service_svc.update_service(
        db, organization_id, service_id, **data.model_dump(exclude_none=True)
    )
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return _dump(service)


@router.delete("/{service_id}", status_code=204)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await service_svc.delete_service(db, organization_id, service_id):
        raise HTTPException(status_code=404, detail="Service not found")
    return Response(status_code=204)


@router.post("/{service_id}/toggle_enabled")
async def toggle_enabled(
    service_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    service = await service_svc.toggle_enabled(db, organization_id, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return _dump(service)
