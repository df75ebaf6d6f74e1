"""Role routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.role import RoleCreate, RoleResponse, RoleUpdate
from ..services import role_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/roles", tags=["roles"])

DUPLICATE_NAME = "Role with this name already exists"


def _dump(role) -> dict:
    return RoleResponse.model_validate(role).model_dump(mode="json")


@router.get("")
async def list_roles(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    roles = await role_svc.list_roles(db, organization_id)
    return {"count": len(roles), "results": [_dump(r) for r in roles]}


@router.get("/{role_id}")
async def get_role(
    role_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    role = await role_svc.get_role(db, organization_id, role_id)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return _dump(role)


@router.post("", status_code=201)
async def create_role(
    data: RoleCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or data.permissions is None:
        raise HTTPException(status_code=400, detail="Name and permissions are required")
    if await role_svc.get_role_by_name(db, organization_id, data.name):
        raise HTTPException(status_code=409, detail=DUPLICATE_NAME)
    role = await role_svc.create_role(
        db, organization_id, data.name, data.permissions, data.description
    )
    return _dump(role)


@router.put("/{role_id}")
async def update_role(
    role_id: int,
    data: RoleUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    try:
        role = await role_svc.update_role(
            db, organization_id, role_id, **data.model_dump(exclude_none=True)
        )
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_NAME)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return _dump(role)


@router.delete("/{role_id}")
async def delete_role(
    role_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await role_svc.delete_role(db, organization_id, role_id):
        raise HTTPException(status_code=404, detail="Role not found")
    return {"message": "Role deleted successfully"}
