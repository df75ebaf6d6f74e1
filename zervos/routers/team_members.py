"""Team member routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.common import paginated
from ..schemas.team_member import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from ..services import team_member_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/team-members", tags=["team-members"])

DUPLICATE_EMAIL = "A team member with this email already exists"


def _dump(member) -> dict:
    return TeamMemberResponse.model_validate(member).model_dump(mode="json")


@router.get("")
async def list_team_members(
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    members, total = await team_member_svc.list_team_members(
        db, organization_id, offset=(page - 1) * limit, limit=limit
    )
    return paginated([_dump(m) for m in members], total, page=page, limit=limit)


@router.get("/active")
async def list_active(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    return [_dump(m) for m in await team_member_svc.list_active_team_members(db, organization_id)]


@router.get("/{member_id}")
async def get_team_member(
    member_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    member = await team_member_svc.get_team_member(db, organization_id, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Team member not found")
    return _dump(member)


@router.post("", status_code=201)
async def create_team_member(
    data: TeamMemberCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or not data.email:
        raise HTTPException(status_code=400, detail="name and email are required")
    try:
        member = await team_member_svc.create_team_member(
            db, organization_id, **data.model_dump(exclude_none=True)
        )
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)
    return _dump(member)


@router.put("/{member_id}")
async def update_team_member(
    member_id: int,
    data: TeamMemberUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    try:
        member = await team_member_svc.update_team_member(
            db, organization_id, member_id, **data.model_dump(exclude_none=True)
        )
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)
    if not member:
        raise HTTPException(status_code=404, detail="Team member not found")
    return _dump(member)


@router.delete("/{member_id}", status_code=204)
async def delete_team_member(
    member_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await team_member_svc.delete_team_member(db, organization_id, member_id):
        raise HTTPException(status_code=404, detail="Team member not found")
    return Response(status_code=204)


@router.post("/{member_id}/toggle_active")
async def toggle_active(
    member_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    member = await team_member_svc.toggle_active(db, organization_id, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Team member not found")
    return _dump(member)
