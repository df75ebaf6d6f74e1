"""Team member service."""

from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.team_member import TeamMember

DEFAULT_COLOR = "bg-gradient-to-r from-blue-500 to-purple-500"


async def list_team_members(
    db: AsyncSession, organization_id: uuid.UUID, *, offset: int = 0, limit: int = 100
) -> tuple[list[TeamMember], int]:
    stmt = select(TeamMember).where(TeamMember.organization_id == organization_id)
    total = (await db.execute(select(func.count()).select_from(stmt.subquery()))).scalar() or 0
    stmt = stmt.order_by(TeamMember.created_at.desc(), TeamMember.id.desc()).offset(offset).limit(limit)
    return list((await db.execute(stmt)).scalars().all()), total


async def list_active_team_members(db: AsyncSession, organization_id: uuid.UUID) -> list[TeamMember]:
    stmt = (
        select(TeamMember)
        .where(TeamMember.organization_id == organization_id, TeamMember.is_active.is_(True))
        .order_by(TeamMember.name)
    )
    return list((await db.execute(stmt)).scalars().all())


async def get_team_member(
    db: AsyncSession, organization_id: uuid.UUID, member_id: int
) -> TeamMember | None:
    stmt = select(TeamMember).where(
        TeamMember.organization_id == organization_id, TeamMember.id == member_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_team_member(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> TeamMember:
    kwargs.setdefault("color", DEFAULT_COLOR)
    member = TeamMember(organization_id=organization_id, **kwargs)
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member


async def update_team_member(
    db: AsyncSession, organization_id: uuid.UUID, member_id: int, **kwargs
) -> TeamMember | None:
    member = await get_team_member(db, organization_id, member_id)
    if not member:
        return None
    for key, value in kwargs.items():
        setattr(member, key, value)
    await db.commit()
    await db.refresh(member)
    return member


async def delete_team_member(db: AsyncSession, organization_id: uuid.UUID, member_id: int) -> bool:
    member = await get_team_member(db, organization_id, member_id)
    if not member:
        return False
    await db.delete(member)
    await db.commit()
    return True


async def toggle_active(
    db: AsyncSession, organization_id: uuid.UUID, member_id: int
) -> TeamMember | None:
    member = await get_team_member(db, organization_id, member_id)
    if not member:
        return None
    member.is_active = not member.is_active
    await db.commit()
    await db.refresh(member)
    return member
