"""Role service."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.role import Role


async def list_roles(db: AsyncSession, organization_id: uuid.UUID) -> list[Role]:
    stmt = select(Role).where(Role.organization_id == organization_id).order_by(Role.name)
    return list((await db.execute(stmt)).scalars().all())


async def get_role(db: AsyncSession, organization_id: uuid.UUID, role_id: int) -> Role | None:
    stmt = select(Role).where(Role.organization_id == organization_id, Role.id == role_id)
    return (await db.execute(stmt)).scalar_one_or_none()


async def get_role_by_name(db: AsyncSession, organization_id: uuid.UUID, name: str) -> Role | None:
    stmt = select(Role).where(Role.organization_id == organization_id, Role.name == name)
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_role(
    db: AsyncSession, organization_id: uuid.UUID,
    name: str, permissions, description: str | None = None,
) -> Role:
    role = Role(
        organization_id=organization_id,
        name=name,
        description=description,
        permissions=permissions,
    )
    db.add(role)
    await db.commit()
    await db.refresh(role)
    return role


async def update_role(
    db: AsyncSession, organization_id: uuid.UUID, role_id: int, **kwargs
) -> Role | None:
    role = await get_role(db, organization_id, role_id)
    if not role:
        return None
    for key, value in kwargs.items():
        if value is not None:
            setattr(role, key, value)
    await db.commit()
    await db.refresh(role)
    return role


async def delete_role(db: AsyncSession, organization_id: uuid.UUID, role_id: int) -> bool:
    role = await get_role(db, organization_id, role_id)
    if not role:
        return False
    await db.delete(role)
    await db.commit()
    return True
