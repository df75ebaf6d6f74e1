"""Workspace service."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.workspace import Workspace


async def list_workspaces(
    db: AsyncSession, organization_id: uuid.UUID, *, active: bool | None = None
) -> list[Workspace]:
    stmt = select(Workspace).where(Workspace.organization_id == organization_id)
    if active is not None:
        stmt = stmt.where(Workspace.is_active == active)
    stmt = stmt.order_by(Workspace.created_at.desc(), Workspace.id.desc())
    return list((await db.execute(stmt)).scalars().all())


async def get_workspace(
    db: AsyncSession, organization_id: uuid.UUID, workspace_id: int
) -> Workspace | None:
    stmt = select(Workspace).where(
        Workspace.organization_id == organization_id, Workspace.id == workspace_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_workspace(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> Workspace:
    values = {k: v for k, v in kwargs.items() if v is not None}
    workspace = Workspace(organization_id=organization_id, **values)
    db.add(workspace)
    await db.commit()
    await db.refresh(workspace)
    return workspace


async def update_workspace(
    db: AsyncSession, organization_id: uuid.UUID, workspace_id: int, **kwargs
) -> Workspace | None:
    workspace = await get_workspace(db, organization_id, workspace_id)
    if not workspace:
        return None
    for key, value in kwargs.items():
        if value is not None:
            setattr(workspace, key, value)
    await db.commit()
    await db.refresh(workspace)
    return workspace


async def delete_workspace(db: AsyncSession, organization_id: uuid.UUID, workspace_id: int) -> bool:
    workspace = await get_workspace(db, organization_id, workspace_id)
    if not workspace:
        return False
    await db.delete(workspace)
    await db.commit()
    return True
