"""Integration service."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.integration import Integration


async def list_integrations(
    db: AsyncSession, organization_id: uuid.UUID, *,
    connected: bool | None = None,
    integration_type: str | None = None,
) -> list[Integration]:
    stmt = select(Integration).where(Integration.organization_id == organization_id)
    if connected is not None:
        stmt = stmt.where(Integration.is_connected == connected)
    if integration_type:
        stmt = stmt.where(Integration.type == integration_type)
    return list((await db.execute(stmt.order_by(Integration.name))).scalars().all())


async def get_integration(
    db: AsyncSession, organization_id: uuid.UUID, integration_id: int
) -> Integration | None:
    stmt = select(Integration).where(
        Integration.organization_id == organization_id, Integration.id == integration_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_integration(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> Integration:
    values = {k: v for k, v in kwargs.items() if v is not None}
    integration = Integration(organization_id=organization_id, **values)
    db.add(integration)
    await db.commit()
    await db.refresh(integration)
    return integration


async def update_integration(
    db: AsyncSession, organization_id: uuid.UUID, integration_id: int, **kwargs
) -> Integration | None:
    integration = await get_integration(db, organization_id, integration_id)
    if not integration:
        return None
    for key, value in kwargs.items():
        if value is not None:
            setattr(integration, key, value)
    await db.commit()
    await db.refresh(integration)
    return integration


async def delete_integration(
    db: AsyncSession, organization_id: uuid.UUID, integration_id: int
) -> bool:
    integration = await get_integration(db, organization_id, integration_id)
    if not integration:
        return False
    await db.delete(integration)
    await db.commit()
    return True
