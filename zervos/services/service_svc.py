"""Service catalog - CRUD and enable/disable."""

from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.service import Service


async def list_services(
    db: AsyncSession, organization_id: uuid.UUID, *, offset: int = 0, limit: int = 100
) -> tuple[list[Service], int]:
    stmt = select(Service).where(Service.organization_id == organization_id)
    total = (await db.execute(select(func.count()).select_from(stmt.subquery()))).scalar() or 0
    stmt = stmt.order_by(Service.created_at.desc(), Service.id.desc()).offset(offset).limit(limit)
    return list((await db.execute(stmt)).scalars().all()), total


async def list_active_services(db: AsyncSession, organization_id: uuid.UUID) -> list[Service]:
    stmt = (
        select(Service)
        .where(Service.organization_id == organization_id, Service.is_enabled.is_(True))
        .order_by(Service.name)
    )
    return list((await db.execute(stmt)).scalars().all())


async def get_service(
    db: AsyncSession, organization_id: uuid.UUID, service_id: int
) -> Service | None:
    stmt = select(Service).where(
        Service.organization_id == organization_id, Service.id == service_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_service(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> Service:
    service = Service(organization_id=organization_id, **kwargs)
    db.add(service)
    await db.commit()
    await db.refresh(service)
    return service


async def update_service(
    db: AsyncSession, organization_id: uuid.UUID, service_id: int, **kwargs
) -> Service | None:
    service = await get_service(db, organization_id, service_id)
    if not service:
        return None
    for key, value in kwargs.items():
        setattr(service, key, value)
    await db.commit()
    await db.refresh(service)
    return service


async def delete_service(db: AsyncSession, organization_id: uuid.UUID, service_id: int) -> bool:
    service = await get_service(db, organization_id, service_id)
    if not service:
        return False
    await db.delete(service)
    await db.commit()
    return True


async def toggle_enabled(
    db: AsyncSession, organization_id: uuid.UUID, service_id: int
) -> Service | None:
    service = await get_service(db, organization_id, service_id)
    if not service:
        return None
    service.is_enabled = not service.is_enabled
    await db.commit()
    await db.refresh(service)
    return service
