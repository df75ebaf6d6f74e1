"""Location and resource service.

Resources may point at a location of the same organization. Deleting a
location leaves its resources in place with ``location_id`` cleared.
"""

from __future__ import annotations

import uuid

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.location import Location, Resource


class UnknownLocationError(ValueError):
    """Raised when a resource names a location outside its organization."""


async def list_locations(
    db: AsyncSession, organization_id: uuid.UUID, *, active: bool | None = None
) -> list[Location]:
    stmt = select(Location).where(Location.organization_id == organization_id)
    if active is not None:
        stmt = stmt.where(Location.is_active == active)
    return list((await db.execute(stmt.order_by(Location.name))).scalars().all())


async def get_location(
    db: AsyncSession, organization_id: uuid.UUID, location_id: int
) -> Location | None:
    stmt = select(Location).where(
        Location.organization_id == organization_id, Location.id == location_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_location(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> Location:
    values = {k: v for k, v in kwargs.items() if v is not None}
    location = Location(organization_id=organization_id, **values)
    db.add(location)
    await db.commit()
    await db.refresh(location)
    return location


async def update_location(
    db: AsyncSession, organization_id: uuid.UUID, location_id: int, **kwargs
) -> Location | None:
    location = await get_location(db, organization_id, location_id)
    if not location:
        return None
    for key, value in kwargs.items():
        if value is not None:
            setattr(location, key, value)
    await db.commit()
    await db.refresh(location)
    return location


async def delete_location(db: AsyncSession, organization_id: uuid.UUID, location_id: int) -> bool:
    location = await get_location(db, organization_id, location_id)
    if not location:
        return False
    await db.execute(
        update(Resource)
        .where(Resource.organization_id == organization_id, Resource.location_id == location_id)
        .values(location_id=None)
    )
    await db.delete(location)
    await db.commit()
    return True


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


async def _check_location(db: AsyncSession, organization_id: uuid.UUID, location_id: int | None) -> None:
    if location_id is not None and not await get_location(db, organization_id, location_id):
        raise UnknownLocationError(location_id)


async def list_resources(
    db: AsyncSession, organization_id: uuid.UUID, *,
    available: bool | None = None,
    resource_type: str | None = None,
    location_id: int | None = None,
) -> list[Resource]:
    stmt = select(Resource).where(Resource.organization_id == organization_id)
    if available is not None:
        stmt = stmt.where(Resource.is_available == available)
    if resource_type:
        stmt = stmt.where(Resource.type == resource_type)
    if location_id is not None:
        stmt = stmt.where(Resource.location_id == location_id)
    return list((await db.execute(stmt.order_by(Resource.name))).scalars().all())


async def get_resource(
    db: AsyncSession, organization_id: uuid.UUID, resource_id: int
) -> Resource | None:
    stmt = select(Resource).where(
        Resource.organization_id == organization_id, Resource.id == resource_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_resource(db: AsyncSession, organization_id: uuid.UUID, **kwargs) -> Resource:
    await _check_location(db, organization_id, kwargs.get("location_id"))
    values = {k: v for k, v in kwargs.items() if v is not None}
    resource = Resource(organization_id=organization_id, **values)
    db.add(resource)
    await db.commit()
    await db.refresh(resource)
    return resource


async def update_resource(
    db: AsyncSession, organization_id: uuid.UUID, resource_id: int, **kwargs
) -> Resource | None:
    resource = await get_resource(db, organization_id, resource_id)
    if not resource:
        return None
    await _check_location(db, organization_id, kwargs.get("location_id"))
    for key, value in kwargs.items():
        if value is not None:
            setattr(resource, key, value)
    await db.commit()
    await db.refresh(resource)
    return resource


async def delete_resource(db: AsyncSession, organization_id: uuid.UUID, resource_id: int) -> bool:
    resource = await get_resource(db, organization_id, resource_id)
    if not resource:
        return False
    await db.delete(resource)
    await db.commit()
    return True
