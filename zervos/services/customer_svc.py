"""Customer service - CRUD and search."""

from __future__ import annotations

import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.customer import Customer


async def list_customers(
    db: AsyncSession,
    organization_id: uuid.UUID,
    *,
    search: str | None = None,
    offset: int = 0,
    limit: int = 100,
) -> tuple[list[Customer], int]:
    """List customers with optional search and pagination. Returns (customers, total)."""
    stmt = select(Customer).where(Customer.organization_id == organization_id)

    if search:
        q = f"%{search}%"
        stmt = stmt.where(
            or_(
                Customer.name.ilike(q),
                Customer.email.ilike(q),
                Customer.phone.ilike(q),
            )
        )

    count_stmt = select(func.count()).select_from(stmt.subquery())
    total = (await db.execute(count_stmt)).scalar() or 0

    stmt = stmt.order_by(Customer.created_at.desc(), Customer.id.desc()).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all()), total


async def get_customer(
    db: AsyncSession, organization_id: uuid.UUID, customer_id: int
) -> Customer | None:
    stmt = select(Customer).where(
        Customer.organization_id == organization_id, Customer.id == customer_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_customer(
    db: AsyncSession, organization_id: uuid.UUID, **kwargs
) -> Customer:
    customer = Customer(organization_id=organization_id, **kwargs)
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


async def update_customer(
    db: AsyncSession, organization_id: uuid.UUID, customer_id: int, **kwargs
) -> Customer | None:
    customer = await get_customer(db, organization_id, customer_id)
    if not customer:
        return None
    for key, value in kwargs.items():
        setattr(customer, key, value)
    await db.commit()
    await db.refresh(customer)
    return customer


async def delete_customer(
    db: AsyncSession, organization_id: uuid.UUID, customer_id: int
) -> bool:
    """Delete a customer and, by cascade, their appointments."""
    customer = await get_customer(db, organization_id, customer_id)
    if not customer:
        return False
    await db.delete(customer)
    await db.commit()
    return True
