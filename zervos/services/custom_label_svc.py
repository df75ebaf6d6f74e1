"""Custom label service."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.custom_label import CustomLabel


async def list_labels(
    db: AsyncSession, organization_id: uuid.UUID, *, label_type: str | None = None
) -> list[CustomLabel]:
    stmt = select(CustomLabel).where(CustomLabel.organization_id == organization_id)
    if label_type:
        stmt = stmt.where(CustomLabel.label_type == label_type)
    stmt = stmt.order_by(CustomLabel.label_type, CustomLabel.label_value)
    return list((await db.execute(stmt)).scalars().all())


async def get_label(db: AsyncSession, organization_id: uuid.UUID, label_id: int) -> CustomLabel | None:
    stmt = select(CustomLabel).where(
        CustomLabel.organization_id == organization_id, CustomLabel.id == label_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def create_label(
    db: AsyncSession, organization_id: uuid.UUID,
    label_type: str, label_value: str, description: str | None = None,
) -> CustomLabel:
    label = CustomLabel(
        organization_id=organization_id,
        label_type=label_type,
        label_value=label_value,
        description=description,
    )
    db.add(label)
    await db.commit()
    await db.refresh(label)
    return label


async def update_label(
    db: AsyncSession, organization_id: uuid.UUID, label_id: int, **kwargs
) -> CustomLabel | None:
    """Update a label; None or empty values leave the stored field unchanged."""
    label = await get_label(db, organization_id, label_id)
    if not label:
        return None
    for key, value in kwargs.items():
        if value:
            setattr(label, key, value)
    await db.commit()
    await db.refresh(label)
    return label


async def delete_label(db: AsyncSession, organization_id: uuid.UUID, label_id: int) -> bool:
    label = await get_label(db, organization_id, label_id)
    if not label:
        return False
    await db.delete(label)
    await db.commit()
    return True
