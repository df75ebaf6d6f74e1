"""Notification settings - per-organization event toggles."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.notification_setting import NotificationSetting

logger = logging.getLogger(__name__)


async def grouped_settings(
    db: AsyncSession, organization_id: uuid.UUID
) -> dict[str, dict[str, bool]]:
    """Return {entity_type: {event_type: is_enabled}}."""
    stmt = (
        select(NotificationSetting)
        .where(NotificationSetting.organization_id == organization_id)
        .order_by(NotificationSetting.entity_type, NotificationSetting.event_type)
    )
    grouped: dict[str, dict[str, bool]] = {}
    for row in (await db.execute(stmt)).scalars().all():
        grouped.setdefault(row.entity_type, {})[row.event_type] = row.is_enabled
    return grouped


async def _upsert(
    db: AsyncSession, organization_id: uuid.UUID, entity_type: str, event_type: str, is_enabled: bool
) -> NotificationSetting:
    stmt = select(NotificationSetting).where(
        NotificationSetting.organization_id == organization_id,
        NotificationSetting.entity_type == entity_type,
        NotificationSetting.event_type == event_type,
    )
    row = (await db.execute(stmt)).scalar_one_or_none()
    if row:
        row.is_enabled = is_enabled
    else:
        row = NotificationSetting(
            organization_id=organization_id,
            entity_type=entity_type,
            event_type=event_type,
            is_enabled=is_enabled,
        )
        db.add(row)
    await db.flush()
    return row


async def set_setting(
    db: AsyncSession, organization_id: uuid.UUID, entity_type: str, event_type: str, is_enabled: bool
) -> NotificationSetting:
    row = await _upsert(db, organization_id, entity_type, event_type, is_enabled)
    await db.commit()
    await db.refresh(row)
    return row


async def bulk_update(
    db: AsyncSession, organization_id: uuid.UUID, settings_map: dict[str, dict[str, bool]]
) -> int:
    """Upsert every toggle in one transaction. Returns the number of rows written."""
    written = 0
    try:
        for entity_type, events in settings_map.items():
            for event_type, is_enabled in events.items():
                await _upsert(db, organization_id, entity_type, event_type, bool(is_enabled))
                written += 1
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Updated %d notification settings for %s", written, organization_id)
    return written
