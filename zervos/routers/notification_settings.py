"""Notification settings routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.notification_setting import NotificationBulkUpdate, NotificationToggle
from ..services import notification_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/notification-settings", tags=["notification-settings"])


@router.get("")
async def list_settings(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    grouped = await notification_svc.grouped_settings(db, organization_id)
    return {"count": sum(len(events) for events in grouped.values()), "results": grouped}


@router.put("/{entity_type}/{event_type}")
async def set_setting(
    entity_type: str,
    event_type: str,
    data: NotificationToggle,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not isinstance(data.is_enabled, bool):
        raise HTTPException(status_code=400, detail="is_enabled must be a boolean")
    row = await notification_svc.set_setting(
        db, organization_id, entity_type, event_type, data.is_enabled
    )
    return {
        "entity_type": row.entity_type,
        "event_type": row.event_type,
        "is_enabled": row.is_enabled,
    }


@router.put("")
async def bulk_update(
    data: NotificationBulkUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    settings_map = data.settings
    if not isinstance(settings_map, dict) or not all(
        isinstance(events, dict) for events in settings_map.values()
    ):
        raise HTTPException(status_code=400, detail="settings must map entity types to event toggles")
    written = await notification_svc.bulk_update(db, organization_id, settings_map)
    return {"message": "Notification settings updated successfully", "updated": written}
