"""Notification setting schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class NotificationToggle(BaseModel):
    is_enabled: Any = None  # must be a JSON boolean; checked by the route


class NotificationBulkUpdate(BaseModel):
    settings: Any = None  # {entity_type: {event_type: bool}}
