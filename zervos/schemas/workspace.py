"""Workspace schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class WorkspaceCreate(BaseModel):
    name: str | None = None
    description: str | None = None
    members_count: int | None = None
    is_active: bool | None = None
    settings: dict[str, Any] | None = None


class WorkspaceUpdate(WorkspaceCreate):
    pass


class WorkspaceResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    members_count: int
    is_active: bool
    settings: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
