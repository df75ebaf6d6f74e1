"""Role schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class RoleCreate(BaseModel):
    name: str | None = None
    description: str | None = None
    permissions: list[Any] | dict[str, Any] | None = None


class RoleUpdate(RoleCreate):
    pass


class RoleResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    permissions: list[Any] | dict[str, Any]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
