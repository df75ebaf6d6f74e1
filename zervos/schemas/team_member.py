"""Team member schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class TeamMemberCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    role: str | None = None
    avatar: str | None = None
    color: str | None = None
    is_active: bool | None = None


class TeamMemberUpdate(TeamMemberCreate):
    pass


class TeamMemberResponse(BaseModel):
    id: int
    name: str | None = None
    email: str
    role: str
    avatar: str | None = None
    color: str | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
