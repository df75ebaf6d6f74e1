"""Integration schemas. The stored API key is write-only."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class IntegrationCreate(BaseModel):
    name: str | None = None
    type: str | None = None
    is_connected: bool | None = None
    api_key: str | None = None
    settings: dict[str, Any] | None = None


class IntegrationUpdate(IntegrationCreate):
    pass


class IntegrationResponse(BaseModel):
    id: int
    name: str
    type: str
    is_connected: bool
    api_key: str | None = Field(default=None, exclude=True)
    settings: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
