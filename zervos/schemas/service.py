"""Service schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ServiceCreate(BaseModel):
    name: str | None = None
    description: str | None = None
    duration: str | None = None
    price: str | None = None
    category: str | None = None
    is_enabled: bool | None = None

    model_config = {"coerce_numbers_to_str": True}


class ServiceUpdate(ServiceCreate):
    pass


class ServiceResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    duration: str
    price: str | None = None
    category: str
    is_enabled: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
