"""Location and resource schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class LocationCreate(BaseModel):
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    directions: str | None = None
    is_active: bool | None = None


class LocationUpdate(LocationCreate):
    pass


class LocationResponse(BaseModel):
    id: int
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    directions: str | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ResourceCreate(BaseModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    is_available: bool | None = None
    location_id: int | None = None


class ResourceUpdate(ResourceCreate):
    pass


class ResourceResponse(BaseModel):
    id: int
    name: str
    type: str
    description: str | None = None
    is_available: bool
    location_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
