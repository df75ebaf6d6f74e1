"""Organization settings schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class OrganizationSettingsUpdate(BaseModel):
    company_name: str | None = None
    industry: str | None = None
    email: str | None = None
    phone: str | None = None
    logo: str | None = None
    brand_color: str | None = None
    timezone: str | None = None
    working_days: list[str] | None = None
    working_hours_start: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    working_hours_end: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    booking_url: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    allow_guest_booking: bool | None = None
    require_login: bool | None = None


class OrganizationSettingsResponse(BaseModel):
    id: uuid.UUID
    company_name: str = Field(validation_alias="name")
    slug: str
    industry: str | None = None
    email: str | None = None
    phone: str | None = None
    logo: str | None = None
    brand_color: str
    timezone: str
    working_days: list[str] | None = None
    working_hours_start: str
    working_hours_end: str
    booking_url: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    allow_guest_booking: bool
    require_login: bool
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
