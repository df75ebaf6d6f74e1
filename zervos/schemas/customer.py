"""Customer schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CustomerCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


class CustomerUpdate(CustomerCreate):
    total_bookings: int | None = None
    last_appointment: str | None = None


class CustomerResponse(BaseModel):
    id: int
    name: str | None = None
    email: str
    phone: str | None = None
    notes: str | None = None
    total_bookings: int = 0
    last_appointment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
