"""Appointment schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AppointmentCreate(BaseModel):
    customer_id: int | None = None
    service_id: int | None = None
    staff: str | None = None
    date: str | None = None
    time: str | None = None
    status: str | None = None
    notes: str | None = None
    meeting_platform: str | None = None
    meeting_link: str | None = None


class AppointmentUpdate(AppointmentCreate):
    pass


class AppointmentResponse(BaseModel):
    id: int
    customer_id: int
    service_id: int | None = None
    customer_name: str | None = None
    service_name: str | None = None
    staff: str | None = None
    date: str
    time: str
    status: str
    notes: str | None = None
    meeting_platform: str | None = None
    meeting_link: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AppointmentStats(BaseModel):
    total: int = 0
    upcoming: int = 0
    completed: int = 0
    cancelled: int = 0
