"""Sync batch schemas.

Every record field is optional: a record lacking its identity field is
skipped by the reconciliation engine rather than rejected by validation.
Which fields a client actually sent is available via ``model_fields_set``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

ENTITY_KINDS = ("customers", "services", "team_members", "custom_labels", "appointments")


class SyncRecord(BaseModel):
    model_config = {"coerce_numbers_to_str": True, "extra": "ignore"}

    def sent(self, field: str) -> bool:
        return field in self.model_fields_set


class CustomerRecord(SyncRecord):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None
    total_bookings: int | None = None
    last_appointment: str | None = None


class ServiceRecord(SyncRecord):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    duration: str | None = None
    price: str | None = None
    category: str | None = None
    is_enabled: bool | None = None


class TeamMemberRecord(SyncRecord):
    name: str | None = None
    email: str | None = None
    role: str | None = None
    avatar: str | None = None
    color: str | None = None
    is_active: bool | None = None


class CustomLabelRecord(SyncRecord):
    label_type: str | None = None
    label_value: str | None = None
    description: str | None = None


class AppointmentRecord(SyncRecord):
    id: int | None = None
    customer_id: int | None = None
    customer_email: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_notes: str | None = None
    service_id: int | None = None
    staff: str | None = None
    date: str | None = None
    time: str | None = None
    status: str | None = None
    notes: str | None = None
    meeting_platform: str | None = None
    meeting_link: str | None = None


class SyncPayload(BaseModel):
    customers: list[CustomerRecord] = []
    services: list[ServiceRecord] = []
    team_members: list[TeamMemberRecord] = []
    custom_labels: list[CustomLabelRecord] = []
    appointments: list[AppointmentRecord] = []

    @field_validator(*ENTITY_KINDS, mode="before")
    @classmethod
    def _arrays_only(cls, value: Any) -> list:
        # Anything but a JSON array counts as an empty collection.
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, (dict, SyncRecord))]