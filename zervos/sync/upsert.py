"""Upsert executor - writes one row per sync record and classifies the write."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.appointment import Appointment
from ..models.custom_label import CustomLabel
from ..models.customer import Customer
from ..models.service import Service
from ..models.team_member import TeamMember
from ..schemas.sync import (
    AppointmentRecord,
    CustomerRecord,
    CustomLabelRecord,
    ServiceRecord,
    TeamMemberRecord,
)
from .keys import (
    find_appointment,
    find_custom_label,
    find_customer_by_email,
    find_service,
    find_service_by_id,
    find_team_member,
)
from .merge import FieldMerger, none_default, or_default
from .outcomes import Processed, RecordOutcome, Skipped, SkipReason

logger = logging.getLogger(__name__)


async def _inserted(db: AsyncSession, kind: str, row) -> Processed:
    db.add(row)
    await db.flush()
    return Processed(kind, "inserted", row.id)


async def _updated(db: AsyncSession, kind: str, row) -> Processed:
    await db.flush()
    return Processed(kind, "updated", row.id)


async def upsert_customer(
    db: AsyncSession, organization_id: uuid.UUID, record: CustomerRecord, merger: FieldMerger
) -> RecordOutcome:
    if not record.email:
        return Skipped("customers", SkipReason.MISSING_EMAIL)

    existing = await find_customer_by_email(db, organization_id, record.email)
    if existing:
        merger.apply(
            existing, record,
            ("name", "phone", "notes", "total_bookings", "last_appointment"),
            nullable_only=("total_bookings",),
        )
        return await _updated(db, "customers", existing)

    return await _inserted(db, "customers", Customer(
        organization_id=organization_id,
        name=or_default(record.name, None),
        email=record.email,
        phone=or_default(record.phone, None),
        notes=or_default(record.notes, None),
        total_bookings=or_default(record.total_bookings, 0),
        last_appointment=or_default(record.last_appointment, None),
    ))


async def upsert_service(
    db: AsyncSession, organization_id: uuid.UUID, record: ServiceRecord, merger: FieldMerger
) -> RecordOutcome:
    existing = await find_service(db, organization_id, service_id=record.id, name=record.name)
    if existing:
        merger.apply(
            existing, record,
            ("name", "description", "duration", "price", "category", "is_enabled"),
            nullable_only=("is_enabled",),
        )
        return await _updated(db, "services", existing)

    if not record.name:
        return Skipped("services", SkipReason.MISSING_NAME)

    return await _inserted(db, "services", Service(
        organization_id=organization_id,
        name=record.name,
        description=or_default(record.description, None),
        duration=or_default(record.duration, "00:00"),
        price=or_default(record.price, None),
        category=or_default(record.category, "other"),
        is_enabled=none_default(record.is_enabled, True),
    ))


async def upsert_team_member(
    db: AsyncSession, organization_id: uuid.UUID, record: TeamMemberRecord, merger: FieldMerger
) -> RecordOutcome:
    if not record.email:
        return Skipped("team_members", SkipReason.MISSING_EMAIL)

    existing = await find_team_member(db, organization_id, record.email)
    if existing:
        merger.apply(
            existing, record,
            ("name", "role", "avatar", "color", "is_active"),
            nullable_only=("is_active",),
        )
        return await _updated(db, "team_members", existing)

    return await _inserted(db, "team_members", TeamMember(
        organization_id=organization_id,
        name=or_default(record.name, None),
        email=record.email,
        role=or_default(record.role, "salesperson"),
        avatar=or_default(record.avatar, None),
        color=or_default(record.color, None),
        is_active=none_default(record.is_active, True),
    ))


async def upsert_custom_label(
    db: AsyncSession, organization_id: uuid.UUID, record: CustomLabelRecord, merger: FieldMerger
) -> RecordOutcome:
    if not record.label_type or not record.label_value:
        return Skipped("custom_labels", SkipReason.MISSING_LABEL_KEY)

    existing = await find_custom_label(db, organization_id, record.label_type, record.label_value)
    if existing:
        # Only the description is mutable; type and value are the key.
        merger.apply(existing, record, ("description",))
        return await _updated(db, "custom_labels", existing)

    return await _inserted(db, "custom_labels", CustomLabel(
        organization_id=organization_id,
        label_type=record.label_type,
        label_value=record.label_value,
        description=or_default(record.description, None),
    ))


async def upsert_appointment(
    db: AsyncSession,
    organization_id: uuid.UUID,
    record: AppointmentRecord,
    merger: FieldMerger,
    *,
    customer_id: int,
) -> RecordOutcome:
    """Upsert an appointment whose customer has already been resolved.

    A service id that is not one of this organization's services is treated
    as no service at all, for both matching and writing.
    """
    service_id = record.service_id or None
    if service_id is not None and not await find_service_by_id(db, organization_id, service_id):
        logger.debug("Ignoring service %s on appointment: not in organization %s", service_id, organization_id)
        service_id = None
        record = record.model_copy(update={"service_id": None})

    existing = await find_appointment(
        db, organization_id,
        appointment_id=record.id,
        customer_id=customer_id,
        date=record.date,
        time=record.time,
        service_id=service_id,
    )
    if existing:
        existing.customer_id = customer_id
        merger.apply(
            existing, record,
            ("service_id", "staff", "date", "time", "status", "notes", "meeting_platform", "meeting_link"),
        )
        return await _updated(db, "appointments", existing)

    return await _inserted(db, "appointments", Appointment(
        organization_id=organization_id,
        customer_id=customer_id,
        service_id=service_id,
        staff=or_default(record.staff, None),
        date=record.date,
        time=record.time,
        status=or_default(record.status, "upcoming"),
        notes=or_default(record.notes, None),
        meeting_platform=or_default(record.meeting_platform, None),
        meeting_link=or_default(record.meeting_link, None),
    ))
