"""Appointment service - booking CRUD, status changes and stats."""

from __future__ import annotations

import uuid
from datetime import date as date_cls
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.appointment import Appointment
from ..models.customer import Customer
from ..models.service import Service

STATUSES = ("upcoming", "completed", "cancelled")


def _base_query(organization_id: uuid.UUID):
    return (
        select(Appointment)
        .where(Appointment.organization_id == organization_id)
        .options(selectinload(Appointment.customer), selectinload(Appointment.service))
        .execution_options(populate_existing=True)
    )


def appointment_to_dict(appointment: Appointment) -> dict[str, Any]:
    """Flatten an appointment with its customer and service names."""
    return {
        "id": appointment.id,
        "customer_id": appointment.customer_id,
        "service_id": appointment.service_id,
        "customer_name": appointment.customer.name if appointment.customer else None,
        "service_name": appointment.service.name if appointment.service else None,
        "staff": appointment.staff,
        "date": appointment.date,
        "time": appointment.time,
        "status": appointment.status,
        "notes": appointment.notes,
        "meeting_platform": appointment.meeting_platform,
        "meeting_link": appointment.meeting_link,
        "created_at": appointment.created_at,
        "updated_at": appointment.updated_at,
    }


async def list_appointments(
    db: AsyncSession,
    organization_id: uuid.UUID,
    *,
    status: str | None = None,
    offset: int = 0,
    limit: int = 100,
) -> tuple[list[Appointment], int]:
    stmt = _base_query(organization_id)
    count_stmt = select(func.count(Appointment.id)).where(
        Appointment.organization_id == organization_id
    )
    if status:
        stmt = stmt.where(Appointment.status == status)
        count_stmt = count_stmt.where(Appointment.status == status)

    total = (await db.execute(count_stmt)).scalar() or 0

    stmt = stmt.order_by(Appointment.date.desc(), Appointment.time.desc()).offset(offset).limit(limit)
    return list((await db.execute(stmt)).scalars().all()), total


async def list_upcoming(db: AsyncSession, organization_id: uuid.UUID) -> list[Appointment]:
    stmt = (
        _base_query(organization_id)
        .where(Appointment.status == "upcoming")
        .order_by(Appointment.date, Appointment.time)
    )
    return list((await db.execute(stmt)).scalars().all())


async def list_for_date(
    db: AsyncSession, organization_id: uuid.UUID, day: str | None = None
) -> list[Appointment]:
    """Appointments on a given YYYY-MM-DD date, today by default."""
    day = day or date_cls.today().isoformat()
    stmt = _base_query(organization_id).where(Appointment.date == day).order_by(Appointment.time)
    return list((await db.execute(stmt)).scalars().all())


async def appointment_stats(db: AsyncSession, organization_id: uuid.UUID) -> dict[str, int]:
    stmt = (
        select(Appointment.status, func.count(Appointment.id))
        .where(Appointment.organization_id == organization_id)
        .group_by(Appointment.status)
    )
    counts = {status: count for status, count in (await db.execute(stmt)).all()}
    stats = {status: counts.get(status, 0) for status in STATUSES}
    stats["total"] = sum(counts.values())
    return stats


async def get_appointment(
    db: AsyncSession, organization_id: uuid.UUID, appointment_id: int
) -> Appointment | None:
    stmt = _base_query(organization_id).where(Appointment.id == appointment_id)
    return (await db.execute(stmt)).scalar_one_or_none()


async def _service_exists(db: AsyncSession, organization_id: uuid.UUID, service_id: int) -> bool:
    stmt = select(Service.id).where(
        Service.organization_id == organization_id, Service.id == service_id
    )
    return (await db.execute(stmt)).scalar_one_or_none() is not None


async def refresh_customer_bookings(
    db: AsyncSession, organization_id: uuid.UUID, customer_id: int, last_date: str | None = None
) -> None:
    """Recount a customer's appointments and stamp the latest booking date."""
    customer = (
        await db.execute(
            select(Customer).where(
                Customer.organization_id == organization_id, Customer.id == customer_id
            )
        )
    ).scalar_one_or_none()
    if not customer:
        return
    total = (
        await db.execute(
            select(func.count(Appointment.id)).where(Appointment.customer_id == customer_id)
        )
    ).scalar() or 0
    customer.total_bookings = total
    if last_date:
        customer.last_appointment = last_date


async def create_appointment(
    db: AsyncSession, organization_id: uuid.UUID, **kwargs
) -> Appointment:
    """Book an appointment. A service id that does not exist is stored as null."""
    service_id = kwargs.get("service_id")
    if service_id is not None and not await _service_exists(db, organization_id, service_id):
        kwargs["service_id"] = None
    kwargs["status"] = kwargs.get("status") or "upcoming"

    appointment = Appointment(organization_id=organization_id, **kwargs)
    db.add(appointment)
    await db.flush()
    await refresh_customer_bookings(db, organization_id, appointment.customer_id, appointment.date)
    await db.commit()
    return await get_appointment(db, organization_id, appointment.id)


async def update_appointment(
    db: AsyncSession, organization_id: uuid.UUID, appointment_id: int, **kwargs
) -> Appointment | None:
    appointment = await get_appointment(db, organization_id, appointment_id)
    if not appointment:
        return None
    if "service_id" in kwargs and kwargs["service_id"] is not None:
        if not await _service_exists(db, organization_id, kwargs["service_id"]):
            kwargs["service_id"] = None
    for key, value in kwargs.items():
        setattr(appointment, key, value)
    await db.commit()
    return await get_appointment(db, organization_id, appointment_id)


async def delete_appointment(
    db: AsyncSession, organization_id: uuid.UUID, appointment_id: int
) -> bool:
    appointment = await get_appointment(db, organization_id, appointment_id)
    if not appointment:
        return False
    customer_id = appointment.customer_id
    await db.delete(appointment)
    await db.flush()
    await refresh_customer_bookings(db, organization_id, customer_id)
    await db.commit()
    return True


async def set_status(
    db: AsyncSession, organization_id: uuid.UUID, appointment_id: int, status: str
) -> Appointment | None:
    return await update_appointment(db, organization_id, appointment_id, status=status)
