"""Key resolver - finds the stored row an incoming sync record refers to."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.appointment import Appointment
from ..models.custom_label import CustomLabel
from ..models.customer import Customer
from ..models.service import Service
from ..models.team_member import TeamMember


async def find_customer_by_email(
    db: AsyncSession, organization_id: uuid.UUID, email: str
) -> Customer | None:
    stmt = select(Customer).where(
        Customer.organization_id == organization_id, Customer.email == email
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def find_customer_by_id(
    db: AsyncSession, organization_id: uuid.UUID, customer_id: int
) -> Customer | None:
    stmt = select(Customer).where(
        Customer.organization_id == organization_id, Customer.id == customer_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def find_service_by_id(
    db: AsyncSession, organization_id: uuid.UUID, service_id: int
) -> Service | None:
    stmt = select(Service).where(
        Service.organization_id == organization_id, Service.id == service_id
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def find_service(
    db: AsyncSession,
    organization_id: uuid.UUID,
    *,
    service_id: int | None,
    name: str | None,
) -> Service | None:
    """Match by id first; fall back to an exact name match.

    Names are not unique, so the oldest row with that name wins.
    """
    if service_id:
        found = await find_service_by_id(db, organization_id, service_id)
        if found:
            return found
    if name:
        stmt = (
            select(Service)
            .where(Service.organization_id == organization_id, Service.name == name)
            .order_by(Service.id)
            .limit(1)
        )
        return (await db.execute(stmt)).scalar_one_or_none()
    return None


async def find_team_member(
    db: AsyncSession, organization_id: uuid.UUID, email: str
) -> TeamMember | None:
    stmt = select(TeamMember).where(
        TeamMember.organization_id == organization_id, TeamMember.email == email
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def find_custom_label(
    db: AsyncSession, organization_id: uuid.UUID, label_type: str, label_value: str
) -> CustomLabel | None:
    stmt = (
        select(CustomLabel)
        .where(
            CustomLabel.organization_id == organization_id,
            CustomLabel.label_type == label_type,
            CustomLabel.label_value == label_value,
        )
        .order_by(CustomLabel.id)
        .limit(1)
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def find_appointment(
    db: AsyncSession,
    organization_id: uuid.UUID,
    *,
    appointment_id: int | None,
    customer_id: int,
    date: str | None,
    time: str | None,
    service_id: int | None,
) -> Appointment | None:
    """Match by id first; fall back to (customer, date, time, service).

    A missing service is part of the key: it matches rows whose service is NULL.
    """
    if appointment_id:
        stmt = select(Appointment).where(
            Appointment.organization_id == organization_id, Appointment.id == appointment_id
        )
        found = (await db.execute(stmt)).scalar_one_or_none()
        if found:
            return found

    if not date or not time:
        return None

    service_clause = (
        Appointment.service_id.is_(None) if service_id is None
        else Appointment.service_id == service_id
    )
    stmt = (
        select(Appointment)
        .where(
            Appointment.organization_id == organization_id,
            Appointment.customer_id == customer_id,
            Appointment.date == date,
            Appointment.time == time,
            service_clause,
        )
        .order_by(Appointment.id)
        .limit(1)
    )
    return (await db.execute(stmt)).scalar_one_or_none()
