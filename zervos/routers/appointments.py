"""Appointment routes - bookings, status changes and stats."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentStats,
    AppointmentUpdate,
)
from ..schemas.common import paginated
from ..services import appointment_svc, customer_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


def _dump(appointment) -> dict:
    data = appointment_svc.appointment_to_dict(appointment)
    return AppointmentResponse(**data).model_dump(mode="json")


@router.get("")
async def list_appointments(
    status: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    appointments, total = await appointment_svc.list_appointments(
        db, organization_id, status=status, offset=(page - 1) * limit, limit=limit
    )
    return paginated([_dump(a) for a in appointments], total, page=page, limit=limit)


@router.get("/upcoming")
async def list_upcoming(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    return [_dump(a) for a in await appointment_svc.list_upcoming(db, organization_id)]


@router.get("/today")
async def list_today(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    return [_dump(a) for a in await appointment_svc.list_for_date(db, organization_id)]


@router.get("/stats")
async def stats(
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    counts = await appointment_svc.appointment_stats(db, organization_id)
    return AppointmentStats(**counts).model_dump()


@router.get("/{appointment_id}")
async def get_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    appointment = await appointment_svc.get_appointment(db, organization_id, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return _dump(appointment)


@router.post("", status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if data.customer_id is None or not data.date or not data.time:
        raise HTTPException(status_code=400, detail="customer_id, date and time are required")
    if not await customer_svc.get_customer(db, organization_id, data.customer_id):
        raise HTTPException(status_code=400, detail="Customer not found")
    appointment = await appointment_svc.create_appointment(
        db, organization_id, **data.model_dump(exclude_none=True)
    )
    return _dump(appointment)


@router.put("/{appointment_id}")
async def update_appointment(
    appointment_id: int,
    data: AppointmentUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    fields = data.model_dump(exclude_none=True)
    if "customer_id" in fields and not await customer_svc.get_customer(
        db, organization_id, fields["customer_id"]
    ):
        raise HTTPException(status_code=400, detail="Customer not found")
    appointment = await appointment_svc.update_appointment(
        db, organization_id, appointment_id, **fields
    )
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return _dump(appointment)


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await appointment_svc.delete_appointment(db, organization_id, appointment_id):
        raise HTTPException(status_code=404, detail="Appointment not found")
    return Response(status_code=204)


@router.post("/{appointment_id}/complete")
async def complete_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    appointment = await appointment_svc.set_status(db, organization_id, appointment_id, "completed")
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return _dump(appointment)


@router.post("/{appointment_id}/cancel")
async def cancel_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    appointment = await appointment_svc.set_status(db, organization_id, appointment_id, "cancelled")
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return _dump(appointment)
