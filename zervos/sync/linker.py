"""Cross-entity linker - resolves an appointment's customer reference."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.customer import Customer
from ..schemas.sync import AppointmentRecord
from .keys import find_customer_by_email, find_customer_by_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomerLink:
    customer_id: int
    created: bool = False


async def resolve_or_create_customer(
    db: AsyncSession, organization_id: uuid.UUID, record: AppointmentRecord
) -> CustomerLink | None:
    """Resolve the customer an appointment belongs to.

    Order, first hit wins:
      1. ``customer_id`` naming an existing customer of this organization
      2. ``customer_email`` matching an existing customer
      3. ``customer_email`` with no match: a new customer is created from the
         embedded ``customer_*`` fields (zero bookings, no last appointment)

    Returns None when neither an id nor an e-mail resolves; the caller drops
    the appointment.
    """
    if record.customer_id:
        existing = await find_customer_by_id(db, organization_id, record.customer_id)
        if existing:
            return CustomerLink(existing.id)

    if not record.customer_email:
        return None

    existing = await find_customer_by_email(db, organization_id, record.customer_email)
    if existing:
        return CustomerLink(existing.id)

    customer = Customer(
        organization_id=organization_id,
        name=record.customer_name or None,
        email=record.customer_email,
        phone=record.customer_phone or None,
        notes=record.customer_notes or None,
        total_bookings=0,
        last_appointment=None,
    )
    db.add(customer)
    await db.flush()
    logger.debug("Created customer %s (%s) for appointment", customer.id, customer.email)
    return CustomerLink(customer.id, created=True)
