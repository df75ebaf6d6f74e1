"""Test the sync reconciliation engine against the database."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from zervos.models import Appointment, CustomLabel, Customer, Organization, Service
from zervos.schemas.sync import SyncPayload
from zervos.services import customer_svc, service_svc
from zervos.services.organization_svc import ensure_organization
from zervos.sync.engine import SyncEngine, run_sync
from zervos.sync.outcomes import SkipReason


def _payload(**kinds) -> SyncPayload:
    return SyncPayload.model_validate(kinds)


async def _count(db: AsyncSession, model) -> int:
    return (await db.execute(select(func.count(model.id)))).scalar()


@pytest.mark.asyncio
async def test_customer_insert_then_update_is_idempotent(db: AsyncSession, organization: Organization):
    payload = _payload(customers=[{"email": "a@b.com", "name": "A"}])

    first = await run_sync(db, organization.id, payload)
    second = await run_sync(db, organization.id, payload)

    assert first["customers"].inserted == 1
    assert second["customers"].inserted == 0
    assert second["customers"].updated == 1
    assert await _count(db, Customer) == 1


@pytest.mark.asyncio
async def test_customer_without_email_is_skipped(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(customers=[{"name": "No Email"}]))
    assert summary["customers"].inserted == 0
    assert summary["customers"].skipped[SkipReason.MISSING_EMAIL] == 1
    assert await _count(db, Customer) == 0


@pytest.mark.asyncio
async def test_merge_preserves_unset_fields(db: AsyncSession, organization: Organization):
    await customer_svc.create_customer(
        db, organization.id, name="Alice", email="a@b.com", phone="111", notes="vip"
    )

    await run_sync(db, organization.id, _payload(customers=[{"email": "a@b.com", "name": "Alicia", "phone": ""}]))

    customer = (await db.execute(select(Customer).where(Customer.email == "a@b.com"))).scalar_one()
    assert customer.name == "Alicia"
    assert customer.phone == "111"
    assert customer.notes == "vip"


@pytest.mark.asyncio
async def test_total_bookings_zero_applies_in_legacy_mode(db: AsyncSession, organization: Organization):
    await customer_svc.create_customer(db, organization.id, name="Alice", email="a@b.com", total_bookings=4)
    await run_sync(db, organization.id, _payload(customers=[{"email": "a@b.com", "total_bookings": 0}]))
    customer = (await db.execute(select(Customer).where(Customer.email == "a@b.com"))).scalar_one()
    assert customer.total_bookings == 0


@pytest.mark.asyncio
async def test_presence_mode_clears_sent_fields(db: AsyncSession, organization: Organization):
    await customer_svc.create_customer(db, organization.id, name="Alice", email="a@b.com", phone="111")
    await run_sync(
        db, organization.id,
        _payload(customers=[{"email": "a@b.com", "phone": None}]),
        merge_mode="presence",
    )
    customer = (await db.execute(select(Customer).where(Customer.email == "a@b.com"))).scalar_one()
    assert customer.phone is None
    assert customer.name == "Alice"


@pytest.mark.asyncio
async def test_insert_defaults(db: AsyncSession, organization: Organization):
    await run_sync(db, organization.id, _payload(
        customers=[{"email": "a@b.com"}],
        services=[{"name": "Cut"}],
        team_members=[{"email": "t@b.com"}],
    ))
    service = (await db.execute(select(Service))).scalar_one()
    assert (service.duration, service.category, service.is_enabled) == ("00:00", "other", True)
    customer = (await db.execute(select(Customer))).scalar_one()
    assert customer.total_bookings == 0
    assert customer.last_appointment is None


@pytest.mark.asyncio
async def test_service_id_takes_precedence_over_name(db: AsyncSession, organization: Organization):
    cut = await service_svc.create_service(db, organization.id, name="Cut")
    color = await service_svc.create_service(db, organization.id, name="Color")

    summary = await run_sync(db, organization.id, _payload(
        services=[{"id": cut.id, "name": "Color", "price": 30}],
    ))

    assert summary["services"].updated == 1
    assert summary["services"].inserted == 0
    rows = {s.id: s for s in (await db.execute(select(Service))).scalars().all()}
    assert rows[cut.id].name == "Color"
    assert rows[cut.id].price == "30"
    assert rows[color.id].price is None


@pytest.mark.asyncio
async def test_service_matched_by_name(db: AsyncSession, organization: Organization):
    await service_svc.create_service(db, organization.id, name="Cut", duration="30 mins")
    summary = await run_sync(db, organization.id, _payload(services=[{"name": "Cut", "is_enabled": False}]))
    assert summary["services"].updated == 1
    service = (await db.execute(select(Service))).scalar_one()
    assert service.is_enabled is False
    assert service.duration == "30 mins"


@pytest.mark.asyncio
async def test_service_without_id_or_name_is_skipped(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(services=[{"id": 999, "price": "5"}]))
    assert summary["services"].skipped[SkipReason.MISSING_NAME] == 1
    assert await _count(db, Service) == 0


@pytest.mark.asyncio
async def test_custom_label_composite_key_dedup(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(custom_labels=[
        {"label_type": "platform", "label_value": "Zoom"},
        {"label_type": "platform", "label_value": "Zoom", "description": "Video"},
        {"label_type": "platform"},
    ]))
    assert summary["custom_labels"].inserted == 1
    assert summary["custom_labels"].updated == 1
    assert summary["custom_labels"].skipped[SkipReason.MISSING_LABEL_KEY] == 1
    label = (await db.execute(select(CustomLabel))).scalar_one()
    assert label.description == "Video"


@pytest.mark.asyncio
async def test_appointment_creates_customer_from_email(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(appointments=[{
        "customer_email": "new@b.com",
        "customer_name": "New",
        "date": "2025-01-01",
        "time": "10:00",
    }]))

    assert summary["appointments"].inserted == 1
    assert summary["customers"].inserted == 0
    assert summary.customers_created_by_appointments == 1
    customer = (await db.execute(select(Customer))).scalar_one()
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert customer.name == "New"
    assert customer.total_bookings == 0
    assert appointment.customer_id == customer.id
    assert appointment.status == "upcoming"


@pytest.mark.asyncio
async def test_appointment_links_batch_customer_by_email(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(
        customers=[{"email": "a@b.com", "name": "A"}],
        appointments=[{"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"}],
    ))
    assert summary.customers_created_by_appointments == 0
    assert await _count(db, Customer) == 1
    customer = (await db.execute(select(Customer))).scalar_one()
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.customer_id == customer.id


@pytest.mark.asyncio
async def test_appointment_without_customer_reference_is_dropped(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload(appointments=[
        {"date": "2025-01-01", "time": "10:00"},
        {"customer_id": 4242, "date": "2025-01-01", "time": "11:00"},
    ]))
    assert summary["appointments"].inserted == 0
    assert summary["appointments"].updated == 0
    assert summary["appointments"].skipped[SkipReason.UNRESOLVED_CUSTOMER] == 2
    assert await _count(db, Appointment) == 0
    assert await _count(db, Customer) == 0


@pytest.mark.asyncio
async def test_unknown_customer_id_falls_through_to_email(db: AsyncSession, organization: Organization):
    existing = await customer_svc.create_customer(db, organization.id, email="a@b.com")
    await run_sync(db, organization.id, _payload(appointments=[
        {"customer_id": 4242, "customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"},
    ]))
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.customer_id == existing.id


@pytest.mark.asyncio
async def test_appointment_composite_key_without_service(db: AsyncSession, organization: Organization):
    payload = _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "notes": "first"},
    ])
    await run_sync(db, organization.id, payload)
    second = await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "notes": "second"},
    ]))

    assert second["appointments"].updated == 1
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.notes == "second"


@pytest.mark.asyncio
async def test_appointment_id_takes_precedence(db: AsyncSession, organization: Organization):
    await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"},
    ]))
    appointment = (await db.execute(select(Appointment))).scalar_one()

    summary = await run_sync(db, organization.id, _payload(appointments=[
        {"id": appointment.id, "customer_email": "a@b.com", "date": "2025-02-02", "time": "09:00"},
    ]))
    assert summary["appointments"].updated == 1
    assert await _count(db, Appointment) == 1
    assert appointment.date == "2025-02-02"


@pytest.mark.asyncio
async def test_atomic_batch_rolls_back_on_failure(db: AsyncSession, organization: Organization):
    payload = _payload(
        customers=[{"email": "a@b.com"}],
        appointments=[{"customer_email": "a@b.com", "time": "10:00"}],  # no date
    )
    with pytest.raises(IntegrityError):
        await SyncEngine(db, organization.id, atomic=True).run(payload)
    assert await _count(db, Customer) == 0


@pytest.mark.asyncio
async def test_per_record_commits_keep_earlier_writes(db: AsyncSession, organization: Organization):
    payload = _payload(
        customers=[{"email": "a@b.com"}],
        appointments=[{"customer_email": "a@b.com", "time": "10:00"}],
    )
    with pytest.raises(IntegrityError):
        await SyncEngine(db, organization.id, atomic=False).run(payload)
    assert await _count(db, Customer) == 1


@pytest.mark.asyncio
async def test_lookups_are_scoped_to_organization(db: AsyncSession, organization: Organization):
    other = await ensure_organization(db, uuid.uuid4(), "Other Org")
    await customer_svc.create_customer(db, other.id, name="Other", email="a@b.com")

    summary = await run_sync(db, organization.id, _payload(customers=[{"email": "a@b.com", "name": "Mine"}]))

    assert summary["customers"].inserted == 1
    names = (await db.execute(select(Customer.name).order_by(Customer.name))).scalars().all()
    assert names == ["Mine", "Other"]


@pytest.mark.asyncio
async def test_summary_shape(db: AsyncSession, organization: Organization):
    summary = await run_sync(db, organization.id, _payload())
    assert summary.to_dict() == {
        "customers": {"inserted": 0, "updated": 0},
        "services": {"inserted": 0, "updated": 0},
        "team_members": {"inserted": 0, "updated": 0},
        "custom_labels": {"inserted": 0, "updated": 0},
        "appointments": {"inserted": 0, "updated": 0},
    }


@pytest.mark.asyncio
async def test_appointment_ignores_service_of_other_organization(db: AsyncSession, organization: Organization):
    other = await ensure_organization(db, uuid.uuid4(), "Other Org")
    foreign = await service_svc.create_service(db, other.id, name="Foreign Cut")

    summary = await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "service_id": foreign.id},
    ]))

    assert summary["appointments"].inserted == 1
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.service_id is None


@pytest.mark.asyncio
async def test_appointment_with_unknown_service_matches_service_less_row(db: AsyncSession, organization: Organization):
    await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00"},
    ]))
    summary = await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "service_id": 4242},
    ]))

    assert summary["appointments"].updated == 1
    assert await _count(db, Appointment) == 1
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.service_id is None


@pytest.mark.asyncio
async def test_appointment_keeps_own_organization_service(db: AsyncSession, organization: Organization):
    mine = await service_svc.create_service(db, organization.id, name="Cut")
    await run_sync(db, organization.id, _payload(appointments=[
        {"customer_email": "a@b.com", "date": "2025-01-01", "time": "10:00", "service_id": mine.id},
    ]))
    appointment = (await db.execute(select(Appointment))).scalar_one()
    assert appointment.service_id == mine.id
