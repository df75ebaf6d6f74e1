"""Batch coordinator - reconciles a sync batch against stored state."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.sync import SyncPayload, SyncRecord
from .linker import resolve_or_create_customer
from .merge import FieldMerger
from .outcomes import RecordOutcome, Skipped, SkipReason, SyncSummary
from .upsert import (
    upsert_appointment,
    upsert_custom_label,
    upsert_customer,
    upsert_service,
    upsert_team_member,
)

logger = logging.getLogger(__name__)


class SyncEngine:
    """Runs one sync batch for one organization.

    Kinds are processed in a fixed order (customers, services, team members,
    custom labels, appointments), each in array order. Appointments go last
    because their customer reference may point at a customer from the same
    batch.

    With ``atomic=True`` the batch commits once at the end and any exception
    rolls every write back. With ``atomic=False`` each record is committed as
    soon as it is written, so a failure part-way leaves earlier records stored.
    Either way the exception propagates to the caller.
    """

    def __init__(
        self,
        db: AsyncSession,
        organization_id: uuid.UUID,
        *,
        atomic: bool = True,
        merge_mode: str = "legacy",
    ) -> None:
        self.db = db
        self.organization_id = organization_id
        self.atomic = atomic
        self.merger = FieldMerger(merge_mode)

    async def run(self, payload: SyncPayload) -> SyncSummary:
        summary = SyncSummary()
        try:
            await self._run_kind(summary, payload.customers, upsert_customer)
            await self._run_kind(summary, payload.services, upsert_service)
            await self._run_kind(summary, payload.team_members, upsert_team_member)
            await self._run_kind(summary, payload.custom_labels, upsert_custom_label)
            for record in payload.appointments:
                self._record(summary, record, await self._sync_appointment(summary, record))
                await self._checkpoint()
            if self.atomic:
                await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Sync for organization %s wrote %d records: %s",
            self.organization_id,
            summary.total_written,
            ", ".join(
                f"{kind} +{t.inserted}/~{t.updated}" for kind, t in summary.kinds.items()
            ),
        )
        return summary

    async def _run_kind(self, summary: SyncSummary, records: list[SyncRecord], upsert) -> None:
        for record in records:
            outcome = await upsert(self.db, self.organization_id, record, self.merger)
            self._record(summary, record, outcome)
            await self._checkpoint()

    async def _sync_appointment(self, summary: SyncSummary, record) -> RecordOutcome:
        link = await resolve_or_create_customer(self.db, self.organization_id, record)
        if link is None:
            return Skipped("appointments", SkipReason.UNRESOLVED_CUSTOMER)
        if link.created:
            summary.customers_created_by_appointments += 1
        return await upsert_appointment(
            self.db, self.organization_id, record, self.merger, customer_id=link.customer_id
        )

    def _record(self, summary: SyncSummary, record: SyncRecord, outcome: RecordOutcome) -> None:
        if isinstance(outcome, Skipped):
            logger.debug("Skipped %s record (%s): %r", outcome.kind, outcome.reason.value, record)
        summary.record(outcome)

    async def _checkpoint(self) -> None:
        if not self.atomic:
            await self.db.commit()


async def run_sync(
    db: AsyncSession,
    organization_id: uuid.UUID,
    payload: SyncPayload,
    *,
    atomic: bool = True,
    merge_mode: str = "legacy",
) -> SyncSummary:
    """Convenience wrapper around ``SyncEngine(...).run(payload)``."""
    engine = SyncEngine(db, organization_id, atomic=atomic, merge_mode=merge_mode)
    return await engine.run(payload)
