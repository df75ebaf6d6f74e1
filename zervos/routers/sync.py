"""Bulk sync endpoint - reconciles a client batch into stored state."""

from __future__ import annotations

import json
import logging
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..database import get_db
from ..schemas.sync import SyncPayload
from ..security.tokens import require_user
from ..sync.engine import SyncEngine
from ..tenant.deps import get_organization_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])


@router.post("/sync")
async def sync_batch(
    request: Request,
    include_skipped: bool = False,
    claims: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    """Reconcile one batch and return per-kind insert/update counts.

    A missing body, or one that is not a JSON object, counts as an empty
    batch. Unparseable JSON and records that fail validation, like any
    storage error, fail the whole batch with 500.

    With the default ``ZERVOS_SYNC_ATOMIC_BATCHES=true`` a failed batch
    leaves nothing behind. This differs from the legacy contract, where
    records written before the failure stay committed; set the option to
    false to get that behaviour back.
    """
    engine = SyncEngine(
        db,
        organization_id,
        atomic=settings.sync_atomic_batches,
        merge_mode=settings.sync_merge_mode,
    )
    try:
        raw = await request.body()
        body = json.loads(raw) if raw.strip() else None
        payload = SyncPayload.model_validate(body if isinstance(body, dict) else {})
        summary = await engine.run(payload)
    except Exception as e:
        logger.exception("Sync failed for user %s", claims.get("email"))
        await db.rollback()
        return JSONResponse(status_code=500, content={"error": "Sync failed", "message": str(e)})
    return {"ok": True, "summary": summary.to_dict(include_skipped=include_skipped)}
