"""FastAPI dependencies for tenant (organization) resolution."""

from __future__ import annotations

import uuid

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..database import get_db
from ..models.organization import Organization
from ..services.organization_svc import get_organization


async def get_current_organization(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> Organization:
    """Resolve the organization named by the request header, else the default one."""
    raw = request.headers.get(settings.organization_header, "").strip() or settings.default_org_id
    try:
        organization_id = uuid.UUID(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid organization id '{raw}'")

    organization = await get_organization(db, organization_id)
    if not organization:
        raise HTTPException(status_code=404, detail=f"Organization '{raw}' not found")
    return organization


async def get_organization_id(
    organization: Organization = Depends(get_current_organization),
) -> uuid.UUID:
    """Shorthand dependency that returns just the organization_id."""
    return organization.id
