"""Organization (tenant) service."""

from __future__ import annotations

import re
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.organization import Organization


def _slugify(name: str) -> str:
    slug = name.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    return re.sub(r"-+", "-", slug).strip("-")


async def get_organization(db: AsyncSession, organization_id: uuid.UUID) -> Organization | None:
    result = await db.execute(select(Organization).where(Organization.id == organization_id))
    return result.scalar_one_or_none()


async def ensure_organization(
    db: AsyncSession, organization_id: uuid.UUID, name: str
) -> Organization:
    """Return the organization, creating it on first use."""
    organization = await get_organization(db, organization_id)
    if organization:
        return organization
    organization = Organization(
        id=organization_id,
        name=name,
        slug=f"{_slugify(name) or 'org'}-{str(organization_id)[:8]}",
    )
    db.add(organization)
    await db.commit()
    await db.refresh(organization)
    return organization


# Settings columns that cannot be cleared; a null leaves them unchanged
REQUIRED_SETTINGS = {
    "name", "brand_color", "timezone", "working_hours_start", "working_hours_end",
    "allow_guest_booking", "require_login",
}


async def update_settings(
    db: AsyncSession, organization: Organization, **kwargs
) -> Organization:
    """Apply a partial settings update. ``company_name`` maps onto ``name``."""
    if "company_name" in kwargs:
        kwargs["name"] = kwargs.pop("company_name")
    for key, value in kwargs.items():
        if value is None and key in REQUIRED_SETTINGS:
            continue
        setattr(organization, key, value)
    await db.commit()
    await db.refresh(organization)
    return organization
