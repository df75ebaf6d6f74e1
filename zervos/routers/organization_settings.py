"""Organization settings routes, read and written on the tenant's own row."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.organization import Organization
from ..schemas.organization_settings import OrganizationSettingsResponse, OrganizationSettingsUpdate
from ..services import organization_svc
from ..tenant.deps import get_current_organization

router = APIRouter(prefix="/api/organization-settings", tags=["organization-settings"])


def _dump(organization: Organization) -> dict:
    return OrganizationSettingsResponse.model_validate(organization).model_dump(mode="json")


@router.get("")
async def get_settings(organization: Organization = Depends(get_current_organization)):
    return _dump(organization)


@router.put("")
async def update_settings(
    data: OrganizationSettingsUpdate,
    db: AsyncSession = Depends(get_db),
    organization: Organization = Depends(get_current_organization),
):
    values = data.model_dump(exclude_unset=True)
    if "company_name" in values and not (values["company_name"] or "").strip():
        raise HTTPException(status_code=400, detail="Company name is required")
    organization = await organization_svc.update_settings(db, organization, **values)
    return _dump(organization)
