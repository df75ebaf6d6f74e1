"""Custom label routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.custom_label import CustomLabelCreate, CustomLabelResponse, CustomLabelUpdate
from ..services import custom_label_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/custom-labels", tags=["custom-labels"])


def _dump(label) -> dict:
    return CustomLabelResponse.model_validate(label).model_dump(mode="json")


@router.get("")
async def list_labels(
    label_type: str | None = None,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    labels = await custom_label_svc.list_labels(db, organization_id, label_type=label_type)
    return {"count": len(labels), "results": [_dump(lbl) for lbl in labels]}


@router.get("/{label_id}")
async def get_label(
    label_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    label = await custom_label_svc.get_label(db, organization_id, label_id)
    if not label:
        raise HTTPException(status_code=404, detail="Custom label not found")
    return _dump(label)


@router.post("", status_code=201)
async def create_label(
    data: CustomLabelCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.label_type or not data.label_value:
        raise HTTPException(status_code=400, detail="label_type and label_value are required")
    label = await custom_label_svc.create_label(
        db, organization_id, data.label_type, data.label_value, data.description
    )
    return _dump(label)


@router.put("/{label_id}")
async def update_label(
    label_id: int,
    data: CustomLabelUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    label = await custom_label_svc.update_label(
        db, organization_id, label_id, **data.model_dump(exclude_unset=True)
    )
    if not label:
        raise HTTPException(status_code=404, detail="Custom label not found")
    return _dump(label)


@router.delete("/{label_id}")
async def delete_label(
    label_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await custom_label_svc.delete_label(db, organization_id, label_id):
        raise HTTPException(status_code=404, detail="Custom label not found")
    return {"message": "Custom label deleted successfully"}
