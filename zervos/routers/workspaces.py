"""Workspace routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.workspace import WorkspaceCreate, WorkspaceResponse, WorkspaceUpdate
from ..services import workspace_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/workspaces", tags=["workspaces"])


def _dump(workspace) -> dict:
    return WorkspaceResponse.model_validate(workspace).model_dump(mode="json")


@router.get("")
async def list_workspaces(
    active: bool | None = None,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    workspaces = await workspace_svc.list_workspaces(db, organization_id, active=active)
    return {"count": len(workspaces), "results": [_dump(w) for w in workspaces]}


@router.get("/{workspace_id}")
async def get_workspace(
    workspace_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    workspace = await workspace_svc.get_workspace(db, organization_id, workspace_id)
    if not workspace:
        raise HTTPException(status_code=404, detail="Workspace not found")
    return _dump(workspace)


@router.post("", status_code=201)
async def create_workspace(
    data: WorkspaceCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name:
        raise HTTPException(status_code=400, detail="Workspace name is required")
    workspace = await workspace_svc.create_workspace(db, organization_id, **data.model_dump())
    return _dump(workspace)


@router.put("/{workspace_id}")
async def update_workspace(
    workspace_id: int,
    data: WorkspaceUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    workspace = await workspace_svc.update_workspace(
        db, organization_id, workspace_id, **data.model_dump(exclude_none=True)
    )
    if not workspace:
        raise HTTPException(status_code=404, detail="Workspace not found")
    return _dump(workspace)


@router.delete("/{workspace_id}")
async def delete_workspace(
    workspace_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await workspace_svc.delete_workspace(db, organization_id, workspace_id):
        raise HTTPException(status_code=404, detail="Workspace not found")
    return {"message": "Workspace deleted successfully"}
