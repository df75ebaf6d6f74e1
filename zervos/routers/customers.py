"""Customer CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.common import paginated
from ..schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from ..services import customer_svc
from ..tenant.deps import get_organization_id

router = APIRouter(prefix="/api/customers", tags=["customers"])


def _dump(customer) -> dict:
    return CustomerResponse.model_validate(customer).model_dump(mode="json")


@router.get("")
async def list_customers(
    search: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    customers, total = await customer_svc.list_customers(
        db, organization_id, search=search, offset=(page - 1) * limit, limit=limit
    )
    return paginated([_dump(c) for c in customers], total, page=page, limit=limit)


@router.get("/{customer_id}")
async def get_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    customer = await customer_svc.get_customer(db, organization_id, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return _dump(customer)


@router.post("", status_code=201)
async def create_customer(
    data: CustomerCreate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not data.name or not data.email:
        raise HTTPException(status_code=400, detail="name and email are required")
    try:
        customer = await customer_svc.create_customer(db, organization_id, **data.model_dump())
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail="A customer with this email already exists")
    return _dump(customer)


@router.put("/{customer_id}")
async def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    try:
        customer = await customer_svc.update_customer(
            db, organization_id, customer_id, **data.model_dump(exclude_none=True)
        )
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail="A customer with this email already exists")
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return _dump(customer)


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
):
    if not await customer_svc.delete_customer(db, organization_id, customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=204)
