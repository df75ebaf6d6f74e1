"""Custom label schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CustomLabelCreate(BaseModel):
    label_type: str | None = None
    label_value: str | None = None
    description: str | None = None


class CustomLabelUpdate(CustomLabelCreate):
    pass


class CustomLabelResponse(BaseModel):
    id: int
    label_type: str
    label_value: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
