"""Custom label model (tenant-defined vocabulary, e.g. status names)."""

from __future__ import annotations

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class CustomLabel(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "custom_label"
    __table_args__ = (
        Index("ix_custom_label_org_type_value", "organization_id", "label_type", "label_value"),
    )

    label_type: Mapped[str] = mapped_column(String(100))
    label_value: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, default=None)

    def __repr__(self) -> str:
        return f"<CustomLabel {self.label_type!r}={self.label_value!r}>"
