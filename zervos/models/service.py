"""Service (bookable offering) model."""

from __future__ import annotations

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class Service(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "service"
    __table_args__ = (
        Index("ix_service_org_name", "organization_id", "name"),
    )

    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    duration: Mapped[str] = mapped_column(String(50), default="00:00")  # free text, e.g. "60 mins"
    price: Mapped[str | None] = mapped_column(String(50), default=None)
    category: Mapped[str] = mapped_column(String(50), default="other")
    is_enabled: Mapped[bool] = mapped_column(Boolean, default=True)

    # Relationships
    organization: Mapped["Organization"] = relationship(back_populates="services")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Service {self.name!r}>"
