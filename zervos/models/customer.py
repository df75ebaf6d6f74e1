"""Customer model."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class Customer(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "customer"
    __table_args__ = (
        UniqueConstraint("organization_id", "email", name="uq_customer_org_email"),
    )

    name: Mapped[str | None] = mapped_column(String(200), default=None)
    email: Mapped[str] = mapped_column(String(255), index=True)
    phone: Mapped[str | None] = mapped_column(String(50), default=None)
    notes: Mapped[str | None] = mapped_column(Text, default=None)
    total_bookings: Mapped[int] = mapped_column(Integer, default=0)
    last_appointment: Mapped[str | None] = mapped_column(String(20), default=None)  # YYYY-MM-DD

    # Relationships
    organization: Mapped["Organization"] = relationship(back_populates="customers")  # noqa: F821
    appointments: Mapped[list["Appointment"]] = relationship(  # noqa: F821
        back_populates="customer", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Customer {self.email!r}>"
