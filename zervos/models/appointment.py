"""Appointment model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class Appointment(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "appointment"
    __table_args__ = (
        Index("ix_appointment_booking_key", "organization_id", "customer_id", "date", "time"),
    )

    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customer.id", ondelete="CASCADE"), index=True
    )
    service_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("service.id", ondelete="SET NULL"), default=None
    )
    staff: Mapped[str | None] = mapped_column(String(200), default=None)
    date: Mapped[str] = mapped_column(String(10))  # YYYY-MM-DD
    time: Mapped[str] = mapped_column(String(20))  # free text, e.g. "10:00" or "02:00 PM"
    status: Mapped[str] = mapped_column(String(20), default="upcoming")  # upcoming/completed/cancelled
    notes: Mapped[str | None] = mapped_column(Text, default=None)
    meeting_platform: Mapped[str | None] = mapped_column(String(100), default=None)
    meeting_link: Mapped[str | None] = mapped_column(String(500), default=None)

    # Relationships
    customer: Mapped["Customer"] = relationship(back_populates="appointments")  # noqa: F821
    service: Mapped["Service | None"] = relationship()  # noqa: F821

    def __repr__(self) -> str:
        return f"<Appointment {self.date} {self.time} customer={self.customer_id}>"
