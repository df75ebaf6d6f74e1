"""Organization model - the tenant root and its booking-page settings."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UUIDMixin, TimestampMixin

DEFAULT_WORKING_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


class Organization(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "organization"

    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    timezone: Mapped[str] = mapped_column(String(50), default="Asia/Kolkata")

    # Settings shown on the admin settings page and the public booking page
    industry: Mapped[str | None] = mapped_column(String(100), default=None)
    email: Mapped[str | None] = mapped_column(String(255), default=None)
    phone: Mapped[str | None] = mapped_column(String(50), default=None)
    logo: Mapped[str | None] = mapped_column(String(500), default=None)
    brand_color: Mapped[str] = mapped_column(String(20), default="#6366f1")
    working_days: Mapped[list | None] = mapped_column(
        JSON, default=lambda: list(DEFAULT_WORKING_DAYS)
    )
    working_hours_start: Mapped[str] = mapped_column(String(5), default="09:00")
    working_hours_end: Mapped[str] = mapped_column(String(5), default="18:00")
    booking_url: Mapped[str | None] = mapped_column(String(500), default=None)
    meta_title: Mapped[str | None] = mapped_column(String(200), default=None)
    meta_description: Mapped[str | None] = mapped_column(Text, default=None)
    allow_guest_booking: Mapped[bool] = mapped_column(Boolean, default=True)
    require_login: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    customers: Mapped[list["Customer"]] = relationship(  # noqa: F821
        back_populates="organization", cascade="all, delete-orphan"
    )
    services: Mapped[list["Service"]] = relationship(  # noqa: F821
        back_populates="organization", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Organization {self.slug!r}>"
