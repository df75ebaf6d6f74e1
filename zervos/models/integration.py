"""Third-party integration connections."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class Integration(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "integration"

    name: Mapped[str] = mapped_column(String(200))
    type: Mapped[str] = mapped_column(String(50))  # calendar/video/payment/...
    is_connected: Mapped[bool] = mapped_column(Boolean, default=False)
    api_key: Mapped[str | None] = mapped_column(Text, default=None)  # never returned by the API
    settings: Mapped[dict | None] = mapped_column(JSON, default=None)
