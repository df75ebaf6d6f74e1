"""Per-organization notification toggles."""

from __future__ import annotations

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class NotificationSetting(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "notification_setting"
    __table_args__ = (
        UniqueConstraint(
            "organization_id", "entity_type", "event_type",
            name="uq_notification_setting_event",
        ),
    )

    entity_type: Mapped[str] = mapped_column(String(50))  # appointment/customer/...
    event_type: Mapped[str] = mapped_column(String(50))  # created/cancelled/...
    is_enabled: Mapped[bool] = mapped_column(Boolean, default=True)
