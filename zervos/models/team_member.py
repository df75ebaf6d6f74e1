"""Team member model."""

from __future__ import annotations

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class TeamMember(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "team_member"
    __table_args__ = (
        UniqueConstraint("organization_id", "email", name="uq_team_member_org_email"),
    )

    name: Mapped[str | None] = mapped_column(String(200), default=None)
    email: Mapped[str] = mapped_column(String(255), index=True)
    role: Mapped[str] = mapped_column(String(50), default="salesperson")  # super_admin/admin/salesperson/viewer
    avatar: Mapped[str | None] = mapped_column(String(500), default=None)
    color: Mapped[str | None] = mapped_column(String(100), default=None)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<TeamMember {self.email!r}>"
