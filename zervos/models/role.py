"""Named permission sets assignable to team members."""

from __future__ import annotations

from sqlalchemy import JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin, TenantMixin


class Role(IntIdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "role"
    __table_args__ = (
        UniqueConstraint("organization_id", "name", name="uq_role_org_name"),
    )

    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    permissions: Mapped[list | dict] = mapped_column(JSON)

    def __repr__(self) -> str:
        return f"<Role {self.name!r}>"
