"""Admin console user accounts."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntIdMixin, TimestampMixin


class User(IntIdMixin, TimestampMixin, Base):
    __tablename__ = "app_user"

    name: Mapped[str | None] = mapped_column(String(200), default=None)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    session_token: Mapped[str | None] = mapped_column(Text, default=None)

    def __repr__(self) -> str:
        return f"<User {self.email!r}>"
