"""Zervos models - re-exports all models and Base.metadata."""

from .base import Base, UUIDMixin, IntIdMixin, TimestampMixin, TenantMixin
from .organization import Organization
from .customer import Customer
from .service import Service
from .team_member import TeamMember
from .custom_label import CustomLabel
from .appointment import Appointment
from .user import User
from .notification_setting import NotificationSetting
from .role import Role
from .workspace import Workspace
from .location import Location, Resource
from .integration import Integration

__all__ = [
    "Base",
    "UUIDMixin",
    "IntIdMixin",
    "TimestampMixin",
    "TenantMixin",
    "Organization",
    "Customer",
    "Service",
    "TeamMember",
    "CustomLabel",
    "Appointment",
    "User",
    "NotificationSetting",
    "Role",
    "Workspace",
    "Location",
    "Resource",
    "Integration",
]
