from sqlmodel import SQLModel

from vacation_manager.models.base import TimestampMixin, UpdatedAtMixin, UUIDBase
from vacation_manager.models.department import Department
from vacation_manager.models.enums import (
    FirstDayOfWeek,
    Language,
    Resolution,
    Theme,
    UserRole,
    VacationStatus,
)
from vacation_manager.models.notification import Notification
from vacation_manager.models.preferences import UserPreferences
from vacation_manager.models.user import User
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.models.vacation_type import VacationType

__all__ = [
    "Department",
    "FirstDayOfWeek",
    "Language",
    "Notification",
    "Resolution",
    "SQLModel",
    "Theme",
    "TimestampMixin",
    "UUIDBase",
    "UpdatedAtMixin",
    "User",
    "UserPreferences",
    "UserRole",
    "VacationRequest",
    "VacationStatus",
    "VacationType",
]
