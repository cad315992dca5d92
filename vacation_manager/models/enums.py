from __future__ import annotations

import enum


class VacationStatus(enum.StrEnum):
    """State machine for vacation requests: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Resolution(enum.StrEnum):
    """Terminal states a resolver may move a request into."""

    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(enum.StrEnum):
    """Role stored on the user record."""

    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


ADMIN_ROLES = frozenset({UserRole.ADMIN, UserRole.SUPER_ADMIN})
RESOLVER_ROLES = frozenset({UserRole.MANAGER, UserRole.ADMIN, UserRole.SUPER_ADMIN})


class Theme(enum.StrEnum):
    LIGHT = "light"
    DARK = "dark"


class Language(enum.StrEnum):
    """Supported UI languages. Arabic renders right-to-left."""

    EN = "en"
    AR = "ar"


class FirstDayOfWeek(enum.StrEnum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    SATURDAY = "saturday"
