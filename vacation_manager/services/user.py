"""User records: identity lookups, team membership, and the admin user screens."""

# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from vacation_manager.exceptions import AppError, ConflictError, NotFoundError
from vacation_manager.models.department import Department
from vacation_manager.models.enums import RESOLVER_ROLES, UserRole
from vacation_manager.models.notification import Notification
from vacation_manager.models.preferences import UserPreferences
from vacation_manager.models.user import User
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.schemas.user import ProfileResponse, UserBrief, UserListResponse, UserResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.auth import AuthContext
    from vacation_manager.schemas.user import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

_HOME_PATHS = {
    UserRole.SUPER_ADMIN: "/admin",
    UserRole.ADMIN: "/admin",
    UserRole.MANAGER: "/manager",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def build_user_response(user: User) -> UserResponse:
    """Map a user model to its response schema."""
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        profile_image_url=user.profile_image_url,
        total_vacation_days=user.total_vacation_days,
        role=UserRole(user.role),
        manager_id=user.manager_id,
        department_id=user.department_id,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def build_user_brief(user: User) -> UserBrief:
    return UserBrief(id=user.id, name=user.name, email=user.email)


def _name_from_email(email: str) -> str:
    local_part = email.split("@", 1)[0]
    return local_part or "User"


def home_path_for_role(role: UserRole) -> str:
    """Landing area of the front-end for a role."""
    return _HOME_PATHS.get(role, "/")


async def fetch_user(session: AsyncSession, user_id: uuid.UUID) -> User | None:
    result = await session.execute(select(User).where(col(User.id) == user_id))
    return result.scalar_one_or_none()


async def get_user_or_404(session: AsyncSession, user_id: uuid.UUID) -> User:
    """Fetch a user by ID. Raises 404 if not found."""
    user = await fetch_user(session, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def get_user_role(session: AsyncSession, user_id: uuid.UUID) -> UserRole:
    """Return the stored role, defaulting to a plain user when no record exists."""
    result = await session.execute(select(col(User.role)).where(col(User.id) == user_id))
    role = result.scalar_one_or_none()
    if role is None:
        return UserRole.USER
    try:
        return UserRole(role)
    except ValueError:
        logger.warning("Unknown role %r on user %s, treating as user", role, user_id)
        return UserRole.USER


async def get_or_create_user(
    session: AsyncSession,
    auth: AuthContext,
    total_vacation_days: int,
) -> tuple[User, bool]:
    """Return the caller's user record, creating it on first sight.

    The boolean is True when this call created the record. A concurrent
    insert of the same id is not an error: the existing row is returned.
    """
    user = await fetch_user(session, auth.user_id)
    if user is not None:
        return user, False

    email = auth.email or ""
    user = User(
        id=auth.user_id,
        email=email,
        name=auth.name or _name_from_email(email),
        total_vacation_days=total_vacation_days,
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        existing = await fetch_user(session, auth.user_id)
        if existing is None:
            raise
        logger.info("User %s was created concurrently, using existing record", auth.user_id)
        return existing, False

    logger.info("Created user record for %s with %d vacation days", auth.user_id, total_vacation_days)
    return user, True


async def get_team_member_ids(session: AsyncSession, manager_id: uuid.UUID) -> list[uuid.UUID]:
    """IDs of the users whose manager is ``manager_id``."""
    result = await session.execute(select(col(User.id)).where(col(User.manager_id) == manager_id))
    return list(result.scalars().all())


async def is_team_member(session: AsyncSession, manager_id: uuid.UUID, user_id: uuid.UUID) -> bool:
    result = await session.execute(
        select(col(User.id)).where(col(User.id) == user_id, col(User.manager_id) == manager_id)
    )
    return result.scalar_one_or_none() is not None


async def can_view_user(session: AsyncSession, auth: AuthContext, user_id: uuid.UUID) -> bool:
    """Self, admins, and the user's manager may view a user's vacations."""
    if user_id == auth.user_id or auth.is_admin:
        return True
    if auth.role == UserRole.MANAGER:
        return await is_team_member(session, auth.user_id, user_id)
    return False


async def _verify_manager(session: AsyncSession, manager_id: uuid.UUID | None, user_id: uuid.UUID | None) -> None:
    if manager_id is None:
        return
    if manager_id == user_id:
        raise AppError("A user cannot be their own manager", status_code=400)
    manager = await fetch_user(session, manager_id)
    if manager is None or UserRole(manager.role) not in RESOLVER_ROLES:
        raise AppError("Manager must be an existing manager or admin", status_code=400)


async def _verify_department(session: AsyncSession, department_id: uuid.UUID | None) -> None:
    if department_id is None:
        return
    result = await session.execute(select(col(Department.id)).where(col(Department.id) == department_id))
    if result.scalar_one_or_none() is None:
        raise AppError("Department not found", status_code=400)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def get_profile(session: AsyncSession, auth: AuthContext, default_vacation_days: int) -> ProfileResponse:
    """Return the caller's profile, creating the record on first login."""
    user, _ = await get_or_create_user(session, auth, default_vacation_days)
    role = UserRole(user.role)
    return ProfileResponse(user=build_user_response(user), home_path=home_path_for_role(role))


async def list_users(
    session: AsyncSession,
    role: UserRole | None = None,
    department_id: uuid.UUID | None = None,
    offset: int = 0,
    limit: int = 50,
) -> UserListResponse:
    """List users ordered by name."""
    filters = []
    if role is not None:
        filters.append(col(User.role) == role.value)
    if department_id is not None:
        filters.append(col(User.department_id) == department_id)

    count_result = await session.execute(select(func.count()).select_from(User).where(*filters))
    total = count_result.scalar_one()

    result = await session.execute(
        select(User).where(*filters).order_by(col(User.name)).offset(offset).limit(limit)
    )
    return UserListResponse(
        items=[build_user_response(u) for u in result.scalars().all()],
        total=total,
    )


async def get_user(session: AsyncSession, user_id: uuid.UUID) -> UserResponse:
    return build_user_response(await get_user_or_404(session, user_id))


async def create_user(session: AsyncSession, payload: CreateUserRequest) -> UserResponse:
    """Create a user record. The id defaults to a new UUID when the identity provider has none yet."""
    await _verify_manager(session, payload.manager_id, payload.id)
    await _verify_department(session, payload.department_id)

    user = User(
        id=payload.id or uuid.uuid4(),
        email=payload.email,
        name=payload.name,
        total_vacation_days=payload.total_vacation_days,
        role=payload.role.value,
        manager_id=payload.manager_id,
        department_id=payload.department_id,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise ConflictError("User already exists") from None

    await session.commit()
    await session.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.role)
    return build_user_response(user)


async def update_user(session: AsyncSession, user_id: uuid.UUID, payload: UpdateUserRequest) -> UserResponse:
    """Update profile fields and the annual allowance."""
    user = await get_user_or_404(session, user_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field != "profile_image_url":
            continue
        setattr(user, field, value)

    await session.commit()
    await session.refresh(user)
    return build_user_response(user)


async def update_user_role(session: AsyncSession, user_id: uuid.UUID, role: UserRole) -> UserResponse:
    user = await get_user_or_404(session, user_id)
    user.role = role.value
    await session.commit()
    await session.refresh(user)
    logger.info("Role of user %s changed to %s", user_id, role.value)
    return build_user_response(user)


async def assign_department(
    session: AsyncSession,
    user_id: uuid.UUID,
    department_id: uuid.UUID | None,
) -> UserResponse:
    """Assign a user to a department, or remove them from it with ``None``."""
    user = await get_user_or_404(session, user_id)
    await _verify_department(session, department_id)
    user.department_id = department_id
    await session.commit()
    await session.refresh(user)
    return build_user_response(user)


async def assign_manager(
    session: AsyncSession,
    user_id: uuid.UUID,
    manager_id: uuid.UUID | None,
) -> UserResponse:
    user = await get_user_or_404(session, user_id)
    await _verify_manager(session, manager_id, user_id)
    user.manager_id = manager_id
    await session.commit()
    await session.refresh(user)
    return build_user_response(user)


async def delete_user(session: AsyncSession, user_id: uuid.UUID) -> None:
    """Delete a user together with their vacations, notifications and preferences."""
    user = await get_user_or_404(session, user_id)

    await session.execute(delete(Notification).where(col(Notification.user_id) == user_id))
    await session.execute(delete(VacationRequest).where(col(VacationRequest.user_id) == user_id))
    await session.execute(delete(UserPreferences).where(col(UserPreferences.user_id) == user_id))
    await session.delete(user)
    await session.commit()
    logger.info("Deleted user %s", user_id)


async def list_managers(session: AsyncSession) -> list[UserBrief]:
    """Users eligible to manage a team or head a department."""
    result = await session.execute(
        select(User).where(col(User.role).in_([r.value for r in RESOLVER_ROLES])).order_by(col(User.name))
    )
    return [build_user_brief(u) for u in result.scalars().all()]


async def list_team(session: AsyncSession, manager_id: uuid.UUID) -> list[UserResponse]:
    result = await session.execute(
        select(User).where(col(User.manager_id) == manager_id).order_by(col(User.name))
    )
    return [build_user_response(u) for u in result.scalars().all()]
