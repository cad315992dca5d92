"""Vacation request lifecycle: submit, resolve, delete, and the read paths around them.

Lifecycle operations return an ``OperationResult`` instead of raising for
expected failures. Read paths raise ``AppError`` like the other services.
"""

# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import func, select, update
from sqlmodel import col

from vacation_manager.config import get_settings
from vacation_manager.exceptions import NotFoundError, PermissionDeniedError
from vacation_manager.models.base import now_utc
from vacation_manager.models.enums import ADMIN_ROLES, RESOLVER_ROLES, Resolution, UserRole, VacationStatus
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.models.vacation_type import VacationType
from vacation_manager.schemas.result import ErrorKind, OperationResult
from vacation_manager.schemas.vacation import VacationListResponse, VacationResponse
from vacation_manager.services import notification as notification_service
from vacation_manager.services.days import compute_chargeable_days
from vacation_manager.services.user import (
    can_view_user,
    get_or_create_user,
    get_team_member_ids,
    get_user_role,
    is_team_member,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.auth import AuthContext
    from vacation_manager.schemas.vacation import SubmitVacationPayload

logger = logging.getLogger(__name__)

VacationResult = OperationResult[VacationResponse]

_NO_PERMISSION = "You don't have permission to perform this action"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_vacation_response(vacation: VacationRequest) -> VacationResponse:
    """Map a vacation model to its response schema."""
    return VacationResponse(
        id=vacation.id,
        user_id=vacation.user_id,
        vacation_type_id=vacation.vacation_type_id,
        start_date=vacation.start_date,
        end_date=vacation.end_date,
        requested_days=vacation.requested_days,
        notes=vacation.notes,
        status=VacationStatus(vacation.status),
        admin_note=vacation.admin_note,
        resolved_by=vacation.resolved_by,
        created_at=vacation.created_at,
        updated_at=vacation.updated_at,
    )


async def _fetch_vacation(session: AsyncSession, vacation_id: uuid.UUID) -> VacationRequest | None:
    result = await session.execute(select(VacationRequest).where(col(VacationRequest.id) == vacation_id))
    return result.scalar_one_or_none()


async def _get_vacation_or_404(session: AsyncSession, vacation_id: uuid.UUID) -> VacationRequest:
    vacation = await _fetch_vacation(session, vacation_id)
    if vacation is None:
        raise NotFoundError("Vacation not found")
    return vacation


async def _vacation_type_exists(session: AsyncSession, vacation_type_id: int) -> bool:
    result = await session.execute(select(col(VacationType.id)).where(col(VacationType.id) == vacation_type_id))
    return result.scalar_one_or_none() is not None


async def _notify(session: AsyncSession, user_id: uuid.UUID, message: str, vacation_id: uuid.UUID) -> bool:
    """Best-effort notification. Failures are logged and never undo the caller's write."""
    try:
        await notification_service.create_notification(session, user_id, message, vacation_id)
    except Exception:
        logger.exception("Creating notification for vacation %s failed", vacation_id)
        await session.rollback()
        return False
    return True


# ---------------------------------------------------------------------------
# Lifecycle operations
# ---------------------------------------------------------------------------


async def submit_vacation(
    session: AsyncSession,
    auth: AuthContext,
    payload: SubmitVacationPayload,
) -> VacationResult:
    """Create a pending request owned by the caller and notify them.

    1. Validate the date order and the vacation type.
    2. Make sure the caller has a user record.
    3. Insert the request with its chargeable day count.
    4. Emit the "pending approval" notification (best-effort).
    """
    if payload.end_date < payload.start_date:
        return VacationResult.fail(ErrorKind.VALIDATION, "End date must not be before start date")

    try:
        if not await _vacation_type_exists(session, payload.vacation_type_id):
            return VacationResult.fail(ErrorKind.VALIDATION, "Unknown vacation type")

        await get_or_create_user(session, auth, get_settings().default_vacation_days)

        vacation = VacationRequest(
            user_id=auth.user_id,
            vacation_type_id=payload.vacation_type_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            requested_days=compute_chargeable_days(payload.start_date, payload.end_date),
            notes=payload.notes,
            status=VacationStatus.PENDING.value,
        )
        session.add(vacation)
        await session.commit()
        await session.refresh(vacation)
        response = _build_vacation_response(vacation)
    except Exception:
        logger.exception("Creating vacation request failed for user %s", auth.user_id)
        await session.rollback()
        return VacationResult.fail(ErrorKind.STORAGE, "Failed to create vacation request")

    logger.info("Vacation %s submitted by %s (%d days)", response.id, auth.user_id, response.requested_days)
    await _notify(
        session,
        response.user_id,
        notification_service.submitted_message(response.start_date, response.end_date),
        response.id,
    )
    return VacationResult.ok("Vacation request created successfully", response)


async def resolve_vacation(
    session: AsyncSession,
    auth: AuthContext,
    vacation_id: uuid.UUID,
    resolution: Resolution,
    admin_note: str | None = None,
) -> VacationResult:
    """Approve or reject a request, then notify its owner.

    The status change is committed before the notification is written, and a
    failed notification does not fail the resolution. Resolving a request that
    is no longer pending re-applies the update unless
    ``resolve_requires_pending`` is enabled, in which case the UPDATE only
    matches pending rows.
    """
    try:
        vacation = await _fetch_vacation(session, vacation_id)
        if vacation is None:
            return VacationResult.fail(ErrorKind.NOT_FOUND, "Vacation not found")

        role = await get_user_role(session, auth.user_id)
        if role not in RESOLVER_ROLES:
            return VacationResult.fail(ErrorKind.AUTHORIZATION, _NO_PERMISSION)
        if role == UserRole.MANAGER and not await is_team_member(session, auth.user_id, vacation.user_id):
            return VacationResult.fail(ErrorKind.AUTHORIZATION, "You can only resolve requests from your own team")

        stmt = update(VacationRequest).where(col(VacationRequest.id) == vacation_id)
        if get_settings().resolve_requires_pending:
            stmt = stmt.where(col(VacationRequest.status) == VacationStatus.PENDING.value)
        result = await session.execute(
            stmt.values(
                status=resolution.value,
                admin_note=admin_note,
                resolved_by=auth.user_id,
                updated_at=now_utc(),
            )
        )
        if result.rowcount == 0:
            await session.rollback()
            return VacationResult.fail(ErrorKind.VALIDATION, "Only pending requests can be resolved")

        await session.commit()
        await session.refresh(vacation)
        response = _build_vacation_response(vacation)
    except Exception:
        logger.exception("Resolving vacation %s failed", vacation_id)
        await session.rollback()
        return VacationResult.fail(ErrorKind.STORAGE, "Failed to update vacation status")

    logger.info("Vacation %s %s by %s", vacation_id, resolution.value, auth.user_id)
    notified = await _notify(
        session,
        response.user_id,
        notification_service.resolved_message(
            response.start_date, response.end_date, resolution.value, response.admin_note
        ),
        response.id,
    )
    if not notified:
        return VacationResult.ok(f"Vacation {resolution.value}, but failed to create notification", response)
    return VacationResult.ok(f"Vacation {resolution.value} successfully", response)


async def delete_vacation(
    session: AsyncSession,
    auth: AuthContext,
    vacation_id: uuid.UUID,
) -> VacationResult:
    """Remove a request outright, whatever its status. Owner or admin only."""
    try:
        vacation = await _fetch_vacation(session, vacation_id)
        if vacation is None:
            return VacationResult.fail(ErrorKind.NOT_FOUND, "Vacation not found")

        if vacation.user_id != auth.user_id:
            role = await get_user_role(session, auth.user_id)
            if role not in ADMIN_ROLES:
                return VacationResult.fail(ErrorKind.AUTHORIZATION, "Not authorized to delete this vacation")

        await session.delete(vacation)
        await session.commit()
    except Exception:
        logger.exception("Deleting vacation %s failed", vacation_id)
        await session.rollback()
        return VacationResult.fail(ErrorKind.STORAGE, "Failed to delete vacation")

    logger.info("Vacation %s deleted by %s", vacation_id, auth.user_id)
    return VacationResult.ok("Vacation deleted successfully")


async def update_vacation_notes(
    session: AsyncSession,
    auth: AuthContext,
    vacation_id: uuid.UUID,
    notes: str | None,
) -> VacationResult:
    """Let the owner edit the notes of a request that is still pending."""
    try:
        vacation = await _fetch_vacation(session, vacation_id)
        if vacation is None:
            return VacationResult.fail(ErrorKind.NOT_FOUND, "Vacation not found")
        if vacation.user_id != auth.user_id:
            return VacationResult.fail(ErrorKind.AUTHORIZATION, "Only the owner can edit this vacation")
        if vacation.status != VacationStatus.PENDING.value:
            return VacationResult.fail(ErrorKind.VALIDATION, "Only pending requests can be edited")

        vacation.notes = notes
        await session.commit()
        await session.refresh(vacation)
        response = _build_vacation_response(vacation)
    except Exception:
        logger.exception("Updating notes of vacation %s failed", vacation_id)
        await session.rollback()
        return VacationResult.fail(ErrorKind.STORAGE, "Failed to update vacation")

    return VacationResult.ok("Vacation updated successfully", response)


# ---------------------------------------------------------------------------
# Read paths
# ---------------------------------------------------------------------------


async def get_vacation(
    session: AsyncSession,
    auth: AuthContext,
    vacation_id: uuid.UUID,
) -> VacationResponse:
    """Get a single request. Visible to its owner, the owner's manager and admins."""
    vacation = await _get_vacation_or_404(session, vacation_id)
    if not await can_view_user(session, auth, vacation.user_id):
        raise PermissionDeniedError("Not authorized to view this vacation")
    return _build_vacation_response(vacation)


async def list_vacations(
    session: AsyncSession,
    auth: AuthContext,
    status_filter: VacationStatus | None = None,
    user_id: uuid.UUID | None = None,
    offset: int = 0,
    limit: int = 50,
) -> VacationListResponse:
    """List requests ordered by start date, newest first.

    Without a ``user_id`` filter admins see every request and everyone else
    sees their own.
    """
    filters = []
    if user_id is not None:
        if not await can_view_user(session, auth, user_id):
            raise PermissionDeniedError("Not authorized to view these vacations")
        filters.append(col(VacationRequest.user_id) == user_id)
    elif not auth.is_admin:
        filters.append(col(VacationRequest.user_id) == auth.user_id)

    if status_filter is not None:
        filters.append(col(VacationRequest.status) == status_filter.value)

    count_result = await session.execute(select(func.count()).select_from(VacationRequest).where(*filters))
    total = count_result.scalar_one()

    result = await session.execute(
        select(VacationRequest)
        .where(*filters)
        .order_by(col(VacationRequest.start_date).desc(), col(VacationRequest.created_at).desc())
        .offset(offset)
        .limit(limit)
    )
    return VacationListResponse(
        items=[_build_vacation_response(v) for v in result.scalars().all()],
        total=total,
    )


async def list_upcoming_vacations(
    session: AsyncSession,
    auth: AuthContext,
    today: date | None = None,
) -> VacationListResponse:
    """The caller's requests that have not ended yet, soonest first."""
    today = today or date.today()
    result = await session.execute(
        select(VacationRequest)
        .where(col(VacationRequest.user_id) == auth.user_id, col(VacationRequest.end_date) >= today)
        .order_by(col(VacationRequest.start_date))
    )
    items = [_build_vacation_response(v) for v in result.scalars().all()]
    return VacationListResponse(items=items, total=len(items))


async def list_pending_vacations(session: AsyncSession, auth: AuthContext) -> VacationListResponse:
    """Pending requests awaiting the caller: everything for admins, the team for managers."""
    filters = [col(VacationRequest.status) == VacationStatus.PENDING.value]
    if not auth.is_admin:
        if auth.role != UserRole.MANAGER:
            raise PermissionDeniedError(_NO_PERMISSION)
        team_ids = await get_team_member_ids(session, auth.user_id)
        if not team_ids:
            return VacationListResponse(items=[], total=0)
        filters.append(col(VacationRequest.user_id).in_(team_ids))

    result = await session.execute(
        select(VacationRequest).where(*filters).order_by(col(VacationRequest.created_at).desc())
    )
    items = [_build_vacation_response(v) for v in result.scalars().all()]
    return VacationListResponse(items=items, total=len(items))
