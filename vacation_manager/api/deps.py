# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from typing import Annotated, TypeVar

from fastapi import Depends, Header, status

from vacation_manager.db import SessionDep
from vacation_manager.exceptions import AppError
from vacation_manager.models.enums import UserRole
from vacation_manager.schemas.auth import AuthContext
from vacation_manager.schemas.result import ErrorKind, OperationResult
from vacation_manager.services.user import get_user_role

T = TypeVar("T")

_ERROR_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHORIZATION: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def get_auth_context(
    session: SessionDep,
    x_user_id: uuid.UUID = Header(),
    x_user_email: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
) -> AuthContext:
    """Extract dev auth context from request headers. The role comes from the user store."""
    role = await get_user_role(session, x_user_id)
    return AuthContext(user_id=x_user_id, email=x_user_email, name=x_user_name, role=role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_manager(auth: AuthDep) -> AuthContext:
    """Require a role that may resolve requests (manager or admin)."""
    if not auth.is_resolver:
        raise AppError("Manager access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


ManagerDep = Annotated[AuthContext, Depends(require_manager)]


async def require_admin(auth: AuthDep) -> AuthContext:
    """Require admin role for the request."""
    if not auth.is_admin:
        raise AppError("Admin access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]


async def require_super_admin(auth: AuthDep) -> AuthContext:
    if auth.role != UserRole.SUPER_ADMIN:
        raise AppError("Super admin access required", status_code=status.HTTP_403_FORBIDDEN)
    return auth


SuperAdminDep = Annotated[AuthContext, Depends(require_super_admin)]


def unwrap(result: OperationResult[T]) -> OperationResult[T]:
    """Raise the ``AppError`` matching a failed lifecycle result, or pass it through."""
    if result.success:
        return result
    error = result.error or ErrorKind.STORAGE
    return_status = _ERROR_STATUS[error]
    raise AppError(result.message, status_code=return_status)
