from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func, select, text
from sqlmodel import col

from vacation_manager.exceptions import AppError, ConflictError, NotFoundError
from vacation_manager.models.vacation import VacationRequest
from vacation_manager.models.vacation_type import VacationType
from vacation_manager.schemas.vacation_type import VacationTypeListResponse, VacationTypeResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from vacation_manager.schemas.vacation_type import CreateVacationTypeRequest, UpdateVacationTypeRequest

logger = logging.getLogger(__name__)

# (id, name, color, icon) of the types every installation starts with.
DEFAULT_VACATION_TYPES: tuple[tuple[int, str, str, str], ...] = (
    (1, "Regular", "#4CAF50", "sun"),
    (2, "Casual", "#ADD8E6", "coffee"),
    (3, "Sick", "#FF8A65", "thermometer"),
    (4, "Personal", "#9C27B0", "user"),
    (5, "Public Holiday", "#FFC107", "flag"),
)


def _build_vacation_type_response(vacation_type: VacationType) -> VacationTypeResponse:
    if vacation_type.id is None:
        raise AppError("Vacation type has not been saved")
    return VacationTypeResponse(
        id=vacation_type.id,
        name=vacation_type.name,
        description=vacation_type.description,
        color=vacation_type.color,
        icon=vacation_type.icon,
        created_at=vacation_type.created_at,
    )


async def _get_vacation_type_or_404(session: AsyncSession, type_id: int) -> VacationType:
    result = await session.execute(select(VacationType).where(col(VacationType.id) == type_id))
    vacation_type = result.scalar_one_or_none()
    if vacation_type is None:
        raise NotFoundError("Vacation type not found")
    return vacation_type


async def list_vacation_types(session: AsyncSession) -> VacationTypeListResponse:
    result = await session.execute(select(VacationType).order_by(col(VacationType.id)))
    items = [_build_vacation_type_response(t) for t in result.scalars().all()]
    return VacationTypeListResponse(items=items, total=len(items))


async def create_vacation_type(session: AsyncSession, payload: CreateVacationTypeRequest) -> VacationTypeResponse:
    vacation_type = VacationType(
        name=payload.name,
        description=payload.description,
        color=payload.color,
        icon=payload.icon,
    )
    session.add(vacation_type)
    await session.commit()
    await session.refresh(vacation_type)
    return _build_vacation_type_response(vacation_type)


async def update_vacation_type(
    session: AsyncSession,
    type_id: int,
    payload: UpdateVacationTypeRequest,
) -> VacationTypeResponse:
    vacation_type = await _get_vacation_type_or_404(session, type_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in ("name", "color"):
            continue
        setattr(vacation_type, field, value)
    await session.commit()
    await session.refresh(vacation_type)
    return _build_vacation_type_response(vacation_type)


async def delete_vacation_type(session: AsyncSession, type_id: int) -> None:
    """Delete a type that no request refers to."""
    vacation_type = await _get_vacation_type_or_404(session, type_id)

    in_use = await session.execute(
        select(func.count()).select_from(VacationRequest).where(col(VacationRequest.vacation_type_id) == type_id)
    )
    if in_use.scalar_one() > 0:
        raise ConflictError("Cannot delete a vacation type that is used by existing requests")

    await session.delete(vacation_type)
    await session.commit()


async def seed_default_vacation_types(session: AsyncSession) -> int:
    """Insert the default types that are missing. Returns how many were created."""
    result = await session.execute(select(col(VacationType.id)))
    existing = set(result.scalars().all())

    created = 0
    for type_id, name, color, icon in DEFAULT_VACATION_TYPES:
        if type_id in existing:
            continue
        session.add(VacationType(id=type_id, name=name, color=color, icon=icon))
        created += 1

    if created and session.get_bind().dialect.name == "postgresql":
        # Explicit ids leave the serial sequence behind.
        await session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('vacation_types', 'id'), "
                "(SELECT MAX(id) FROM vacation_types))"
            )
        )

    await session.commit()
    logger.info("Seeded %d default vacation types", created)
    return created
