import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import func, select, text

from vacation_manager.config import get_settings
from vacation_manager.db import SessionDep
from vacation_manager.models.vacation_type import VacationType

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response.

    ``degraded`` means the database answers but the default vacation types
    are missing, so requests cannot be submitted yet.
    """

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str
    database: Literal["ok", "unreachable"]


@router.get("/health", response_model=HealthResponse)
async def health(session: SessionDep) -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"
    database: Literal["ok", "unreachable"] = "ok"

    try:
        await session.execute(text("SELECT 1"))
        result = await session.execute(select(func.count()).select_from(VacationType))
        if result.scalar_one() == 0:
            logger.warning("Health check: no vacation types configured, run the seed script")
            status = "degraded"
    except Exception:
        logger.exception("Health check: database connectivity failed")
        status = "error"
        database = "unreachable"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
        database=database,
    )
