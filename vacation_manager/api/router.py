from fastapi import APIRouter

from vacation_manager.api.departments import departments_router
from vacation_manager.api.me import me_router
from vacation_manager.api.notifications import notifications_router
from vacation_manager.api.reports import reports_router
from vacation_manager.api.users import users_router
from vacation_manager.api.vacation_types import vacation_types_router
from vacation_manager.api.vacations import vacations_router

api_router = APIRouter()
api_router.include_router(me_router)
api_router.include_router(vacations_router)
api_router.include_router(vacation_types_router)
api_router.include_router(notifications_router)
api_router.include_router(users_router)
api_router.include_router(departments_router)
api_router.include_router(reports_router)
