# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, computed_field

from vacation_manager.models.enums import FirstDayOfWeek, Language, Theme


class UpdatePreferencesRequest(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    theme: Theme | None = None
    language: Language | None = None
    notifications_enabled: bool | None = None
    calendar_sync_enabled: bool | None = None
    first_day_of_week: FirstDayOfWeek | None = None
    include_weekend_days: bool | None = None


class PreferencesResponse(BaseModel):
    user_id: uuid.UUID
    theme: Theme
    language: Language
    notifications_enabled: bool
    calendar_sync_enabled: bool
    first_day_of_week: FirstDayOfWeek
    include_weekend_days: bool
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def direction(self) -> Literal["ltr", "rtl"]:
        return "rtl" if self.language == Language.AR else "ltr"
