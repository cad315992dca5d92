from __future__ import annotations

from pydantic import BaseModel


class VacationSummary(BaseModel):
    """Derived allowance usage for the current calendar year."""

    used: int
    pending: int
    remaining: int
    total: int
