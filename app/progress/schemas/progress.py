import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.validators import EmailAddress


class ProgressSubmit(BaseModel):
    """Daily totals for one user. Resubmitting the same day replaces the row."""

    user_email: EmailAddress
    exercises_completed: int = Field(0, ge=0)
    total_time: float = Field(0.0, ge=0)
    total_score: int = Field(0, ge=0)
    date: dt.date | None = Field(None, description="Día del progreso, por defecto hoy (UTC)")


class ProgressResponse(BaseModel):
    id: int
    user_id: int
    date: dt.date
    exercises_completed: int
    total_time: float
    total_score: int
    user_full_name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProgressSummary(BaseModel):
    active_days: int = 0
    exercises_total: int = 0
    time_total: float = 0.0
    score_total: int = 0
    average_exercises_per_day: float = 0.0
    average_score_per_day: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class UserProgressResponse(BaseModel):
    entries: list[ProgressResponse]
    summary: ProgressSummary
