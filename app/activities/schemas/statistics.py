from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.datetime_utils import UTCDatetime


class ActivityTotals(BaseModel):
    """Aggregate metrics over a set of activities.

    SUM/MAX/AVG over zero rows come back from SQL as NULL; they are
    reported as zero so the rule engine can compare them directly.
    """

    total_activities: int = 0
    score_total: int = 0
    average_score: float = 0.0
    average_time: float = 0.0
    average_accuracy: float = 0.0
    exercises_completed_total: int = 0
    max_level: int = 0
    stars_total: int = 0

    @field_validator(
        "total_activities",
        "score_total",
        "average_score",
        "average_time",
        "average_accuracy",
        "exercises_completed_total",
        "max_level",
        "stars_total",
        mode="before",
    )
    @classmethod
    def null_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class ExerciseTypeStats(ActivityTotals):
    exercise_type: str


class RecentActivity(BaseModel):
    id: int
    exercise_type: str
    score: int
    accuracy: float
    exercises_completed: int
    timestamp: UTCDatetime

    model_config = ConfigDict(from_attributes=True)


class UserStatisticsResponse(BaseModel):
    user_id: int
    user_email: str
    totals: ActivityTotals
    by_exercise_type: list[ExerciseTypeStats]
    recent: list[RecentActivity]
