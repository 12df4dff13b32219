from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import (
    DEFAULT_LEVEL_REACHED,
    MAX_ACCURACY,
    MAX_EXERCISE_TYPE_LENGTH,
    MIN_ACCURACY,
)
from app.core.datetime_utils import UTCDatetime
from app.core.validators import EmailAddress, NonEmptyStr


class ActivityCreate(BaseModel):
    user_email: EmailAddress
    exercise_type: NonEmptyStr = Field(..., max_length=MAX_EXERCISE_TYPE_LENGTH)
    score: int = 0
    average_time: float = Field(0.0, ge=0, description="Tiempo medio por ejercicio (s)")
    accuracy: float = Field(0.0, ge=MIN_ACCURACY, le=MAX_ACCURACY)
    exercises_completed: int = Field(0, ge=0)
    exercises_total: int = Field(0, ge=0)
    level_reached: int = Field(DEFAULT_LEVEL_REACHED, ge=1)
    stars_earned: int = Field(0, ge=0)


class ActivityResponse(BaseModel):
    id: int
    user_id: int
    user_email: str
    exercise_type: str
    score: int
    average_time: float
    accuracy: float
    exercises_completed: int
    exercises_total: int
    level_reached: int
    stars_earned: int
    timestamp: UTCDatetime
    user_full_name: str | None = None

    model_config = ConfigDict(from_attributes=True)
