from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_ACHIEVEMENT_TYPE_LENGTH
from app.core.datetime_utils import UTCDatetime
from app.core.validators import EmailAddress, NonEmptyStr


class AchievementCreate(BaseModel):
    user_email: EmailAddress
    achievement_type: NonEmptyStr = Field(..., max_length=MAX_ACHIEVEMENT_TYPE_LENGTH)
    description: NonEmptyStr


class AchievementVerifyRequest(BaseModel):
    user_email: EmailAddress


class AchievementResponse(BaseModel):
    id: int
    user_id: int
    achievement_type: str
    description: str
    earned_at: UTCDatetime
    user_full_name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class VerificationResult(BaseModel):
    newly_granted: list[AchievementResponse]
    count: int
