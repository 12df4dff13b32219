from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.core.constants import MAX_NAME_LENGTH, MAX_USER_AGE, MIN_USER_AGE
from app.core.datetime_utils import UTCDatetime
from app.core.validators import EmailAddress

FullName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_NAME_LENGTH)
]
Age = Annotated[int, Field(ge=MIN_USER_AGE, le=MAX_USER_AGE, description="Edad entre 5 y 12 años")]


class UserCreate(BaseModel):
    full_name: FullName
    email: EmailAddress
    age: Age


class UserUpdate(BaseModel):
    """Profile update. The email is fixed at registration and cannot change."""

    full_name: FullName
    age: Age


class UserResponse(BaseModel):
    id: int
    full_name: str
    email: str
    age: int
    created_at: UTCDatetime
    updated_at: UTCDatetime

    model_config = ConfigDict(from_attributes=True)
