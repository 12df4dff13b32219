"""UTC helpers.

Timestamps are stored naive (SQLite keeps no offset) and always mean UTC;
``UTCDatetime`` puts the offset back when they leave the API.
"""

from datetime import UTC, date, datetime
from typing import Annotated

from pydantic.functional_serializers import PlainSerializer


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def utc_today() -> date:
    """Calendar day in UTC; daily progress is bucketed by it."""
    return datetime.now(UTC).date()


def as_utc_iso(value: datetime) -> str:
    """ISO-8601 with an explicit ``+00:00``, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


UTCDatetime = Annotated[
    datetime, PlainSerializer(as_utc_iso, return_type=str, when_used="json-unless-none")
]
