from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.datetime_utils import utcnow
from app.db.session import Base


class Activity(Base):
    """One completed exercise session. Rows are never updated."""

    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    # copy of users.email at creation time
    user_email: Mapped[str] = mapped_column(String(255), index=True)
    exercise_type: Mapped[str] = mapped_column(String(100))

    score: Mapped[int] = mapped_column(default=0)
    average_time: Mapped[float] = mapped_column(default=0.0)
    accuracy: Mapped[float] = mapped_column(default=0.0)
    exercises_completed: Mapped[int] = mapped_column(default=0)
    exercises_total: Mapped[int] = mapped_column(default=0)
    level_reached: Mapped[int] = mapped_column(default=1)
    stars_earned: Mapped[int] = mapped_column(default=0)

    timestamp: Mapped[datetime] = mapped_column(default=utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, user_id={self.user_id}, type={self.exercise_type}, score={self.score})>"  # noqa: E501
