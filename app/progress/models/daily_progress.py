import datetime as dt

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.datetime_utils import utc_today
from app.db.session import Base


class DailyProgress(Base):
    __tablename__ = "daily_progress"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    date: Mapped[dt.date] = mapped_column(default=utc_today)
    exercises_completed: Mapped[int] = mapped_column(default=0)
    total_time: Mapped[float] = mapped_column(default=0.0)
    total_score: Mapped[int] = mapped_column(default=0)

    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_progress_user_date"),)

    def __repr__(self) -> str:
        return f"<DailyProgress(id={self.id}, user_id={self.user_id}, date={self.date})>"
