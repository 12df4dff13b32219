from datetime import datetime

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.datetime_utils import utcnow
from app.db.session import Base


class Achievement(Base):
    __tablename__ = "achievements"
    # the only arbiter of "already granted"
    __table_args__ = (
        UniqueConstraint("user_id", "achievement_type", name="uq_achievement_user_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    achievement_type: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column()
    earned_at: Mapped[datetime] = mapped_column(default=utcnow)

    def __repr__(self) -> str:
        return f"<Achievement(id={self.id}, user_id={self.user_id}, type={self.achievement_type})>"  # noqa: E501
