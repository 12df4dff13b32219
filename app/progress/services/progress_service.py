import datetime as dt
import logging

from sqlalchemy import Select, delete, func, insert, select, update

from app.core.config import settings
from app.core.datetime_utils import utc_today
from app.core.exceptions import ConstraintViolationError, NotFoundError
from app.db.store import Store
from app.progress.models.daily_progress import DailyProgress
from app.progress.schemas.progress import (
    ProgressResponse,
    ProgressSubmit,
    ProgressSummary,
    UserProgressResponse,
)
from app.users.models.user import User
from app.users.services.user_service import UserService

logger = logging.getLogger(__name__)

progress = DailyProgress.__table__
users = User.__table__


def _progress_query() -> Select:
    return select(progress, users.c.full_name.label("user_full_name")).select_from(
        progress.outerjoin(users, progress.c.user_id == users.c.id)
    )


class ProgressService:
    @staticmethod
    def submit_progress(store: Store, payload: ProgressSubmit) -> ProgressResponse:
        """Store a user's totals for a day, replacing any earlier submission.

        UPDATE first; INSERT when no row exists for (user, day). If a
        concurrent submission inserts first, the unique constraint rejects
        ours and the UPDATE is repeated.
        """
        user = UserService.get_user_by_email(store, payload.user_email)
        day = payload.date or utc_today()
        values = {
            "exercises_completed": payload.exercises_completed,
            "total_time": payload.total_time,
            "total_score": payload.total_score,
        }
        replace = (
            update(progress)
            .where(progress.c.user_id == user.id, progress.c.date == day)
            .values(**values)
        )

        result = store.execute(replace)
        if result.affected_rows == 0:
            try:
                store.execute(insert(progress).values(user_id=user.id, date=day, **values))
            except ConstraintViolationError:
                logger.info("Concurrent progress insert: user_id=%s, date=%s", user.id, day)
                store.execute(replace)

        logger.info("Progress recorded: user_id=%s, date=%s", user.id, day)
        return ProgressService.get_progress_for_day(store, user.id, day)

    @staticmethod
    def get_progress_for_day(store: Store, user_id: int, day: dt.date) -> ProgressResponse:
        row = store.fetch_one(
            _progress_query().where(progress.c.user_id == user_id, progress.c.date == day)
        )
        if row is None:
            raise NotFoundError(
                f"No hay progreso del usuario {user_id} para {day.isoformat()}", resource="progress"
            )
        return ProgressResponse.model_validate(dict(row))

    @staticmethod
    def get_user_progress(store: Store, email: str) -> UserProgressResponse:
        """Most recent daily entries plus totals over every recorded day."""
        user = UserService.get_user_by_email(store, email)

        rows = store.fetch_all(
            _progress_query()
            .where(progress.c.user_id == user.id)
            .order_by(progress.c.date.desc())
            .limit(settings.PROGRESS_HISTORY_LIMIT)
        )
        summary_row = store.fetch_one(
            select(
                func.count(progress.c.id).label("active_days"),
                func.sum(progress.c.exercises_completed).label("exercises_total"),
                func.sum(progress.c.total_time).label("time_total"),
                func.sum(progress.c.total_score).label("score_total"),
                func.avg(progress.c.exercises_completed).label("average_exercises_per_day"),
                func.avg(progress.c.total_score).label("average_score_per_day"),
            ).where(progress.c.user_id == user.id)
        )

        return UserProgressResponse(
            entries=[ProgressResponse.model_validate(dict(row)) for row in rows],
            summary=(
                ProgressSummary.model_validate(dict(summary_row))
                if summary_row is not None
                else ProgressSummary()
            ),
        )

    @staticmethod
    def delete_progress(store: Store, progress_id: int) -> None:
        result = store.execute(delete(progress).where(progress.c.id == progress_id))
        if result.affected_rows == 0:
            raise NotFoundError(
                f"No se encontró un progreso con ID {progress_id}", resource="progress"
            )

    @staticmethod
    def delete_user_progress(store: Store, email: str) -> int:
        user = UserService.get_user_by_email(store, email)
        result = store.execute(delete(progress).where(progress.c.user_id == user.id))
        logger.info("Progress deleted: user_id=%s, count=%d", user.id, result.affected_rows)
        return result.affected_rows

    @staticmethod
    def delete_all_progress(store: Store) -> int:
        result = store.execute(delete(progress))
        logger.warning("All progress deleted: count=%d", result.affected_rows)
        return result.affected_rows
