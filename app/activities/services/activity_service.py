import logging
from typing import cast

from sqlalchemy import Select, delete, insert, select

from app.activities.models.activity import Activity
from app.activities.schemas.activity import ActivityCreate, ActivityResponse
from app.core.exceptions import NotFoundError
from app.db.store import Store
from app.users.models.user import User
from app.users.services.user_service import UserService

logger = logging.getLogger(__name__)

activities = Activity.__table__
users = User.__table__


def _activity_query() -> Select:
    """Activities joined with the owner's name."""
    return select(activities, users.c.full_name.label("user_full_name")).select_from(
        activities.outerjoin(users, activities.c.user_id == users.c.id)
    )


class ActivityService:
    @staticmethod
    def list_activities(store: Store) -> list[ActivityResponse]:
        rows = store.fetch_all(
            _activity_query().order_by(activities.c.timestamp.desc(), activities.c.id.desc())
        )
        return [ActivityResponse.model_validate(dict(row)) for row in rows]

    @staticmethod
    def list_user_activities(store: Store, email: str) -> list[ActivityResponse]:
        """Activities of one user, newest first. Unknown emails yield an empty list."""
        rows = store.fetch_all(
            _activity_query()
            .where(activities.c.user_email == email)
            .order_by(activities.c.timestamp.desc(), activities.c.id.desc())
        )
        return [ActivityResponse.model_validate(dict(row)) for row in rows]

    @staticmethod
    def get_activity(store: Store, activity_id: int) -> ActivityResponse:
        row = store.fetch_one(_activity_query().where(activities.c.id == activity_id))
        if row is None:
            raise NotFoundError(
                f"No se encontró una actividad con ID {activity_id}", resource="activity"
            )
        return ActivityResponse.model_validate(dict(row))

    @staticmethod
    def create_activity(store: Store, payload: ActivityCreate) -> ActivityResponse:
        """Log a finished exercise session for an existing user."""
        user = UserService.get_user_by_email(store, payload.user_email)

        result = store.execute(
            insert(activities).values(
                user_id=user.id,
                user_email=user.email,
                exercise_type=payload.exercise_type,
                score=payload.score,
                average_time=payload.average_time,
                accuracy=payload.accuracy,
                exercises_completed=payload.exercises_completed,
                exercises_total=payload.exercises_total,
                level_reached=payload.level_reached,
                stars_earned=payload.stars_earned,
            )
        )

        logger.info(
            "Activity logged: id=%s, user_id=%s, type=%s",
            result.inserted_id,
            user.id,
            payload.exercise_type,
        )
        return ActivityService.get_activity(store, cast(int, result.inserted_id))

    @staticmethod
    def delete_activity(store: Store, activity_id: int) -> None:
        result = store.execute(delete(activities).where(activities.c.id == activity_id))
        if result.affected_rows == 0:
            raise NotFoundError(
                f"No se encontró una actividad con ID {activity_id}", resource="activity"
            )

    @staticmethod
    def delete_user_activities(store: Store, email: str) -> int:
        user = UserService.get_user_by_email(store, email)
        result = store.execute(delete(activities).where(activities.c.user_id == user.id))
        logger.info("Activities deleted: user_id=%s, count=%d", user.id, result.affected_rows)
        return result.affected_rows

    @staticmethod
    def delete_all_activities(store: Store) -> int:
        result = store.execute(delete(activities))
        logger.warning("All activities deleted: count=%d", result.affected_rows)
        return result.affected_rows
