"""Per-user activity aggregations.

Read-only projections over the activities table. They back the statistics
endpoint and give the achievement rule engine its input.
"""

from typing import Any

from sqlalchemy import func, select

from app.activities.models.activity import Activity
from app.activities.schemas.statistics import (
    ActivityTotals,
    ExerciseTypeStats,
    RecentActivity,
    UserStatisticsResponse,
)
from app.core.config import settings
from app.db.store import Store
from app.users.services.user_service import UserService

activities = Activity.__table__


def _metric_columns() -> list[Any]:
    """Aggregate columns shared by the totals and the per-type breakdown."""
    return [
        func.count(activities.c.id).label("total_activities"),
        func.sum(activities.c.score).label("score_total"),
        func.avg(activities.c.score).label("average_score"),
        func.avg(activities.c.average_time).label("average_time"),
        func.avg(activities.c.accuracy).label("average_accuracy"),
        func.sum(activities.c.exercises_completed).label("exercises_completed_total"),
        func.max(activities.c.level_reached).label("max_level"),
        func.sum(activities.c.stars_earned).label("stars_total"),
    ]


class StatisticsService:
    """Service for activity statistics."""

    @staticmethod
    def get_user_totals(store: Store, user_id: int) -> ActivityTotals:
        """Totals over every activity of a user.

        Args:
            store: Data-access handle.
            user_id: Owner of the activities.

        Returns:
            ActivityTotals; all zeros when the user has no activities.
        """
        row = store.fetch_one(select(*_metric_columns()).where(activities.c.user_id == user_id))
        if row is None:
            return ActivityTotals()
        return ActivityTotals.model_validate(dict(row))

    @staticmethod
    def get_totals_by_exercise_type(store: Store, user_id: int) -> list[ExerciseTypeStats]:
        """Same metrics as get_user_totals, grouped by exercise type.

        Returns:
            One entry per exercise type, most practiced first.
        """
        count_col = func.count(activities.c.id)
        rows = store.fetch_all(
            select(activities.c.exercise_type, *_metric_columns())
            .where(activities.c.user_id == user_id)
            .group_by(activities.c.exercise_type)
            .order_by(count_col.desc(), activities.c.exercise_type)
        )
        return [ExerciseTypeStats.model_validate(dict(row)) for row in rows]

    @staticmethod
    def get_recent_activities(
        store: Store, user_id: int, limit: int | None = None
    ) -> list[RecentActivity]:
        """Latest activities of a user, newest first."""
        rows = store.fetch_all(
            select(
                activities.c.id,
                activities.c.exercise_type,
                activities.c.score,
                activities.c.accuracy,
                activities.c.exercises_completed,
                activities.c.timestamp,
            )
            .where(activities.c.user_id == user_id)
            .order_by(activities.c.timestamp.desc(), activities.c.id.desc())
            .limit(limit or settings.RECENT_ACTIVITIES_LIMIT)
        )
        return [RecentActivity.model_validate(dict(row)) for row in rows]

    @staticmethod
    def get_user_statistics(store: Store, email: str) -> UserStatisticsResponse:
        user = UserService.get_user_by_email(store, email)

        return UserStatisticsResponse(
            user_id=user.id,
            user_email=user.email,
            totals=StatisticsService.get_user_totals(store, user.id),
            by_exercise_type=StatisticsService.get_totals_by_exercise_type(store, user.id),
            recent=StatisticsService.get_recent_activities(store, user.id),
        )
