from datetime import datetime, timedelta

import pytest

from app.activities.services.statistics_service import StatisticsService
from app.core.exceptions import NotFoundError
from tests.utils.factories import create_activity_factory, create_user_factory


def test_totals_for_user_without_activities_are_zero(store, test_user):
    totals = StatisticsService.get_user_totals(store, test_user.id)

    assert totals.total_activities == 0
    assert totals.exercises_completed_total == 0
    assert totals.score_total == 0
    assert totals.average_accuracy == 0.0
    assert totals.max_level == 0


def test_totals_aggregate_every_activity(store, db_session, test_user):
    create_activity_factory(
        db_session, test_user, score=100, accuracy=80.0, exercises_completed=10,
        level_reached=2, stars_earned=1,
    )
    create_activity_factory(
        db_session, test_user, score=300, accuracy=100.0, exercises_completed=20,
        level_reached=4, stars_earned=3,
    )

    totals = StatisticsService.get_user_totals(store, test_user.id)

    assert totals.total_activities == 2
    assert totals.score_total == 400
    assert totals.average_score == pytest.approx(200.0)
    assert totals.average_accuracy == pytest.approx(90.0)
    assert totals.exercises_completed_total == 30
    assert totals.max_level == 4
    assert totals.stars_total == 4


def test_totals_ignore_other_users(store, db_session, test_user):
    other = create_user_factory(db_session)
    create_activity_factory(db_session, other, exercises_completed=99)
    create_activity_factory(db_session, test_user, exercises_completed=1)

    totals = StatisticsService.get_user_totals(store, test_user.id)

    assert totals.exercises_completed_total == 1


def test_totals_by_exercise_type_most_practiced_first(store, db_session, test_user):
    create_activity_factory(db_session, test_user, exercise_type="resta", score=10)
    create_activity_factory(db_session, test_user, exercise_type="suma", score=20)
    create_activity_factory(db_session, test_user, exercise_type="suma", score=40)

    breakdown = StatisticsService.get_totals_by_exercise_type(store, test_user.id)

    assert [b.exercise_type for b in breakdown] == ["suma", "resta"]
    assert breakdown[0].total_activities == 2
    assert breakdown[0].average_score == pytest.approx(30.0)
    assert breakdown[1].score_total == 10


def test_recent_activities_newest_first(store, db_session, test_user):
    base = datetime(2026, 3, 1, 10, 0, 0)
    for i in range(7):
        create_activity_factory(
            db_session, test_user, score=i, timestamp=base + timedelta(minutes=i)
        )

    recent = StatisticsService.get_recent_activities(store, test_user.id)

    assert [a.score for a in recent] == [6, 5, 4, 3, 2]


def test_user_statistics_unknown_email(store):
    with pytest.raises(NotFoundError):
        StatisticsService.get_user_statistics(store, "nadie@ejemplo.com")
