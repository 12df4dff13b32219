"""
E2E tests for the activities API.
"""

import pytest
from httpx import AsyncClient

from tests.utils.factories import create_activity_factory, create_user_factory


def _activity(email: str, **overrides):
    payload = {
        "user_email": email,
        "exercise_type": "multiplicacion",
        "score": 150,
        "average_time": 4.5,
        "accuracy": 92.5,
        "exercises_completed": 10,
        "exercises_total": 12,
        "level_reached": 2,
        "stars_earned": 3,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_activity(test_client: AsyncClient, test_user):
    response = await test_client.post("/api/activities", json=_activity("Mateo@Ejemplo.com"))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["user_id"] == test_user.id
    assert data["user_email"] == test_user.email
    assert data["user_full_name"] == "Mateo Ejemplo"
    assert data["exercise_type"] == "multiplicacion"
    assert data["stars_earned"] == 3
    assert data["timestamp"].endswith("+00:00")


@pytest.mark.asyncio
async def test_create_activity_defaults(test_client: AsyncClient, test_user):
    response = await test_client.post(
        "/api/activities", json={"user_email": test_user.email, "exercise_type": "suma"}
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["score"] == 0
    assert data["level_reached"] == 1


@pytest.mark.asyncio
async def test_create_activity_unknown_user(test_client: AsyncClient):
    response = await test_client.post("/api/activities", json=_activity("nadie@ejemplo.com"))

    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource"] == "user"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"accuracy": 100.5}, {"exercise_type": "   "}, {"exercises_completed": -1}],
)
async def test_create_activity_invalid_payload(test_client: AsyncClient, test_user, overrides):
    response = await test_client.post(
        "/api/activities", json=_activity(test_user.email, **overrides)
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_user_activities(test_client: AsyncClient, db_session, test_user):
    other = create_user_factory(db_session)
    create_activity_factory(db_session, test_user)
    create_activity_factory(db_session, test_user)
    create_activity_factory(db_session, other)

    response = await test_client.get(f"/api/activities/user/{test_user.email}")
    everything = await test_client.get("/api/activities")

    assert response.json()["count"] == 2
    assert everything.json()["count"] == 3


@pytest.mark.asyncio
async def test_list_activities_unknown_email_is_empty(test_client: AsyncClient):
    response = await test_client.get("/api/activities/user/nadie@ejemplo.com")

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_get_statistics(test_client: AsyncClient, db_session, test_user):
    create_activity_factory(db_session, test_user, exercise_type="suma", score=100)
    create_activity_factory(db_session, test_user, exercise_type="resta", score=50)

    response = await test_client.get(f"/api/activities/statistics/{test_user.email}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user_email"] == test_user.email
    assert data["totals"]["total_activities"] == 2
    assert data["totals"]["score_total"] == 150
    assert len(data["by_exercise_type"]) == 2
    assert len(data["recent"]) == 2


@pytest.mark.asyncio
async def test_get_statistics_unknown_user(test_client: AsyncClient):
    response = await test_client.get("/api/activities/statistics/nadie@ejemplo.com")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_and_delete_activity(test_client: AsyncClient, db_session, test_user):
    activity = create_activity_factory(db_session, test_user)

    found = await test_client.get(f"/api/activities/{activity.id}")
    deleted = await test_client.delete(f"/api/activities/{activity.id}")
    missing = await test_client.get(f"/api/activities/{activity.id}")
    deleted_again = await test_client.delete(f"/api/activities/{activity.id}")

    assert found.status_code == 200
    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert deleted_again.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_activities(test_client: AsyncClient, db_session, test_user):
    other = create_user_factory(db_session)
    create_activity_factory(db_session, test_user)
    create_activity_factory(db_session, test_user)
    create_activity_factory(db_session, other)

    response = await test_client.delete(f"/api/activities/user/{test_user.email}")

    assert response.status_code == 200
    assert response.json()["data"] == {"deleted": 2}
    remaining = await test_client.get("/api/activities")
    assert remaining.json()["count"] == 1


@pytest.mark.asyncio
async def test_delete_user_activities_unknown_user(test_client: AsyncClient):
    response = await test_client.delete("/api/activities/user/nadie@ejemplo.com")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_all_activities(test_client: AsyncClient, db_session, test_user):
    create_activity_factory(db_session, test_user)
    create_activity_factory(db_session, test_user)

    response = await test_client.delete("/api/activities")

    assert response.json()["data"] == {"deleted": 2}
