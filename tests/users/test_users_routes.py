"""
E2E tests for the users API.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.achievements.models.achievement import Achievement
from app.activities.models.activity import Activity
from app.progress.models.daily_progress import DailyProgress
from app.users.models.user import User
from tests.utils.factories import create_activity_factory, create_progress_factory


def _new_user(**overrides):
    payload = {"full_name": "Lucía Pérez", "email": "lucia@ejemplo.com", "age": 9}
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
@pytest.mark.parametrize("age", [5, 12])
async def test_create_user_accepts_age_bounds(test_client: AsyncClient, age):
    response = await test_client.post("/api/users", json=_new_user(age=age))

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["age"] == age
    assert body["data"]["id"] > 0
    assert body["message"] == "Usuario creado exitosamente"


@pytest.mark.asyncio
@pytest.mark.parametrize("age", [4, 13])
async def test_create_user_rejects_age_out_of_range(test_client: AsyncClient, db_session, age):
    response = await test_client.post("/api/users", json=_new_user(age=age))

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert db_session.scalar(select(func.count(User.id))) == 0


@pytest.mark.asyncio
async def test_create_user_rejects_malformed_email(test_client: AsyncClient, db_session):
    response = await test_client.post("/api/users", json=_new_user(email="lucia.ejemplo.com"))

    assert response.status_code == 400
    fields = [e["field"] for e in response.json()["error"]["details"]["errors"]]
    assert "email" in fields
    assert db_session.scalar(select(func.count(User.id))) == 0


@pytest.mark.asyncio
async def test_create_user_normalizes_email(test_client: AsyncClient):
    response = await test_client.post("/api/users", json=_new_user(email="  Lucia@Ejemplo.COM "))

    assert response.status_code == 201
    assert response.json()["data"]["email"] == "lucia@ejemplo.com"


@pytest.mark.asyncio
async def test_create_user_duplicate_email_conflict(test_client: AsyncClient, test_user):
    response = await test_client.post("/api/users", json=_new_user(email=test_user.email))

    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_list_users(test_client: AsyncClient, test_user):
    await test_client.post("/api/users", json=_new_user())

    response = await test_client.get("/api/users")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert {u["email"] for u in body["data"]} == {"lucia@ejemplo.com", test_user.email}


@pytest.mark.asyncio
async def test_get_user_by_id_and_email(test_client: AsyncClient, test_user):
    by_id = await test_client.get(f"/api/users/{test_user.id}")
    by_email = await test_client.get("/api/users/email/MATEO@ejemplo.com")

    assert by_id.status_code == 200
    assert by_email.status_code == 200
    assert by_id.json()["data"] == by_email.json()["data"]


@pytest.mark.asyncio
async def test_get_user_not_found(test_client: AsyncClient):
    response = await test_client.get("/api/users/999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_get_user_by_malformed_email(test_client: AsyncClient):
    response = await test_client.get("/api/users/email/sin-arroba")

    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == "email"


@pytest.mark.asyncio
async def test_update_user(test_client: AsyncClient, test_user):
    response = await test_client.put(
        f"/api/users/{test_user.id}", json={"full_name": "Mateo Ejemplo Ruiz", "age": 9}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["full_name"] == "Mateo Ejemplo Ruiz"
    assert data["age"] == 9
    assert data["email"] == test_user.email


@pytest.mark.asyncio
async def test_update_missing_user(test_client: AsyncClient):
    response = await test_client.put("/api/users/999", json={"full_name": "Nadie", "age": 7})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_removes_dependents(test_client: AsyncClient, db_session, test_user):
    create_activity_factory(db_session, test_user, exercises_completed=12)
    create_progress_factory(db_session, test_user, date=test_user.created_at.date())
    verify = await test_client.post(
        "/api/achievements/verify", json={"user_email": test_user.email}
    )
    assert verify.json()["data"]["count"] == 1

    response = await test_client.delete(f"/api/users/{test_user.id}")

    assert response.status_code == 200
    assert response.json()["message"] == "Usuario eliminado exitosamente"
    for model in (User, Activity, DailyProgress, Achievement):
        assert db_session.scalar(select(func.count()).select_from(model)) == 0


@pytest.mark.asyncio
async def test_delete_missing_user(test_client: AsyncClient):
    response = await test_client.delete("/api/users/999")

    assert response.status_code == 404
