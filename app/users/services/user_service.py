import logging
from typing import cast

from sqlalchemy import delete, insert, select, update

from app.achievements.models.achievement import Achievement
from app.activities.models.activity import Activity
from app.core.datetime_utils import utcnow
from app.core.exceptions import ConflictError, ConstraintViolationError, NotFoundError
from app.db.store import Store
from app.progress.models.daily_progress import DailyProgress
from app.users.models.user import User
from app.users.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

users = User.__table__


class UserService:
    @staticmethod
    def list_users(store: Store) -> list[UserResponse]:
        """All users, most recently registered first."""
        rows = store.fetch_all(select(users).order_by(users.c.created_at.desc(), users.c.id.desc()))
        return [UserResponse.model_validate(dict(row)) for row in rows]

    @staticmethod
    def get_user(store: Store, user_id: int) -> UserResponse:
        row = store.fetch_one(select(users).where(users.c.id == user_id))
        if row is None:
            raise NotFoundError(f"No se encontró un usuario con ID {user_id}", resource="user")
        return UserResponse.model_validate(dict(row))

    @staticmethod
    def find_user_by_email(store: Store, email: str) -> UserResponse | None:
        row = store.fetch_one(select(users).where(users.c.email == email))
        return UserResponse.model_validate(dict(row)) if row is not None else None

    @staticmethod
    def get_user_by_email(store: Store, email: str) -> UserResponse:
        user = UserService.find_user_by_email(store, email)
        if user is None:
            raise NotFoundError(
                f"No se encontró un usuario con correo {email}", resource="user"
            )
        return user

    @staticmethod
    def create_user(store: Store, payload: UserCreate) -> UserResponse:
        """Register a user.

        Email uniqueness is decided by the unique index on users.email,
        not by a lookup beforehand.
        """
        try:
            result = store.execute(
                insert(users).values(
                    full_name=payload.full_name,
                    email=payload.email,
                    age=payload.age,
                )
            )
        except ConstraintViolationError as e:
            raise ConflictError(
                "Ya existe un usuario con este correo electrónico", resource="user"
            ) from e

        logger.info("User created: id=%s", result.inserted_id)
        return UserService.get_user(store, cast(int, result.inserted_id))

    @staticmethod
    def update_user(store: Store, user_id: int, payload: UserUpdate) -> UserResponse:
        """Update name and age. The email never changes."""
        result = store.execute(
            update(users)
            .where(users.c.id == user_id)
            .values(full_name=payload.full_name, age=payload.age, updated_at=utcnow())
        )
        if result.affected_rows == 0:
            raise NotFoundError(f"No se encontró un usuario con ID {user_id}", resource="user")

        logger.info("User updated: id=%s", user_id)
        return UserService.get_user(store, user_id)

    @staticmethod
    def delete_user(store: Store, user_id: int) -> None:
        """Delete a user together with its achievements, progress and activities.

        Dependents are removed explicitly so the outcome does not depend on
        the database enforcing ON DELETE CASCADE.
        """
        UserService.get_user(store, user_id)

        removed = {}
        for table in (Achievement.__table__, DailyProgress.__table__, Activity.__table__):
            result = store.execute(delete(table).where(table.c.user_id == user_id))
            removed[table.name] = result.affected_rows

        store.execute(delete(users).where(users.c.id == user_id))
        logger.info("User deleted: id=%s, dependents=%s", user_id, removed)
