import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import settings  # noqa: E402
from app.core.exceptions import ConflictError  # noqa: E402
from app.db.session import create_db_engine, create_session_factory, init_schema  # noqa: E402
from app.db.store import Store  # noqa: E402
from app.users.schemas.user import UserCreate  # noqa: E402
from app.users.services.user_service import UserService  # noqa: E402

SAMPLE_USERS = [
    {"full_name": "Mateo Ejemplo", "email": "mateo@ejemplo.com", "age": 8},
    {"full_name": "Ana Ejemplo", "email": "ana@ejemplo.com", "age": 10},
]


def seed_sample_users() -> None:
    engine = create_db_engine(settings.DATABASE_URL)
    init_schema(engine)
    db = create_session_factory(engine)()
    store = Store(db)
    try:
        for user_data in SAMPLE_USERS:
            try:
                user = UserService.create_user(store, UserCreate(**user_data))
            except ConflictError:
                print(f"  User already exists: {user_data['email']}")
                continue
            print(f"✓ Sample user created: {user.email} (id={user.id})")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    print("=" * 80)
    print(f"Seeding {settings.DATABASE_URL} with sample users...")
    print("=" * 80)

    seed_sample_users()

    print("=" * 80)
    print("Seeding complete!")
    print("=" * 80)
