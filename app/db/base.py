"""
Database base module - imports all models for Alembic migration detection.

This module imports all SQLAlchemy models to ensure they are registered
on ``Base.metadata`` before ``create_all`` or Alembic autogenerate runs.
While the imports appear unused, they are essential for both.
"""

from app.achievements.models.achievement import Achievement
from app.activities.models.activity import Activity
from app.progress.models.daily_progress import DailyProgress
from app.users.models.user import User

__all__ = [
    "User",
    "Activity",
    "DailyProgress",
    "Achievement",
]
