"""Data-access primitives shared by every service.

``Store`` is a thin layer over a SQLAlchemy session that runs parameterized
Core statements and normalizes their outcome:

- ``execute`` for INSERT / UPDATE / DELETE, committed one statement at a time,
- ``fetch_one`` for singleton lookups,
- ``fetch_all`` for listings and aggregations.

"No matching row" and "zero rows affected" are ordinary results. Only
driver, connectivity, syntax and constraint failures raise, and they always
raise ``StoreError`` (``ConstraintViolationError`` for integrity failures).
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from fastapi import Depends
from sqlalchemy import CursorResult, Executable, RowMapping, literal, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConstraintViolationError, StoreError
from app.db.session import get_db

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a mutating statement."""

    inserted_id: int | None
    affected_rows: int


class Store:
    def __init__(self, db: Session):
        self.db = db

    def execute(
        self, statement: Executable, params: Mapping[str, Any] | None = None
    ) -> WriteResult:
        """Run a mutating statement in its own transaction."""
        try:
            result = cast(CursorResult[Any], self.db.execute(statement, params))
            inserted_id = None
            if result.is_insert and result.inserted_primary_key:
                inserted_id = result.inserted_primary_key[0]
            affected_rows = max(result.rowcount, 0)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Constraint violation: %s", e.orig)
            raise ConstraintViolationError(operation=type(statement).__name__.lower()) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Statement failed: %s", e)
            raise StoreError(operation=type(statement).__name__.lower()) from e

        return WriteResult(inserted_id=inserted_id, affected_rows=affected_rows)

    def fetch_one(
        self, query: Executable, params: Mapping[str, Any] | None = None
    ) -> RowMapping | None:
        """Return the first matching row, or None when nothing matches."""
        try:
            return self.db.execute(query, params).mappings().first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Query failed: %s", e)
            raise StoreError(operation="select") from e

    def fetch_all(
        self, query: Executable, params: Mapping[str, Any] | None = None
    ) -> list[RowMapping]:
        """Return every matching row in query order (possibly empty)."""
        try:
            return list(self.db.execute(query, params).mappings().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Query failed: %s", e)
            raise StoreError(operation="select") from e

    def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            row = self.fetch_one(select(literal(1).label("ok")))
        except StoreError:
            return False
        return row is not None and row["ok"] == 1


def get_store(db: Session = Depends(get_db)) -> Store:
    """FastAPI dependency wrapping the request session in a Store."""
    return Store(db)
