# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared plumbing for the SQL repositories."""
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from debsoc.core.errors import StoreError, StoreErrorKind
from debsoc.core.logging import get_logger

logger = get_logger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        # SQLite hands back naive values; everything is stored as UTC.
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class SqlRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    @contextmanager
    def _begin(self) -> Iterator[Connection]:
        with self._translate_errors():
            with self._engine.begin() as conn:
                yield conn

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        with self._translate_errors():
            with self._engine.connect() as conn:
                yield conn

    @contextmanager
    def _translate_errors(self) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            logger.warning("Integrity violation: %s", exc.orig)
            raise StoreError(StoreErrorKind.CONFLICT, str(exc.orig)) from exc
        except (OperationalError, DBAPIError) as exc:
            logger.error("Database error: %s", exc)
            raise StoreError(StoreErrorKind.UNAVAILABLE, str(exc)) from exc

    def verify_connection(self) -> None:
        with self._connect() as conn:
            conn.execute(text("SELECT 1"))
