# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine factory and schema helpers.

The engine is built explicitly by the application lifespan (or a script)
and disposed by the same owner; nothing here keeps a module-level engine.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from debsoc.core.config import Settings
from debsoc.core.logging import get_logger
from debsoc.models.tables import RESET_ORDER, metadata

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(config: Settings) -> Engine:
    url = config.DATABASE_URL
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=config.POOL_SIZE,
        max_overflow=config.MAX_OVERFLOW,
        pool_recycle=config.POOL_RECYCLE,
    )


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)


def reset_data(engine: Engine) -> dict[str, int]:
    """Delete every row except TechHead accounts. Returns per-table counts."""
    counts: dict[str, int] = {}
    with engine.begin() as conn:
        for table in RESET_ORDER:
            result = conn.execute(table.delete())
            counts[table.name] = result.rowcount or 0
            logger.info("Reset: deleted %d rows from %s", counts[table.name], table.name)
    return counts
