"""
Database engine factory for the relational store.

The engine owns a bounded pool of reusable connections. Its size and what
happens when every connection is checked out are constructor-time settings:

- db_pool_size: connections kept open in the pool
- db_max_overflow: extra connections opened under load, closed when returned
- db_pool_overflow: "queue" waits up to db_pool_timeout seconds for a free
  connection, "reject" fails immediately

Repositories never build their own engine; they receive one through the
service container.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# Module-level engine cache
_engine: Optional[Engine] = None


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """
    Build an engine from settings.

    Args:
        settings: Application settings carrying the database URL and pool options

    Returns:
        SQLAlchemy Engine with the configured pool
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        # In-memory SQLite is used for local runs and tests: one shared
        # connection so every checkout sees the same database.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=settings.db_echo, **kwargs)
        _enable_sqlite_foreign_keys(engine)
        return engine

    timeout = settings.db_pool_timeout if settings.db_pool_overflow == "queue" else 0
    logger.info(
        "Creating database engine (pool_size=%d, max_overflow=%d, overflow=%s, timeout=%.1fs)",
        settings.db_pool_size,
        settings.db_max_overflow,
        settings.db_pool_overflow,
        timeout,
    )
    return create_engine(
        url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=timeout,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """
    Get the process-wide engine, creating it on first use.

    Returns:
        Engine configured from get_settings()
    """
    global _engine

    if _engine is None:
        _engine = create_db_engine(get_settings())

    return _engine


def reset_engine_cache() -> None:
    """
    Dispose and forget the cached engine.

    Useful for testing or when configuration changes.
    """
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None
