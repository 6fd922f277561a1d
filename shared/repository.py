"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
engine access and the translation of driver errors into StorageError.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Engine access via self._db
    - A transactional connection scope via self._connect()
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-Pydantic model mapping internally. Repositories do
    NOT perform authorization checks; the service layer does.

    Example:
        class CategoryRepository(BaseRepository[Category]):
            def get(self, category_id: int) -> Optional[Category]:
                with self._connect() as conn:
                    row = conn.execute(
                        select(categories).where(categories.c.id == category_id)
                    ).mappings().first()
                return self._map_to_category(row) if row else None
    """

    def __init__(self, db: Engine) -> None:
        """
        Initialize the repository with an engine.

        Args:
            db: SQLAlchemy engine whose pool serves every operation.
        """
        self._db = db

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        """
        Yield a connection inside a transaction.

        Commits on success, rolls back on exception. IntegrityError is
        re-raised untouched so callers can classify it (e.g. as a conflict);
        every other driver error becomes an opaque StorageError.
        """
        try:
            with self._db.begin() as conn:
                yield conn
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logger.exception("Database operation failed in %s", type(self).__name__)
            raise StorageError() from e

    @staticmethod
    def _unclassified(error: IntegrityError) -> StorageError:
        """Wrap a constraint violation no caller recognised."""
        logger.error("Unclassified constraint violation: %s", error.orig)
        return StorageError()
