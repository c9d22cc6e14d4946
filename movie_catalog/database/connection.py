"""Database connection management with SQLAlchemy 2.0.

Provides transactional sessions over a single engine shared
by the command run.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from movie_catalog.database.models import Base
from movie_catalog.settings import settings


class DatabaseConnection:
    """Owns the catalog engine and its session factory.

    Example:
        ```python
        db = DatabaseConnection()
        with db.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the connection.

        Args:
            engine: Existing engine; built from settings when omitted.
        """
        self._engine = engine or self._create_engine()
        self._session_factory = sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @staticmethod
    def _create_engine() -> Engine:
        """Create the SQLAlchemy engine from database settings.

        Returns:
            Engine, with pool sizing for server databases.
        """
        kwargs: dict[str, Any] = {"pool_pre_ping": True, "echo": settings.debug}
        if not settings.database.is_sqlite:
            kwargs.update(
                pool_size=settings.database.pool_size,
                max_overflow=settings.database.pool_overflow,
                pool_timeout=settings.database.pool_timeout,
            )
        return create_engine(settings.database.sync_url, **kwargs)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional session scope.

        Commits on success, rolls back on exception, and closes
        the session when done.

        Yields:
            SQLAlchemy Session instance.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create the catalog tables if they do not exist."""
        Base.metadata.create_all(self._engine)

    def dispose(self) -> None:
        """Dispose the connection pool."""
        self._engine.dispose()


_db: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """Get the shared DatabaseConnection, creating it on first call.

    Returns:
        DatabaseConnection instance.
    """
    global _db  # noqa: PLW0603
    if _db is None:
        _db = DatabaseConnection()
    return _db


def close_database() -> None:
    """Release the shared connection pool."""
    global _db  # noqa: PLW0603
    if _db is not None:
        _db.dispose()
        _db = None
