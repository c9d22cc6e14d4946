"""
Base repository with generic operations.

Provides a reusable base class for repositories.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from movie_catalog.database.models.base import Base

FieldValue = str | int | float | bool | None

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing common operations.

    Attributes:
        model: SQLAlchemy model class.
        session: Database session.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    def get_by_field(self, field_name: str, value: FieldValue) -> ModelT | None:
        """Retrieve entity by a specific field value.

        Args:
            field_name: Name of the field to filter on.
            value: Value to match.

        Returns:
            Entity instance or None if not found.
        """
        field = getattr(self.model, field_name)
        stmt = select(self.model).where(field == value)
        return self._session.scalars(stmt).first()

    def count(self) -> int:
        """Count total number of entities."""
        stmt = select(func.count()).select_from(self.model)
        result = self._session.execute(stmt).scalar()
        return result or 0

    def create(self, entity: ModelT) -> ModelT:
        """Persist a new entity.

        Args:
            entity: Entity instance to persist.

        Returns:
            Persisted entity with generated ID.
        """
        self._session.add(entity)
        self._session.flush()
        return entity
