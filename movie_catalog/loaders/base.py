"""Base loader class.

Provides the session, logger, per-item results and statistics
for loaders writing into the catalog database.
"""

from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy.orm import Session

from movie_catalog.utils.logger import setup_logger


class ItemStatus(str, Enum):
    """Final state of one processed item."""

    ADDED = "added"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemResult:
    """Outcome of processing one item.

    Attributes:
        status: Added, skipped or failed.
        sku: Item SKU when known.
        name: Item name when known.
        message: Human-readable outcome line.
    """

    status: ItemStatus
    sku: str | None
    name: str | None
    message: str

    @property
    def failed(self) -> bool:
        """True for failed items."""
        return self.status is ItemStatus.FAILED


@dataclass
class LoaderStats:
    """Statistics for a loader operation.

    Attributes:
        inserted: Number of new records inserted.
        skipped: Number of records skipped (already stored).
        errors: Number of failed records.
        error_messages: List of error descriptions.
    """

    inserted: int = 0
    skipped: int = 0
    errors: int = 0
    error_messages: list[str] = field(default_factory=list)


class BaseLoader:
    """Base class for loaders.

    Attributes:
        name: Loader identifier for logging.
    """

    name: str = "base"

    def __init__(self, session: Session) -> None:
        """Initialize loader with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session
        self._logger = setup_logger(f"movie_catalog.loader.{self.name}")
        self._stats = LoaderStats()

    @property
    def stats(self) -> LoaderStats:
        """Get current loader statistics."""
        return self._stats

    def _record_insert(self) -> None:
        """Record a successful insert."""
        self._stats.inserted += 1

    def _record_skip(self) -> None:
        """Record a skipped record."""
        self._stats.skipped += 1

    def _record_error(self, message: str) -> None:
        """Record an error with message.

        Args:
            message: Error description.
        """
        self._stats.errors += 1
        self._stats.error_messages.append(message)
        self._logger.warning(message)
