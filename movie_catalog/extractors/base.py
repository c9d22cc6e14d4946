"""Base extractor abstract class.

Provides common logging and result tracking for extractors.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ExtractionResult:
    """Statistics of one extraction run.

    Attributes:
        source: Extractor name.
        count: Number of records produced.
        skipped: Number of input entries dropped.
        errors: Failure messages collected along the way.
        duration_seconds: Wall-clock duration.
    """

    source: str
    count: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        """True when no error was recorded."""
        return not self.errors


class BaseExtractor(ABC):
    """Abstract base class for extractors.

    Attributes:
        name: Extractor identifier (e.g., 'tmdb.popular').
        logger: Logger instance for this extractor.
    """

    name: str = "base"

    def __init__(self) -> None:
        """Initialize base extractor."""
        self._logger = logging.getLogger(f"movie_catalog.extractors.{self.name}")
        self._start_time: datetime | None = None
        self._extracted_count: int = 0
        self._skipped_count: int = 0
        self._errors: list[str] = []
        self._last_result: ExtractionResult | None = None

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def last_result(self) -> ExtractionResult | None:
        """Statistics of the most recent extraction."""
        return self._last_result

    @abstractmethod
    def extract(self, **kwargs: object) -> list:
        """Execute the extraction process.

        Args:
            **kwargs: Extractor-specific parameters.

        Returns:
            Extracted records.
        """
        pass

    def _start_extraction(self) -> None:
        """Mark the start of extraction."""
        self._start_time = datetime.now()
        self._extracted_count = 0
        self._skipped_count = 0
        self._errors = []
        self._logger.info(f"Starting {self.name} extraction")

    def _end_extraction(self) -> ExtractionResult:
        """Mark the end of extraction and store the result.

        Returns:
            ExtractionResult with final statistics.
        """
        duration = self._calculate_duration()
        self._logger.info(
            f"Completed {self.name} extraction: {self._extracted_count} items "
            f"({self._skipped_count} skipped) in {duration:.2f}s"
        )
        self._last_result = ExtractionResult(
            source=self.name,
            count=self._extracted_count,
            skipped=self._skipped_count,
            errors=list(self._errors),
            duration_seconds=duration,
        )
        return self._last_result

    def _calculate_duration(self) -> float:
        """Calculate extraction duration in seconds."""
        if self._start_time is None:
            return 0.0
        return (datetime.now() - self._start_time).total_seconds()

    def _log_warning(self, message: str) -> None:
        """Log and track a recoverable failure."""
        self._logger.warning(message)
        self._errors.append(message)
