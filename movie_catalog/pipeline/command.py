"""Generate-popular command.

Drives the popular movies pipeline: fetch merged records, map
each one to a catalog product, persist it and report one
outcome line per item.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from movie_catalog.catalog import to_product
from movie_catalog.exceptions import ProductMappingError
from movie_catalog.extractors.tmdb import PopularMoviesExtractor
from movie_catalog.loaders import ItemResult, ItemStatus, ProductLoader
from movie_catalog.types import MergedMovieRecord
from movie_catalog.utils.logger import setup_logger

logger = setup_logger("movie_catalog.pipeline.command")

HEADER = "Generating virtual products for popular imdb films..."


@dataclass
class RunReport:
    """Ordered item outcomes of one command run.

    Attributes:
        results: One result per processed record.
        aborted: True when the run stopped on consecutive failures.
    """

    results: list[ItemResult] = field(default_factory=list)
    aborted: bool = False

    def _count(self, status: ItemStatus) -> int:
        return sum(1 for result in self.results if result.status is status)

    @property
    def added(self) -> int:
        return self._count(ItemStatus.ADDED)

    @property
    def skipped(self) -> int:
        return self._count(ItemStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ItemStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        """True if any item failed or the run was aborted."""
        return self.aborted or self.failed > 0


class GeneratePopularCommand:
    """Imports popular movies as virtual catalog products.

    Attributes:
        extractor: Popular movies extractor.
        loader: Idempotent product loader.
    """

    def __init__(
        self,
        extractor: PopularMoviesExtractor,
        loader: ProductLoader,
        writer: Callable[[str], None] = print,
        max_consecutive_failures: int = 0,
    ) -> None:
        """Initialize the command.

        Args:
            extractor: Source of merged movie records.
            loader: Product persister.
            writer: Receives each output line.
            max_consecutive_failures: Abort after this many failed items
                in a row; 0 never aborts.
        """
        self.extractor = extractor
        self.loader = loader
        self._write = writer
        self._max_consecutive_failures = max_consecutive_failures

    def run(self, page: int | None = None) -> RunReport:
        """Execute the import.

        Args:
            page: Popular list page, defaults to the configured page.

        Returns:
            RunReport with one result per record.
        """
        self._write(HEADER)
        self._write("")

        report = RunReport()
        consecutive_failures = 0

        for record in self.extractor.fetch_popular(page):
            result = self.process(record)
            report.results.append(result)
            self._write(result.message)

            consecutive_failures = consecutive_failures + 1 if result.failed else 0
            if self._should_abort(consecutive_failures):
                logger.error(f"Stopping after {consecutive_failures} consecutive failures")
                report.aborted = True
                break

        logger.info(
            f"Popular import done: added={report.added}, "
            f"skipped={report.skipped}, failed={report.failed}"
        )
        return report

    def process(self, record: MergedMovieRecord) -> ItemResult:
        """Map and persist a single record.

        Args:
            record: Merged movie record.

        Returns:
            Outcome of the item.
        """
        try:
            product = to_product(record)
        except ProductMappingError as e:
            logger.warning(str(e))
            return ItemResult(
                ItemStatus.FAILED,
                str(record.get("sku") or "") or None,
                record.get("name"),
                str(e),
            )
        return self.loader.persist(product)

    def _should_abort(self, consecutive_failures: int) -> bool:
        limit = self._max_consecutive_failures
        return limit > 0 and consecutive_failures >= limit
