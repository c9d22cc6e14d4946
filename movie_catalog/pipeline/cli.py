"""Command Line Interface for the popular movies import.

Provides the ``movies-generate-popular`` entry point with argument
parsing, wiring of settings, HTTP client and database session.
"""

import argparse
import sys
from collections.abc import Sequence

from movie_catalog.database import close_database, get_database
from movie_catalog.extractors.tmdb import (
    PopularMoviesExtractor,
    TMDBClient,
    TMDBConfigurationError,
    TMDBEndpoints,
)
from movie_catalog.loaders import ProductLoader
from movie_catalog.pipeline.command import GeneratePopularCommand, RunReport
from movie_catalog.settings import settings
from movie_catalog.utils import set_level, setup_logger

COMMAND_NAME = "movies:generatepopular"

EXIT_OK = 0
EXIT_ITEM_FAILURES = 1
EXIT_CONFIGURATION = 2

logger = setup_logger("movie_catalog.cli")


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


def _parse_cli_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments, defaults to sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="movies-generate-popular",
        description=(
            "Pulls popular movies from the TMDB API and populates them "
            "as virtual products in the catalog."
        ),
    )

    parser.add_argument(
        "--page",
        type=int,
        default=None,
        help=f"Popular list page (default: {settings.tmdb.page})",
    )

    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the catalog tables before importing",
    )

    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 when any item failed",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help=f"Log level (default: {settings.logging.level})",
    )

    args = parser.parse_args(argv)
    if args.page is not None and args.page < 1:
        parser.error("--page must be >= 1")
    return args


# =============================================================================
# COMMAND EXECUTION
# =============================================================================


def run_generate_popular(
    page: int | None = None,
    init_db: bool = False,
) -> RunReport:
    """Run the import with settings-based collaborators.

    Args:
        page: Popular list page override.
        init_db: Create tables first.

    Returns:
        RunReport of the run.

    Raises:
        TMDBConfigurationError: If no TMDB API key is configured.
    """
    if not settings.tmdb.is_configured:
        raise TMDBConfigurationError("TMDB_API_KEY is not configured")

    db = get_database()
    if init_db:
        db.create_tables()

    with TMDBClient() as client, db.session() as session:
        extractor = PopularMoviesExtractor(
            client,
            TMDBEndpoints.from_settings(settings.tmdb),
            settings.catalog.record_defaults(),
            default_page=settings.tmdb.page,
        )
        command = GeneratePopularCommand(
            extractor,
            ProductLoader(session),
            max_consecutive_failures=settings.catalog.max_consecutive_failures,
        )
        return command.run(page)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Command line arguments.

    Returns:
        Process exit status.
    """
    args = _parse_cli_arguments(argv)
    if args.log_level:
        set_level(args.log_level)

    logger.info(f"Running {COMMAND_NAME}")
    try:
        report = run_generate_popular(page=args.page, init_db=args.init_db)
    except TMDBConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION
    finally:
        close_database()

    if args.fail_on_error and report.has_failures:
        return EXIT_ITEM_FAILURES
    return EXIT_OK
