"""Utilities package: logging setup."""

from movie_catalog.utils.logger import set_level, setup_logger

__all__ = ["set_level", "setup_logger"]
