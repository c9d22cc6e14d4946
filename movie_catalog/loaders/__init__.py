"""Loaders package: persistence of catalog products."""

from movie_catalog.loaders.base import (
    BaseLoader,
    ItemResult,
    ItemStatus,
    LoaderStats,
)
from movie_catalog.loaders.product import ProductLoader

__all__ = [
    "BaseLoader",
    "ItemResult",
    "ItemStatus",
    "LoaderStats",
    "ProductLoader",
]
