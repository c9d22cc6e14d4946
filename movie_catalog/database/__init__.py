"""Catalog database package.

Usage:
    from movie_catalog.database import get_database, ProductRepository

    with get_database().session() as session:
        repository = ProductRepository(session)
"""

from movie_catalog.database.connection import (
    DatabaseConnection,
    close_database,
    get_database,
)
from movie_catalog.database.models import Base, Product
from movie_catalog.database.repositories import ProductRepository

__all__ = [
    "Base",
    "DatabaseConnection",
    "Product",
    "ProductRepository",
    "close_database",
    "get_database",
]
