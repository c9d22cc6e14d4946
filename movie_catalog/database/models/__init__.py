"""SQLAlchemy models for the catalog database."""

from movie_catalog.database.models.base import Base
from movie_catalog.database.models.product import Product

__all__ = ["Base", "Product"]
