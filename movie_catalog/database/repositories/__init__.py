"""Repositories for catalog storage."""

from movie_catalog.database.repositories.base import BaseRepository
from movie_catalog.database.repositories.product import ProductRepository

__all__ = ["BaseRepository", "ProductRepository"]
