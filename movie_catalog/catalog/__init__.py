"""Catalog product entity and mapping."""

from movie_catalog.catalog.mapper import to_product
from movie_catalog.catalog.product import CatalogProduct, InventoryDescriptor

__all__ = ["CatalogProduct", "InventoryDescriptor", "to_product"]
