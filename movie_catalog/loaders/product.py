"""Catalog product loader.

Persists products only when their SKU is not stored yet;
an existing product is never overwritten.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movie_catalog.catalog.product import CatalogProduct
from movie_catalog.database.repositories import ProductRepository
from movie_catalog.loaders.base import BaseLoader, ItemResult, ItemStatus


class ProductLoader(BaseLoader):
    """Idempotent loader for catalog products.

    Each product is committed on its own so a failed item never
    undoes the ones before it.
    """

    name = "catalog.product"

    def __init__(
        self,
        session: Session,
        repository: ProductRepository | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            session: SQLAlchemy session instance.
            repository: Product repository, built on the session if omitted.
        """
        super().__init__(session)
        self._repository = repository or ProductRepository(session)

    def persist(self, product: CatalogProduct) -> ItemResult:
        """Store a product unless its SKU already exists.

        Args:
            product: Product to store.

        Returns:
            ADDED, SKIPPED when the SKU is already stored, or FAILED
            on a storage error.
        """
        try:
            existing = self._repository.find_by_sku(product.sku)
            if existing is not None:
                return self._skipped(product)

            self._repository.save(product)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            message = f"'{product.name}', with SKU: {product.sku} not added: {e}"
            self._record_error(message)
            return ItemResult(ItemStatus.FAILED, product.sku, product.name, message)

        self._record_insert()
        self._logger.debug(f"Stored product {product.sku}")
        return ItemResult(
            ItemStatus.ADDED,
            product.sku,
            product.name,
            f"Added '{product.name}', with SKU: {product.sku}",
        )

    def _skipped(self, product: CatalogProduct) -> ItemResult:
        """Build the result of an already stored product."""
        self._record_skip()
        message = f"'{product.name}', with SKU: {product.sku} not added, already in database."
        self._logger.debug(message)
        return ItemResult(ItemStatus.SKIPPED, product.sku, product.name, message)
