"""Product repository.

Looks up and stores catalog products keyed by SKU.
"""

from sqlalchemy.orm import Session

from movie_catalog.catalog.product import CatalogProduct
from movie_catalog.database.models import Product
from movie_catalog.database.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for catalog products."""

    model = Product

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def find_by_sku(self, sku: str) -> Product | None:
        """Retrieve a product by SKU.

        Args:
            sku: Catalog identifier.

        Returns:
            Stored product or None when absent.
        """
        return self.get_by_field("sku", sku)

    def save(self, product: CatalogProduct) -> Product:
        """Insert a catalog product.

        Args:
            product: Product to store.

        Returns:
            Persisted row.
        """
        return self.create(self._to_model(product))

    @staticmethod
    def _to_model(product: CatalogProduct) -> Product:
        """Build the ORM row of a catalog product."""
        return Product(
            sku=product.sku,
            name=product.name,
            price=product.price,
            type_id=product.type_id,
            attribute_set_id=product.attribute_set_id,
            status=product.status,
            qty=product.inventory.qty,
            is_in_stock=product.inventory.is_in_stock,
            manage_stock=product.inventory.manage_stock,
            description=product.description,
            category_ids=list(product.category_ids),
            year=product.year,
            vote_average=product.vote_average,
            genre=product.genre,
            actors=product.actors,
            director=product.director,
            producer=product.producer,
        )
