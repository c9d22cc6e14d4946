"""Catalog product configuration.

Fixed values every imported movie product receives.
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Catalog defaults for generated movie products.

    Attributes:
        default_price: Price of every new product.
        default_qty: Stock quantity of every new product.
        status_enabled: Status value for enabled, in-stock products.
        type_id: Product type identifier.
        attribute_set_id: Attribute set holding the movie attributes.
        category_id: Category new products are placed in.
        max_consecutive_failures: Stop the run after this many failed
            items in a row (0 disables the check).
    """

    default_price: float = Field(default=5.99, alias="CATALOG_DEFAULT_PRICE")
    default_qty: int = Field(default=100, alias="CATALOG_DEFAULT_QTY")
    status_enabled: int = Field(default=1, alias="CATALOG_STATUS_ENABLED")
    type_id: str = Field(default="virtual", alias="CATALOG_TYPE_ID")
    attribute_set_id: int = Field(default=9, alias="CATALOG_ATTRIBUTE_SET_ID")
    category_id: int = Field(default=3, alias="CATALOG_CATEGORY_ID")
    max_consecutive_failures: int = Field(
        default=0,
        ge=0,
        alias="CATALOG_MAX_CONSECUTIVE_FAILURES",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def record_defaults(self) -> dict[str, Any]:
        """Build the fixed fields shared by every merged movie record.

        Returns:
            Mapping of record keys to configured values.
        """
        return {
            "price": self.default_price,
            "qty": self.default_qty,
            "status": self.status_enabled,
            "type_id": self.type_id,
            "attribute_set_id": self.attribute_set_id,
            "category_ids": [self.category_id],
        }
