"""Merged record to catalog product mapping."""

from collections.abc import Mapping
from typing import Any

from movie_catalog.catalog.product import CatalogProduct, InventoryDescriptor
from movie_catalog.exceptions import ProductMappingError

_REQUIRED_FIELDS = ("name", "price", "qty", "status", "type_id", "attribute_set_id")


def to_product(record: Mapping[str, Any]) -> CatalogProduct:
    """Convert a merged movie record into a catalog product.

    Args:
        record: Merged movie record.

    Returns:
        CatalogProduct with required and custom attributes set.

    Raises:
        ProductMappingError: If the sku is empty or a required field
            is missing or malformed.
    """
    sku = record.get("sku")
    if sku is None or str(sku).strip() == "":
        raise ProductMappingError("Movie record has no SKU, not added.")

    missing = [key for key in _REQUIRED_FIELDS if key not in record]
    if missing:
        raise ProductMappingError(
            f"Movie record {sku} is missing fields: {', '.join(missing)}"
        )

    try:
        return CatalogProduct(
            sku=str(sku).strip(),
            name=str(record["name"]),
            price=float(record["price"]),
            type_id=str(record["type_id"]),
            attribute_set_id=int(record["attribute_set_id"]),
            inventory=InventoryDescriptor(
                qty=int(record["qty"]),
                is_in_stock=bool(record["status"]),
                manage_stock=True,
            ),
            status=int(record["status"]),
            description=str(record.get("description") or ""),
            category_ids=tuple(int(c) for c in record.get("category_ids") or ()),
            year=record.get("year"),
            vote_average=record.get("vote_average"),
            genre=record.get("genre") or "",
            actors=record.get("actors") or "",
            director=record.get("director") or "",
            producer=record.get("producer") or "",
        )
    except (TypeError, ValueError) as e:
        raise ProductMappingError(f"Movie record {sku} could not be mapped: {e}") from e
