"""Catalog product entity.

Storage-independent representation of a movie product.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InventoryDescriptor:
    """Quantity and stock flags, always set together.

    Attributes:
        qty: Units in stock.
        is_in_stock: Stock status flag.
        manage_stock: Whether stock is tracked.
    """

    qty: int
    is_in_stock: bool
    manage_stock: bool = True


@dataclass(frozen=True)
class CatalogProduct:
    """Movie product ready to be persisted.

    Attributes:
        sku: Unique catalog identifier (the TMDB movie ID).
        name: Movie title.
        price: Sale price.
        type_id: Product type.
        attribute_set_id: Attribute set of the movie attributes.
        inventory: Quantity and stock flags.
        status: Product status value.
        description: Movie overview.
        category_ids: Categories the product belongs to.
        year: Release year.
        vote_average: TMDB rating.
        genre: Comma-joined genre names.
        actors: Comma-joined cast names.
        director: Comma-joined director names.
        producer: Comma-joined producer names.
    """

    sku: str
    name: str
    price: float
    type_id: str
    attribute_set_id: int
    inventory: InventoryDescriptor
    status: int = 1
    description: str = ""
    category_ids: tuple[int, ...] = field(default_factory=tuple)
    year: str | None = None
    vote_average: float | None = None
    genre: str = ""
    actors: str = ""
    director: str = ""
    producer: str = ""
