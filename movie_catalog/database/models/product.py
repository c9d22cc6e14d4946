"""Product model - stored catalog entry for an imported movie."""

from sqlalchemy import JSON, Boolean, Float, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movie_catalog.database.models.base import Base, TimestampMixin


class Product(Base, TimestampMixin):
    """Catalog product row.

    Attributes:
        id: Internal primary key.
        sku: Unique catalog identifier (TMDB movie ID).
        name: Product name (movie title).
    """

    __tablename__ = "catalog_products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sku: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)

    # Required fields
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    type_id: Mapped[str] = mapped_column(String(32), nullable=False)
    attribute_set_id: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=1)

    # Inventory
    qty: Mapped[int] = mapped_column(Integer, default=0)
    is_in_stock: Mapped[bool] = mapped_column(Boolean, default=True)
    manage_stock: Mapped[bool] = mapped_column(Boolean, default=True)

    description: Mapped[str | None] = mapped_column(Text)
    category_ids: Mapped[list[int]] = mapped_column(JSON, default=list)

    # Movie attributes
    year: Mapped[str | None] = mapped_column(String(4))
    vote_average: Mapped[float | None] = mapped_column(Float)
    genre: Mapped[str | None] = mapped_column(Text)
    actors: Mapped[str | None] = mapped_column(Text)
    director: Mapped[str | None] = mapped_column(Text)
    producer: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Product(id={self.id}, sku='{self.sku}', name='{self.name}')>"
