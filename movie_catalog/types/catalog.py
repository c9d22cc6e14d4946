"""Catalog data types.

Merged movie record built from the three TMDB calls, ready
to be mapped into a catalog product.
"""

from typing import TypedDict


class MergedMovieRecord(TypedDict):
    """Movie record accumulated over popular, details and credits.

    Base fields come from the popular list, ``genre``, ``vote_average``
    and ``year`` from details, ``actors``, ``director`` and ``producer``
    from credits.
    """

    sku: int | str
    name: str
    description: str
    genre: str
    actors: str
    director: str
    producer: str
    vote_average: float | None
    year: str | None
    price: float
    qty: int
    status: int
    type_id: str
    attribute_set_id: int
    category_ids: list[int]
