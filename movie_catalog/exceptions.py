"""Exception hierarchy for the movie catalog generator."""


class CatalogError(Exception):
    """Base exception for catalog generation errors."""

    pass


class ProductMappingError(CatalogError):
    """Raised when a merged record cannot become a catalog product."""

    pass
