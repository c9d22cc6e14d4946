"""Popular movies catalog generator.

Imports TMDB popular movies, enriched with details and credits,
as virtual products in a catalog database.
"""

__version__ = "1.0.0"
