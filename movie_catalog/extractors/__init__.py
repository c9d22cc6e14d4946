"""Extractors package."""

from movie_catalog.extractors.base import BaseExtractor, ExtractionResult

__all__ = ["BaseExtractor", "ExtractionResult"]
