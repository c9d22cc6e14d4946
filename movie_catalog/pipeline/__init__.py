"""Popular movies import pipeline.

Usage:
    from movie_catalog.pipeline import GeneratePopularCommand

    report = GeneratePopularCommand(extractor, loader).run()
"""

from movie_catalog.pipeline.command import HEADER, GeneratePopularCommand, RunReport

__all__ = ["HEADER", "GeneratePopularCommand", "RunReport"]
