"""Entry point of the package. Allows python -m movie_catalog."""

import sys

from movie_catalog.pipeline.cli import main

if __name__ == "__main__":
    sys.exit(main())
