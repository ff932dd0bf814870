"""Entry point for ``python -m airportsim``."""

import sys

from airportsim.cli import main

if __name__ == "__main__":
    sys.exit(main())
