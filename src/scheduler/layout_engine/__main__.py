"""Main module for running the layout engine."""

import sys

from layout_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
