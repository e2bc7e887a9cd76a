"""Run Ghost from the terminal: ``python -m ghostgame N``."""

import sys

from ghostgame.cli import main

if __name__ == "__main__":
    sys.exit(main())
