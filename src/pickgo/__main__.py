"""Allow ``python -m pickgo``."""

import sys

from pickgo.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
