"""Entry point for running bazelgen as a module.

Allows the package to be run as:
    python -m bazelgen
"""

import sys

from bazelgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
