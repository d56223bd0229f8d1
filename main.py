#!/usr/bin/env python3
"""Convenience entry point for bazelgen.

    uv run main.py workspace --rules-version 1.2.3

For installed usage, prefer:
    bazelgen
    python -m bazelgen
"""

import sys

from bazelgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
