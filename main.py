#!/usr/bin/env python3
"""Convenience entry point for gradle-poet.

    uv run main.py render blueprints.toml

Equivalent to:
    uv run gradle-poet render blueprints.toml
    python -m gradle_poet render blueprints.toml
"""

import sys

from gradle_poet.cli import main

if __name__ == "__main__":
    sys.exit(main())
