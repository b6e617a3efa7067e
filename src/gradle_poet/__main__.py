"""Entry point for running gradle-poet as a module.

Allows the package to be run as:
    python -m gradle_poet
"""

import sys

from gradle_poet.cli import main

if __name__ == "__main__":
    sys.exit(main())
