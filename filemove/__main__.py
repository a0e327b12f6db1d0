"""
Entry point for running the API as a module.

Usage: python -m filemove
"""

import sys

from .web.app import main

if __name__ == "__main__":
    sys.exit(main())
