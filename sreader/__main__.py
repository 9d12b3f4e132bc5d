"""
Entry point for running sreader as a module.

Usage:
    python -m sreader parse input.sx
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
